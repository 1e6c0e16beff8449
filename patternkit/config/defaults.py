# patternkit/config/defaults.py
from typing import Any, Dict

CONFIG_PATH_ENV = "PATTERNKIT_CONFIG"

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0",

    # Logging configuration
    "logging": {
        "level": "${PATTERNKIT_LOG_LEVEL:WARNING}",
        "destination": "${PATTERNKIT_LOG_DESTINATION:console}",
        "file_path": "${PATTERNKIT_LOG_DIR:logs}/patternkit.log",
        "max_size_mb": 10,
        "backup_count": 5,
        "json_format": False
    },

    # Random selection
    "selection": {
        "seed": "${PATTERNKIT_SEED:}",
        "random_count": 1
    },

    # Inputs used when a command omits them
    "defaults": {
        "mission": "tutorial",
        "dish_base": "pizza"
    }
}
