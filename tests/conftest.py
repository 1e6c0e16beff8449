import logging

import pytest
import structlog

from patternkit.domain.base.selection import RoundRobinSelector
from patternkit.infrastructure.registry import FactoryRegistry

PATTERNKIT_ENV_VARS = (
    "PATTERNKIT_CONFIG",
    "PATTERNKIT_SEED",
    "PATTERNKIT_LOG_LEVEL",
    "PATTERNKIT_LOG_DESTINATION",
    "PATTERNKIT_LOG_DIR",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's environment out of configuration tests."""
    for name in PATTERNKIT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Drop the handlers setup_logging installs and restore the root level."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


@pytest.fixture
def round_robin():
    return RoundRobinSelector()


@pytest.fixture
def registry():
    """A fresh registry, independent from the process-wide singleton."""
    return FactoryRegistry()
