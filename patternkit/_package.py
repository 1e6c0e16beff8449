"""Package metadata and naming constants."""

PACKAGE_NAME = "patternkit"
__version__ = "1.0.0"
VERSION = __version__
DESCRIPTION = "Runnable Factory Method, Abstract Factory and Decorator pattern examples"

# Derived values
PACKAGE_NAME_PYTHON = PACKAGE_NAME.replace("-", "_")
