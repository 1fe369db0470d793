"""Package metadata and naming constants."""

from ._version import __version__

PACKAGE_NAME = "gof-pattern-catalog"
PACKAGE_NAME_SHORT = "pattern-catalog"
PACKAGE_NAME_PYTHON = PACKAGE_NAME.replace("-", "_")
VERSION = __version__
DESCRIPTION = "Narrated Gang-of-Four design pattern demonstrations"

# Environment variable prefix used by configuration overrides
ENV_PREFIX = "PATTERN_CATALOG_"
