"""Environment variable configuration loader.

The environment source stores no snapshot. Every lookup reads the live
process environment, so variables set or removed after registration are
observed by later resolutions.
"""

import logging
import os
from typing import Any

from ..sources import ENVIRONMENT_SOURCE_NAME, ConfigurationSource, SourceKind

logger = logging.getLogger(__name__)


def build_environment_source() -> ConfigurationSource:
    """Create the environment variables source."""
    logger.debug("Created environment variables configuration source")
    return ConfigurationSource(
        name=ENVIRONMENT_SOURCE_NAME, kind=SourceKind.ENVIRONMENT_VARIABLES
    )


def lookup_environment(key: str) -> tuple[bool, Any]:
    """Check the live environment for a variable named exactly ``key``.

    Case sensitivity follows ``os.environ``: case-insensitive on Windows,
    case-sensitive elsewhere.

    Returns:
        ``(True, value)`` if the variable is set, ``(False, None)`` otherwise
    """
    value = os.environ.get(key)
    if value is None:
        return False, None
    return True, value
