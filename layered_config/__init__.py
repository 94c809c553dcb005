"""Layered configuration resolution.

Configuration sources (default values, StringData/JSON/CSV files and the
process environment) are registered in precedence order on a
``ConfigurationResolver``; resolving a key returns the value from the first
source that contains it.

The module-level functions operate on ``default_resolver``, a process-wide
instance for callers that do not pass a resolver around.
"""

from typing import Any

from .loader.file import ConfigurationError, FileLoadError, FormatError
from .models.schemas import LoggingSettings, ResolverSettings
from .registry import SourceRegistry
from .resolver import ConfigurationResolver, PathOrPaths
from .sources import (
    DEFAULT_SOURCE_NAME,
    ENVIRONMENT_SOURCE_NAME,
    ConfigurationSource,
    FileFormat,
    ResolvedItem,
    SourceKind,
)
from .utils.logging import setup_logging

__version__ = "1.0.0"

# Global resolver singleton
default_resolver = ConfigurationResolver()


def add_default_source(values: Any) -> None:
    default_resolver.add_default_source(values)


def add_environment_source() -> None:
    default_resolver.add_environment_source()


def add_file_source(
    paths: PathOrPaths, format: FileFormat = FileFormat.STRING_DATA
) -> None:
    default_resolver.add_file_source(paths, format)


def get_configuration_item(key: str, default: Any = None) -> Any:
    """Resolve ``key`` against the process-wide resolver."""
    return default_resolver.resolve(key, default)


def clear_sources() -> None:
    default_resolver.clear_sources()


__all__ = [
    "ConfigurationResolver",
    "ConfigurationSource",
    "ResolvedItem",
    "SourceKind",
    "FileFormat",
    "SourceRegistry",
    "ResolverSettings",
    "LoggingSettings",
    "ConfigurationError",
    "FileLoadError",
    "FormatError",
    "DEFAULT_SOURCE_NAME",
    "ENVIRONMENT_SOURCE_NAME",
    "default_resolver",
    "add_default_source",
    "add_environment_source",
    "add_file_source",
    "get_configuration_item",
    "clear_sources",
    "setup_logging",
]
