"""Configuration loader package.

Each loader turns one kind of input into configuration sources:
- Default values supplied directly by the caller
- The live process environment
- StringData, JSON and CSV files
"""

from .defaults import build_default_sources, normalize_mapping
from .env import build_environment_source, lookup_environment
from .file import ConfigurationError, FileLoader, FileLoadError, FormatError

__all__ = [
    "build_default_sources",
    "normalize_mapping",
    "build_environment_source",
    "lookup_environment",
    "FileLoader",
    "ConfigurationError",
    "FileLoadError",
    "FormatError",
]
