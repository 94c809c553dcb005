"""Configuration source model.

A configuration source is a named provider of flat key/value data. Its kind
decides how a key is looked up: the environment kind queries the live process
environment, every other kind checks its own immutable ``data`` mapping.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Optional

DEFAULT_SOURCE_NAME = "Default Values"
ENVIRONMENT_SOURCE_NAME = "Environment Variables"

_EMPTY: Mapping[str, Any] = MappingProxyType({})


class SourceKind(str, Enum):
    """Closed set of configuration source kinds."""

    DEFAULT = "default"
    ENVIRONMENT_VARIABLES = "environment_variables"
    FILE_STRING_DATA = "file_string_data"
    FILE_JSON = "file_json"
    FILE_CSV = "file_csv"


class FileFormat(str, Enum):
    """Declared format of a configuration file."""

    STRING_DATA = "string_data"
    JSON = "json"
    CSV = "csv"

    @property
    def source_kind(self) -> SourceKind:
        match self:
            case FileFormat.STRING_DATA:
                return SourceKind.FILE_STRING_DATA
            case FileFormat.JSON:
                return SourceKind.FILE_JSON
            case FileFormat.CSV:
                return SourceKind.FILE_CSV


@dataclass(frozen=True)
class ConfigurationSource:
    """A named, typed configuration source.

    ``data`` is ``None`` for environment sources; for every other kind it is
    a read-only view over a private copy of the loader's mapping.
    """

    name: str
    kind: SourceKind
    data: Optional[Mapping[str, Any]] = field(default=None)

    def __post_init__(self):
        if self.kind is SourceKind.ENVIRONMENT_VARIABLES:
            object.__setattr__(self, "data", None)
        else:
            frozen = MappingProxyType(dict(self.data)) if self.data else _EMPTY
            object.__setattr__(self, "data", frozen)


@dataclass(frozen=True)
class ResolvedItem:
    """A resolved value together with the source that supplied it."""

    key: str
    value: Any
    source: ConfigurationSource
    index: int
