"""Layered configuration resolver.

Sources are consulted in the order they were registered; the first source
that contains a key supplies its value. Values are never merged across
sources.

Example:
    resolver = ConfigurationResolver()
    resolver.add_environment_source()
    resolver.add_file_source(["local.json", "shared.json"], FileFormat.JSON)
    resolver.add_default_source({"Timeout": "30"})
    timeout = resolver.resolve("Timeout")
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Optional, Union

from .loader.defaults import build_default_sources
from .loader.env import build_environment_source, lookup_environment
from .loader.file import ConfigurationError, FileLoader
from .models.schemas import ResolverSettings
from .registry import SourceRegistry
from .sources import ConfigurationSource, FileFormat, ResolvedItem, SourceKind

logger = logging.getLogger(__name__)

PathOrPaths = Union[str, Path, Iterable[Union[str, Path]]]


def lookup_source(source: ConfigurationSource, key: str) -> tuple[bool, Any]:
    """Look up ``key`` in a single source, dispatching on its kind.

    Returns:
        ``(True, value)`` on a hit, ``(False, None)`` otherwise
    """
    match source.kind:
        case SourceKind.ENVIRONMENT_VARIABLES:
            return lookup_environment(key)
        case (
            SourceKind.DEFAULT
            | SourceKind.FILE_STRING_DATA
            | SourceKind.FILE_JSON
            | SourceKind.FILE_CSV
        ):
            # Exact, case-sensitive member match
            if key in source.data:
                return True, source.data[key]
            return False, None
        case _:
            raise AssertionError(f"Unhandled source kind: {source.kind}")


class ConfigurationResolver:
    """Resolves configuration keys across an ordered set of sources."""

    def __init__(
        self,
        settings: Optional[ResolverSettings] = None,
        registry: Optional[SourceRegistry] = None,
    ):
        """Initialize the resolver.

        Args:
            settings: Resolver settings used when reading files
            registry: Source registry to use (a new empty one if None)
        """
        self.settings = settings or ResolverSettings()
        self._registry = registry if registry is not None else SourceRegistry()
        self._file_loader = FileLoader(self.settings)
        self.load_errors: list[ConfigurationError] = []

    @property
    def sources(self) -> tuple[ConfigurationSource, ...]:
        """Registered sources in precedence order."""
        return self._registry.snapshot()

    @property
    def count(self) -> int:
        return len(self._registry)

    def __len__(self) -> int:
        return len(self._registry)

    def add_default_source(self, values: Any) -> None:
        """Register one or several default value mappings.

        Args:
            values: A mapping-like object, or a list/tuple of them. Each
                becomes its own source, in the order given.
        """
        sources = build_default_sources(values)
        self._registry.extend(sources)
        logger.info(f"Added {len(sources)} default values source(s)")

    def add_environment_source(self) -> None:
        """Register the live process environment as a source."""
        self._registry.add(build_environment_source())
        logger.info("Added environment variables source")

    def add_file_source(
        self, paths: PathOrPaths, format: FileFormat = FileFormat.STRING_DATA
    ) -> None:
        """Register configuration files of a single declared format.

        Missing files are skipped silently. Files that fail to load are
        reported through the log and ``load_errors`` and are not registered;
        remaining paths are still processed.

        Args:
            paths: A file path or an iterable of file paths
            format: Declared format of every file in ``paths``
        """
        format = FileFormat(format)
        if isinstance(paths, (str, Path)):
            paths = [paths]

        sources, failures = self._file_loader.load_multiple(paths, format)

        for error in failures:
            logger.error(str(error))
        self.load_errors.extend(failures)

        self._registry.extend(sources)
        if sources:
            logger.info(f"Added {len(sources)} {format.value} file source(s)")

    def find(self, key: str) -> Optional[ResolvedItem]:
        """Find the first source containing ``key``.

        Returns:
            The resolved value with its source, or None if no source has it
        """
        for index, source in enumerate(self._registry.snapshot()):
            found, value = lookup_source(source, key)
            if found:
                logger.debug(
                    f"Resolved {key!r} from {source.name} ({source.kind.value})"
                )
                return ResolvedItem(key=key, value=value, source=source, index=index)

        logger.debug(f"Configuration key not found: {key!r}")
        return None

    def resolve(self, key: str, default: Any = None) -> Any:
        """Get the value of ``key`` from the highest precedence source.

        Args:
            key: Configuration key (exact match)
            default: Value returned when no source contains the key

        Returns:
            The first value found, or ``default``
        """
        item = self.find(key)
        return default if item is None else item.value

    def __contains__(self, key: str) -> bool:
        return self.find(key) is not None

    def clear_sources(self) -> None:
        """Remove every registered source and recorded load error."""
        self._registry.clear()
        self.load_errors = []
        logger.debug("Cleared all configuration sources")
