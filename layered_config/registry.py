"""Ordered registry of configuration sources."""

import threading
from collections.abc import Iterable, Iterator

from .sources import ConfigurationSource


class SourceRegistry:
    """Append-only, clearable sequence of configuration sources.

    Insertion order defines precedence. Sources are never reordered or
    deduplicated. Iteration walks a snapshot, so a concurrent ``clear()``
    cannot make an in-progress walk skip or repeat sources.
    """

    def __init__(self):
        self._sources: list[ConfigurationSource] = []
        self._lock = threading.RLock()

    def add(self, source: ConfigurationSource) -> None:
        with self._lock:
            self._sources.append(source)

    def extend(self, sources: Iterable[ConfigurationSource]) -> None:
        with self._lock:
            self._sources.extend(sources)

    def clear(self) -> None:
        with self._lock:
            self._sources = []

    def snapshot(self) -> tuple[ConfigurationSource, ...]:
        with self._lock:
            return tuple(self._sources)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sources)

    def __iter__(self) -> Iterator[ConfigurationSource]:
        return iter(self.snapshot())

    def __getitem__(self, index: int) -> ConfigurationSource:
        with self._lock:
            return self._sources[index]
