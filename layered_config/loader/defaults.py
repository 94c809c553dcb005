"""Default value configuration loader.

Turns literal mappings supplied by the caller into default sources. Records
such as dataclass instances and pydantic models are normalized into plain
dictionaries first.
"""

import dataclasses
import logging
from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import BaseModel

from ..sources import DEFAULT_SOURCE_NAME, ConfigurationSource, SourceKind

logger = logging.getLogger(__name__)


def normalize_mapping(value: Any) -> dict[str, Any]:
    """Convert a mapping-like object into a flat dictionary.

    Args:
        value: Mapping, pydantic model, dataclass instance or plain object

    Returns:
        Dictionary of the object's top-level members

    Raises:
        TypeError: If the object has no key/value representation
    """
    if isinstance(value, Mapping):
        return dict(value)

    if isinstance(value, BaseModel):
        return value.model_dump()

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}

    if hasattr(value, "__dict__") and not isinstance(value, type):
        return dict(vars(value))

    raise TypeError(f"Cannot use {type(value).__name__} as default values")


def iter_default_mappings(value: Any) -> Iterator[dict[str, Any]]:
    """Yield one normalized mapping per default source in ``value``.

    A list or tuple registers each element as its own source, in order.
    Anything else is treated as a single mapping.
    """
    if isinstance(value, (list, tuple)):
        for item in value:
            yield normalize_mapping(item)
    else:
        yield normalize_mapping(value)


def build_default_sources(value: Any) -> list[ConfigurationSource]:
    """Build default sources from one or several mappings."""
    sources = []

    for mapping in iter_default_mappings(value):
        sources.append(
            ConfigurationSource(
                name=DEFAULT_SOURCE_NAME, kind=SourceKind.DEFAULT, data=mapping
            )
        )
        logger.debug(f"Built default values source with {len(mapping)} keys")

    return sources
