"""Tests for default value configuration loader."""

from dataclasses import dataclass
from types import SimpleNamespace

import pytest
from pydantic import BaseModel

from layered_config.loader.defaults import (
    build_default_sources,
    iter_default_mappings,
    normalize_mapping,
)
from layered_config.sources import DEFAULT_SOURCE_NAME, SourceKind


@dataclass
class ServerDefaults:
    Host: str = "localhost"
    Port: int = 8080


class ClientDefaults(BaseModel):
    Retries: int = 3
    Timeout: float = 2.5


class TestNormalizeMapping:
    """Test cases for normalize_mapping."""

    def test_dict(self):
        """Test that a dictionary is copied as-is."""
        original = {"Data": "Hello, World!"}
        result = normalize_mapping(original)

        assert result == original
        assert result is not original

    def test_dataclass_instance(self):
        """Test that dataclass fields become keys."""
        assert normalize_mapping(ServerDefaults()) == {"Host": "localhost", "Port": 8080}

    def test_pydantic_model(self):
        """Test that pydantic model fields become keys."""
        assert normalize_mapping(ClientDefaults()) == {"Retries": 3, "Timeout": 2.5}

    def test_plain_object(self):
        """Test that an object's attributes become keys."""
        assert normalize_mapping(SimpleNamespace(Name="app")) == {"Name": "app"}

    def test_unsupported_value(self):
        """Test that a value without members is rejected."""
        with pytest.raises(TypeError):
            normalize_mapping(42)


class TestBuildDefaultSources:
    """Test cases for building default sources."""

    def test_single_mapping(self):
        """Test that one mapping produces one source."""
        sources = build_default_sources({"Data": "Hello, World!"})

        assert len(sources) == 1
        assert sources[0].kind == SourceKind.DEFAULT
        assert sources[0].name == DEFAULT_SOURCE_NAME
        assert sources[0].name == "Default Values"
        assert dict(sources[0].data) == {"Data": "Hello, World!"}

    def test_list_of_mappings_in_order(self):
        """Test that each list element becomes its own source, in order."""
        sources = build_default_sources([{"A": 1}, ServerDefaults(), {"A": 2}])

        assert [dict(s.data) for s in sources] == [
            {"A": 1},
            {"Host": "localhost", "Port": 8080},
            {"A": 2},
        ]

    def test_empty_list(self):
        """Test that an empty list produces no sources."""
        assert build_default_sources([]) == []
        assert list(iter_default_mappings([])) == []

    def test_source_data_is_read_only(self):
        """Test that source data cannot be modified after creation."""
        original = {"Key": "value"}
        source = build_default_sources(original)[0]

        with pytest.raises(TypeError):
            source.data["Key"] = "changed"

        original["Key"] = "changed"
        assert source.data["Key"] == "value"
