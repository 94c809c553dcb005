"""File-based configuration loader.

Supports loading flat configuration mappings from StringData (``key = value``
lines), JSON object and CSV files. A missing file is not an error; a file
that exists but cannot be read or parsed raises a ``ConfigurationError``.
"""

import csv
import io
import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Optional, Union

from ..models.schemas import ResolverSettings
from ..sources import ConfigurationSource, FileFormat

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ConfigurationError(Exception):
    """Base exception for configuration errors."""

    def __init__(
        self,
        message: str,
        path: Optional[PathLike] = None,
        format: Optional[FileFormat] = None,
    ):
        super().__init__(message)
        self.path = None if path is None else str(path)
        self.format = format


class FileLoadError(ConfigurationError):
    """Exception raised when file loading fails."""

    pass


class FormatError(ConfigurationError):
    """Exception raised when file content is invalid for its declared format."""

    pass


class FileLoader:
    """Configuration file loader for StringData, JSON and CSV files."""

    def __init__(self, settings: Optional[ResolverSettings] = None):
        """Initialize the file loader.

        Args:
            settings: Resolver settings (encoding, CSV delimiter, comment prefix)
        """
        self.settings = settings or ResolverSettings()

    def load_file(
        self, file_path: PathLike, format: FileFormat = FileFormat.STRING_DATA
    ) -> Optional[ConfigurationSource]:
        """Load a configuration source from a single file.

        Args:
            file_path: Path to configuration file
            format: Declared file format

        Returns:
            Configuration source, or None if the file does not exist

        Raises:
            FileLoadError: If the file cannot be read
            FormatError: If the content does not parse in the declared format
        """
        path = Path(file_path)
        format = FileFormat(format)

        if not path.exists():
            logger.debug(f"Configuration file not found, skipping: {path}")
            return None

        if not path.is_file():
            raise FileLoadError(
                f"Failed to load {format.value} configuration from {path}: not a file",
                path=file_path,
                format=format,
            )

        try:
            content = path.read_text(encoding=self.settings.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise FileLoadError(
                f"Failed to read {format.value} configuration file {path}: {e}",
                path=file_path,
                format=format,
            ) from e

        try:
            data = self._parse_content(content, format)
        except (ValueError, RecursionError, csv.Error) as e:
            raise FormatError(
                f"Failed to parse {format.value} configuration file {path}: {e}",
                path=file_path,
                format=format,
            ) from e

        logger.info(
            f"Loaded configuration from {path} ({format.value}, {len(data)} keys)"
        )
        return ConfigurationSource(
            name=str(file_path), kind=format.source_kind, data=data
        )

    def load_multiple(
        self,
        file_paths: Iterable[PathLike],
        format: FileFormat = FileFormat.STRING_DATA,
    ) -> tuple[list[ConfigurationSource], list[ConfigurationError]]:
        """Load configuration sources from several files independently.

        Args:
            file_paths: Configuration file paths, in precedence order
            format: Declared format shared by all files

        Returns:
            Loaded sources in input order, and the errors for files that failed
        """
        sources = []
        failures = []

        for file_path in file_paths:
            try:
                source = self.load_file(file_path, format)
            except ConfigurationError as e:
                failures.append(e)
                continue

            if source is not None:
                sources.append(source)

        return sources, failures

    def _parse_content(self, content: str, format: FileFormat) -> dict[str, Any]:
        """Parse configuration content based on format.

        Raises:
            ValueError: If the content is invalid for the format
        """
        match format:
            case FileFormat.STRING_DATA:
                return self._parse_string_data(content)
            case FileFormat.JSON:
                return self._parse_json(content)
            case FileFormat.CSV:
                return self._parse_csv(content)

    def _parse_string_data(self, content: str) -> dict[str, Any]:
        config = {}

        for line_number, line in enumerate(content.splitlines(), start=1):
            stripped = line.strip()
            if not stripped or stripped.startswith(self.settings.comment_prefix):
                continue

            key, separator, value = stripped.partition("=")
            key = key.strip()
            if not separator or not key:
                raise ValueError(
                    f"line {line_number} is not in 'name = value' format: {stripped!r}"
                )

            config[key] = value.strip()

        return config

    def _parse_json(self, content: str) -> dict[str, Any]:
        # Decode errors are ValueErrors; very deep nesting raises RecursionError
        config = json.loads(content)

        if not isinstance(config, dict):
            raise ValueError(
                f"top-level JSON value must be an object, got {type(config).__name__}"
            )

        return config

    def _parse_csv(self, content: str) -> dict[str, Any]:
        reader = csv.DictReader(
            io.StringIO(content), delimiter=self.settings.csv_delimiter
        )

        if not reader.fieldnames:
            raise ValueError("CSV content has no header row")

        first_row = next(reader, None)
        if first_row is None:
            raise ValueError("CSV content has no data rows")

        return {name: first_row.get(name) for name in reader.fieldnames}
