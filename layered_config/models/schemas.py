"""Pydantic settings models for the configuration resolver itself.

These models describe how the resolver reads files and how it logs. They do
not describe the application configuration being resolved, which stays an
opaque flat mapping.
"""

import codecs
import os
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_ENV_PREFIX = "LAYERED_CONFIG_"


class LogLevel(str, Enum):
    """Logging level enumeration."""

    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"


class BaseConfig(BaseModel):
    """Base configuration class with common functionality."""

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        use_enum_values=True,
    )


class LoggingSettings(BaseConfig):
    """Logging configuration used when no YAML logging config is present."""

    level: LogLevel = Field(default=LogLevel.INFO, description="Root logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format",
    )
    datefmt: str = Field(
        default="%Y-%m-%d %H:%M:%S",
        description="Date format for log messages",
    )


class ResolverSettings(BaseConfig):
    """Settings controlling how configuration files are read and parsed."""

    encoding: str = Field(
        default="utf-8-sig",
        description="Text encoding for configuration files (BOM tolerant)",
    )
    csv_delimiter: str = Field(
        default=",", min_length=1, max_length=1, description="CSV field delimiter"
    )
    comment_prefix: str = Field(
        default="#",
        min_length=1,
        description="Prefix marking comment lines in StringData files",
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings, description="Logging settings"
    )

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
        return v

    @classmethod
    def from_environment(
        cls, prefix: str = DEFAULT_ENV_PREFIX, environ: Optional[dict] = None
    ) -> "ResolverSettings":
        """Build settings from ``<prefix><FIELD>`` environment variables.

        Recognized variables are ``ENCODING``, ``CSV_DELIMITER``,
        ``COMMENT_PREFIX`` and ``LOG_LEVEL``. Unset variables keep their
        defaults.
        """
        env = os.environ if environ is None else environ
        values = {}

        for field_name in ("encoding", "csv_delimiter", "comment_prefix"):
            raw = env.get(f"{prefix}{field_name.upper()}")
            if raw is not None:
                values[field_name] = raw

        log_level = env.get(f"{prefix}LOG_LEVEL")
        if log_level is not None:
            values["logging"] = LoggingSettings(level=log_level.upper())

        return cls(**values)
