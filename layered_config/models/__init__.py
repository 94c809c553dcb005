"""Settings models for the layered configuration resolver."""

from .schemas import BaseConfig, LoggingSettings, LogLevel, ResolverSettings

__all__ = ["BaseConfig", "LoggingSettings", "LogLevel", "ResolverSettings"]
