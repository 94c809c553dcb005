"""Logging configuration utilities for the layered configuration resolver."""

import logging
import logging.config
import os
from pathlib import Path
from typing import Optional, Union

import yaml

from ..models.schemas import LoggingSettings, LogLevel, ResolverSettings

DEFAULT_LOG_CFG_ENV_KEY = "LAYERED_CONFIG_LOG_CFG"
DEFAULT_HANDLER_NAME = "layered_config.console"

logger = logging.getLogger(__name__)


def setup_logging(
    config_path: Optional[Union[str, Path]] = None,
    settings: Optional[Union[LoggingSettings, ResolverSettings]] = None,
    env_key: str = DEFAULT_LOG_CFG_ENV_KEY,
    environment: Optional[str] = None,
) -> None:
    """Setup logging configuration.

    A YAML ``dictConfig`` file is used when one is found, either at
    ``config_path`` or at the path named by the ``env_key`` environment
    variable. Otherwise a console handler built from ``settings`` is
    installed on the root logger.

    Args:
        config_path: Path to the YAML logging configuration file
        settings: Logging settings for the default console setup, or resolver
            settings whose ``logging`` section is used
        env_key: Environment variable key for config path override
        environment: Environment name whose overrides section to apply
    """
    if isinstance(settings, ResolverSettings):
        settings = settings.logging
    settings = settings or LoggingSettings()

    if config_path is None:
        config_path = os.getenv(env_key)

    if config_path is None:
        _setup_default_logging(settings)
        return

    config_path = Path(config_path)
    if not config_path.exists():
        _setup_default_logging(settings)
        logger.warning(
            f"Logging config file {config_path} not found, using default configuration"
        )
        return

    try:
        with open(config_path, encoding="utf-8") as config_file:
            config = yaml.safe_load(config_file)

        # Apply environment-specific overrides
        if environment and environment in config:
            env_config = config.pop(environment)
            for section in ("formatters", "handlers", "loggers"):
                if section in env_config:
                    config.setdefault(section, {}).update(env_config[section])

        logging.config.dictConfig(config)

    except (OSError, yaml.YAMLError, ValueError, TypeError, AttributeError) as e:
        _setup_default_logging(settings)
        logger.warning(
            f"Error loading logging configuration from {config_path}: {e}; "
            "using default configuration"
        )


def _setup_default_logging(settings: LoggingSettings) -> None:
    """Install a console handler on the root logger.

    A handler installed by an earlier call is replaced, not duplicated.

    Args:
        settings: Logging level and format
    """
    formatter = logging.Formatter(settings.format, datefmt=settings.datefmt)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.set_name(DEFAULT_HANDLER_NAME)

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() == DEFAULT_HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()

    root_logger.setLevel(LogLevel(settings.level).value)
    root_logger.addHandler(console_handler)
