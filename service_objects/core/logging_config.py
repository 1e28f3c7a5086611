"""
Logging Configuration Module.

This module provides the central logging configuration dictionary for the
service manager and a helper that applies it.
"""

import logging
import logging.config
import os
from copy import deepcopy
from typing import Any

# Get log level from environment or default to INFO
LOG_LEVEL = os.getenv("SERVICE_OBJECTS_LOG_LEVEL", "INFO").upper()

LOGGING_CONFIG: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "[%(asctime)s] [%(levelname)s] [%(name)s] - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
        "detailed": {
            "format": "[%(asctime)s] [%(levelname)s] [%(name)s:%(lineno)d] - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": LOG_LEVEL,
            "formatter": "standard",
            "stream": "ext://sys.stdout",
        },
    },
    "loggers": {
        "service_objects": {
            "level": LOG_LEVEL,
            "handlers": ["console"],
            "propagate": False,
        },
    },
}


def setup_logging(config: dict[str, Any] | None = None, level: str | None = None) -> None:
    """
    Configure the logging system with the provided configuration or default.

    Args:
        config: Optional logging configuration dictionary to use instead of the default
        level: Optional level overriding the configured one for the package logger
    """
    config = deepcopy(config if config is not None else LOGGING_CONFIG)

    if level is not None:
        level = level.upper()
        for handler in config.get("handlers", {}).values():
            handler["level"] = level
        if "service_objects" in config.get("loggers", {}):
            config["loggers"]["service_objects"]["level"] = level

    # Apply the configuration
    logging.config.dictConfig(config)

    logger = logging.getLogger(__name__)
    logger.debug("Logging configured successfully")
