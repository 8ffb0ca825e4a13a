"""Centralized logging configuration for sales_visuals.

Configures structured JSON logging for production environments
and human-readable logging for development/CLI usage.
"""

import copy
import logging
import logging.config
import os
from typing import Any


LOG_DIR = "logs"

# Default logging configuration
LOGGING_CONFIG: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
            "datefmt": "%Y-%m-%dT%H:%M:%S%z",
        },
        "console": {
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "console",
            "stream": "ext://sys.stderr",
        },
        "json_file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "json",
            "filename": f"{LOG_DIR}/sales_visuals.log",
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5,
        },
    },
    "loggers": {
        "sales_visuals": {
            "level": "DEBUG",
            "handlers": ["console", "json_file"],
            "propagate": False,
        },
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
}


def build_logging_config(
    json_output: bool = False, log_level: str = "INFO", log_to_file: bool = True
) -> dict[str, Any]:
    """Return a logging dictConfig with console overrides applied.

    Args:
        json_output: If True, use JSON formatter for console output (for production)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Keep the rotating JSON file handler

    Returns:
        A fresh config dict; the module default is never mutated
    """
    config = copy.deepcopy(LOGGING_CONFIG)

    if json_output:
        config["handlers"]["console"]["formatter"] = "json"

    if log_level:
        level = log_level.upper()
        config["handlers"]["console"]["level"] = level
        config["loggers"]["sales_visuals"]["level"] = level

    if not log_to_file:
        del config["handlers"]["json_file"]
        config["loggers"]["sales_visuals"]["handlers"] = ["console"]

    return config


def setup_logging(
    json_output: bool = False, log_level: str = "INFO", log_to_file: bool = True
) -> None:
    """Configure logging for the application.

    Args:
        json_output: If True, use JSON formatter for console output (for production)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Also write JSON logs to logs/sales_visuals.log
    """
    if log_to_file:
        os.makedirs(LOG_DIR, exist_ok=True)

    logging.config.dictConfig(
        build_logging_config(
            json_output=json_output, log_level=log_level, log_to_file=log_to_file
        )
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Configured logger instance

    Example:
        logger = get_logger(__name__)
        logger.info("Rendering report", extra={"year": 2024, "cells": 48})
    """
    return logging.getLogger(name)
