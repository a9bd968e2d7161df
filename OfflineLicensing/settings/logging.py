"""
Logging configuration for structured logging.

This module configures JSON logging for applications embedding the
license verifier.
"""

import logging
import logging.config
import sys

from pythonjsonlogger import jsonlogger


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter that adds the component name."""

    def add_fields(self, log_record, record, message_dict):
        """Add custom fields to log record."""
        super().add_fields(log_record, record, message_dict)
        log_record["component"] = record.name.split(".", 1)[0]
        log_record["level"] = record.levelname


def get_logging_config(environment: str = "development") -> dict:
    """
    Get logging configuration for the application.

    Args:
        environment: Environment name (development, production, test)

    Returns:
        ``logging.config.dictConfig`` dictionary
    """
    if environment == "test":
        log_level = "WARNING"
        formatter = "simple"
    else:
        log_level = "DEBUG" if environment == "development" else "INFO"
        formatter = "json"

    package_logger = {
        "handlers": ["console"],
        "level": log_level,
        "propagate": False,
    }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": CustomJsonFormatter,
                "format": "%(asctime)s %(name)s %(levelname)s %(message)s %(pathname)s %(lineno)d",
            },
            "simple": {
                "format": "{levelname} {name} {message}",
                "style": "{",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": formatter,
                "stream": sys.stdout,
            },
        },
        "root": {
            "handlers": ["console"],
            "level": log_level,
        },
        "loggers": {
            "core": dict(package_logger),
            "licenses": dict(package_logger),
            "OfflineLicensing": dict(package_logger),
        },
    }


def configure_logging(environment: str = "development") -> None:
    """Apply the logging configuration for the given environment."""
    logging.config.dictConfig(get_logging_config(environment))
    logging.getLogger(__name__).debug("Logging configured for %s", environment)
