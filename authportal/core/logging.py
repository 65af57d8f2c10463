# File: authportal/core/logging.py

"""
Logging setup shared by the web app and the CLI.

Console only: the portal keeps no state worth a log file.
"""

import logging
import logging.config
from typing import Optional

from authportal.core.config import settings


def setup_logging(service_name: str, log_level: Optional[str] = None) -> logging.Logger:
    """
    Configure the ``authportal`` logger tree and return the service logger.

    Args:
        service_name: Suffix for the returned logger (e.g. "api", "cli")
        log_level: Override log level (defaults to settings.log_level)
    """
    level = (log_level or settings.log_level).upper()

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "simple": {
                "format": "[%(levelname)s] %(name)s: %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "standard" if level == "DEBUG" else "simple",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "authportal": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
        },
    }
    logging.config.dictConfig(config)

    return logging.getLogger(f"authportal.{service_name}")
