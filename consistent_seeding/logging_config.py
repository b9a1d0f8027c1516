# consistent_seeding/logging_config.py
import logging
import logging.config
from typing import Any, Dict, Optional


# Define a custom filter so the formatter can always reference %(seeder)s
class SeederNameFilter(logging.Filter):
    def filter(self, record):
        if not hasattr(record, "seeder"):
            record.seeder = "-"
        return True


LOGGING_CONFIG: Dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "filters": {
        "seeder_name_filter": {
            "()": SeederNameFilter,
        },
    },
    "formatters": {
        "default": {
            "format": "%(levelname)s %(asctime)s [%(name)s] [%(seeder)s] %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
        # Error records also carry the module and line that logged them
        "detailed": {
            "format": "%(levelname)s %(asctime)s [%(name)s] [%(module)s:%(lineno)d] - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        # Handles general logs (INFO, DEBUG, etc.)
        "default": {
            "formatter": "default",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
            "filters": ["seeder_name_filter"],
        },
        # Specifically for error logs with tracebacks
        "error": {
            "formatter": "detailed",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
            "level": "ERROR",
            "filters": ["seeder_name_filter"],
        },
    },
    "loggers": {
        "": {
            "handlers": ["default", "error"],
            "level": "WARNING",
        },
        "consistent_seeding": {
            "handlers": ["default", "error"],
            "level": "INFO",
            "propagate": False,
        },
        # SQLAlchemy echo output goes through the root handlers
        "sqlalchemy.engine": {
            "level": "WARNING",
        },
    },
}


def configure_logging(level: Optional[str] = None) -> None:
    """Apply ``LOGGING_CONFIG``, optionally overriding the package log level."""
    config = {**LOGGING_CONFIG, "loggers": dict(LOGGING_CONFIG["loggers"])}
    if level:
        config["loggers"]["consistent_seeding"] = {
            **config["loggers"]["consistent_seeding"],
            "level": level.upper(),
        }
    logging.config.dictConfig(config)
