"""
Structured logging configuration.
JSON output for log shipping, colored console output for development.
"""

import logging
import sys
from typing import Optional

import structlog
from pythonjsonlogger import jsonlogger

from src.config import settings
from src.config.constants import LOG_FORMAT_JSON
from src.utils.context import get_request_context


class RequestContextJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter adding service name and request context ids."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = record.created
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["service"] = settings.app_name
        log_record.update(get_request_context())


def add_context_to_log(logger, method_name, event_dict):
    """Structlog processor adding correlation/user/session ids."""
    event_dict.update(get_request_context())
    return event_dict


def configure_logging(log_level: Optional[str] = None) -> None:
    """
    Configure logging for the application.

    Args:
        log_level: Override log level from settings
    """
    level = (log_level or settings.log_level).upper()

    if settings.log_format == LOG_FORMAT_JSON:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            RequestContextJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
        )
        logging.root.handlers = [handler]
        logging.root.setLevel(level)
        renderer = structlog.processors.JSONRenderer()
    else:
        logging.basicConfig(
            level=level,
            format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            handlers=[logging.StreamHandler(sys.stdout)],
            force=True,
        )
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            add_context_to_log,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)
