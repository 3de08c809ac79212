"""Logging for ProjectHub.

Every record carries the request it belongs to. Services bind their module
logger to the current ``RequestContext``::

    log = bind_context(logger, ctx)
    log.info("update_project was called")

which renders as::

    2026-01-01T12:00:00 [INFO] [projecthub.projects.service] [request_id=ab12 actor=7] update_project was called

Records logged outside a request (startup, registry construction) show ``-``
for both fields.
"""

import logging
import logging.handlers
import os
from typing import Any, MutableMapping, Tuple

ROOT_LOGGER_NAME = "projecthub"

DEFAULT_FORMAT = (
    "%(asctime)s [%(levelname)s] [%(name)s] "
    "[request_id=%(request_id)s actor=%(actor_id)s] %(message)s"
)
DEFAULT_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

NO_CONTEXT = "-"


class RequestContextFilter(logging.Filter):
    """Fill in request fields on records logged outside a request."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = NO_CONTEXT
        if not hasattr(record, "actor_id"):
            record.actor_id = NO_CONTEXT
        return True


class RequestLogger(logging.LoggerAdapter):
    """Logger bound to one request's id and acting user."""

    def __init__(self, logger: logging.Logger, ctx):
        super().__init__(logger, {"request_id": ctx.request_id, "actor_id": ctx.actor.id})

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def bind_context(logger: logging.Logger, ctx) -> RequestLogger:
    """Bind ``logger`` to a ``RequestContext``."""
    return RequestLogger(logger, ctx)


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    log_dir: str = "logs",
    level: str = "INFO",
    file_logging: bool = False,
    console_logging: bool = True,
    max_bytes: int = 10485760,  # 10MB
    backup_count: int = 5,
) -> logging.Logger:
    """Install handlers on the application logger.

    Module loggers from ``get_logger(__name__)`` propagate here.

    Raises:
        ValueError: If the level is not a standard logging level
    """
    logger = logging.getLogger(name)

    level_upper = level.upper()
    if level_upper not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise ValueError(
            f"Invalid log level: {level}. "
            f"Must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL"
        )
    logger.setLevel(getattr(logging, level_upper))

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    handlers = []
    if file_logging:
        os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.handlers.RotatingFileHandler(
            os.path.join(log_dir, f"{name}.log"), maxBytes=max_bytes, backupCount=backup_count
        ))
    if console_logging:
        handlers.append(logging.StreamHandler())

    formatter = logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(RequestContextFilter())
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
