"""Structured logging for the hydrator using structlog."""

import logging
import os
import sys
from typing import Optional

import structlog

from config.manager import get_hydration_config
from config.schemas.hydration_schema import HydrationConfig

ROOT_LOGGER_NAME = "hydrator"

_configured = False


def setup_logging(
    log_dir: Optional[str] = None,
    log_filename: Optional[str] = None,
    log_level: Optional[str] = None,
    log_destination: Optional[str] = None,
    config: Optional[HydrationConfig] = None,
) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the hydrator using structlog.

    Explicit arguments win over the hydration configuration.

    :param log_dir: Directory where the log file will be stored.
    :param log_filename: Name of the log file.
    :param log_level: Logging level (e.g., DEBUG, INFO, WARNING, ERROR, CRITICAL).
    :param log_destination: Where to send logs ("file", "stdout", "both" or "none").
    :param config: Configuration to read defaults from.
    :return: Configured structlog logger instance.
    """
    global _configured

    config = config or get_hydration_config()
    log_dir = log_dir or config.log_dir
    log_filename = log_filename or config.log_filename
    log_level = (log_level or config.log_level).upper()
    log_destination = log_destination or config.log_destination

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.JSONRenderer(),
        ],
    )

    handlers: list[logging.Handler] = []
    if log_destination in ("file", "both"):
        os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(os.path.join(log_dir, log_filename)))

    if log_destination in ("stdout", "both"):
        handlers.append(logging.StreamHandler(sys.stdout))

    if not handlers:
        handlers.append(logging.NullHandler())

    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    stdlib_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(stdlib_logger.handlers):
        stdlib_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        stdlib_logger.addHandler(handler)
    stdlib_logger.setLevel(getattr(logging, log_level, logging.WARNING))
    stdlib_logger.propagate = False

    _configured = True
    return structlog.get_logger(ROOT_LOGGER_NAME)


def get_logger(name: str = ROOT_LOGGER_NAME) -> structlog.stdlib.BoundLogger:
    """
    Return a structlog logger without touching global logging state.

    Once the application has configured structlog, through ``setup_logging``
    or its own ``structlog.configure`` call, that configuration is used.
    Otherwise entries are rendered as JSON and handed to the stdlib logger
    of the same name, so the host's handlers and levels decide what is kept.

    :param name: Logger name, usually ``hydrator`` or a child of it.
    :return: Bound structlog logger.
    """
    if _configured or structlog.is_configured():
        return structlog.get_logger(name)
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


def reset_logging() -> None:
    """Forget that ``setup_logging`` ran; structlog's own configuration is left as is."""
    global _configured
    _configured = False
