"""Logging adapter implementing LoggingPort."""

from typing import Any

from domain.base.ports.logging_port import LoggingPort
from infrastructure.logging.logger import get_logger


class LoggingAdapter(LoggingPort):
    """Adapter that implements LoggingPort using the structlog logger."""

    def __init__(self, name: str = "hydrator", **context: Any) -> None:
        """Initialize with logger name and optional bound context."""
        self._name = name
        self._logger = get_logger(name).bind(**context) if context else get_logger(name)

    def bind(self, **context: Any) -> "LoggingAdapter":
        """Return an adapter whose entries carry extra context."""
        adapter = LoggingAdapter.__new__(LoggingAdapter)
        adapter._name = self._name
        adapter._logger = self._logger.bind(**context)
        return adapter

    def debug(self, event: str, **kwargs: Any) -> None:
        """Log debug event."""
        self._logger.debug(event, **kwargs)

    def info(self, event: str, **kwargs: Any) -> None:
        """Log info event."""
        self._logger.info(event, **kwargs)

    def warning(self, event: str, **kwargs: Any) -> None:
        """Log warning event."""
        self._logger.warning(event, **kwargs)

    def error(self, event: str, **kwargs: Any) -> None:
        """Log error event."""
        self._logger.error(event, **kwargs)
