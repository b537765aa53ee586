"""Domain port for structured logging."""

from abc import ABC, abstractmethod
from typing import Any


class LoggingPort(ABC):
    """Logging interface injected into hydration calls.

    Events are short snake_case names; context goes in keyword arguments,
    e.g. ``logger.debug("unknown_enum_value", attribute="lifecycle_state")``.
    Any object exposing these methods (a structlog logger included) can be
    passed where a ``LoggingPort`` is expected.
    """

    @abstractmethod
    def debug(self, event: str, **kwargs: Any) -> None:
        """Log debug event."""

    @abstractmethod
    def info(self, event: str, **kwargs: Any) -> None:
        """Log info event."""

    @abstractmethod
    def warning(self, event: str, **kwargs: Any) -> None:
        """Log warning event."""

    @abstractmethod
    def error(self, event: str, **kwargs: Any) -> None:
        """Log error event."""
