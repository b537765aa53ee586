"""Logging setup."""

from .logger import get_logger, reset_logging, setup_logging

__all__: list[str] = ["get_logger", "reset_logging", "setup_logging"]
