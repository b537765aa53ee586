"""Domain ports."""

from .logging_port import LoggingPort

__all__: list[str] = ["LoggingPort"]
