"""Hydrator configuration."""

from .manager import (
    get_hydration_config,
    load_hydration_config,
    reset_hydration_config,
    set_hydration_config,
)
from .schemas.hydration_schema import HydrationConfig

__all__: list[str] = [
    "HydrationConfig",
    "get_hydration_config",
    "load_hydration_config",
    "reset_hydration_config",
    "set_hydration_config",
]
