"""Access to the validated hydration configuration."""

from collections.abc import Mapping
from typing import Any, Optional

from pydantic import ValidationError

from config.schemas.hydration_schema import HydrationConfig
from domain.base.exceptions import ConfigurationError

_config: Optional[HydrationConfig] = None


def load_hydration_config(source: Mapping[str, Any]) -> HydrationConfig:
    """
    Build a HydrationConfig from raw settings.

    Keys are matched case-insensitively; keys the schema does not declare
    are ignored.

    :param source: Raw settings, e.g. a dynaconf dump or a plain dict.
    :return: Validated configuration.
    :raises ConfigurationError: If a value fails validation.
    """
    known_fields = HydrationConfig.model_fields
    values = {key.lower(): value for key, value in source.items() if key.lower() in known_fields}
    try:
        return HydrationConfig(**values)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid hydration configuration: {e.error_count()} error(s)",
            error_code="INVALID_CONFIGURATION",
            details={"errors": [error["msg"] for error in e.errors()]},
        ) from e


def get_hydration_config() -> HydrationConfig:
    """Return the process configuration, loading it from settings on first use."""
    global _config
    if _config is None:
        from config.settings import settings

        _config = load_hydration_config(settings.as_dict())
    return _config


def set_hydration_config(config: HydrationConfig) -> None:
    """Replace the process configuration, e.g. from application bootstrap code."""
    global _config
    _config = config


def reset_hydration_config() -> None:
    """Forget the loaded configuration so the next access reloads it."""
    global _config
    _config = None
