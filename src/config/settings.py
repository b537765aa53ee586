"""Settings source for the hydrator.

Values come from a flat ``hydrator_config.json`` or ``hydrator_config.toml``
in the working directory and from ``HYDRATOR_``-prefixed environment
variables, e.g. ``HYDRATOR_LOG_LEVEL=DEBUG``. Environment variables win over
file values. ``HYDRATOR_SETTINGS_FILES`` replaces the default file list.
"""

from collections.abc import Sequence
from typing import Optional

from dynaconf import Dynaconf

DEFAULT_SETTINGS_FILES = ["hydrator_config.json", "hydrator_config.toml"]


def build_settings(settings_files: Optional[Sequence[str]] = None) -> Dynaconf:
    """Create a settings object reading the given files, or the defaults."""
    return Dynaconf(
        envvar_prefix="HYDRATOR",
        envvar="HYDRATOR_SETTINGS_FILES",
        settings_files=list(settings_files or DEFAULT_SETTINGS_FILES),
        load_dotenv=True,
    )


settings = build_settings()
