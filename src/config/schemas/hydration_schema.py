"""Hydration configuration schema."""

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_DESTINATIONS = ("stdout", "file", "both", "none")
SUBTYPE_LOG_LEVELS = ("debug", "info", "warning")


class HydrationConfig(BaseModel):
    """Logging and diagnostics settings for model hydration."""

    log_level: str = Field("WARNING", description="Minimum level for hydrator log entries")
    log_destination: str = Field("stdout", description="Where to send logs: stdout, file, both or none")
    log_dir: str = Field("./logs", description="Directory for the log file")
    log_filename: str = Field("hydrator.log", description="Log file name")
    unknown_subtype_log_level: str = Field(
        "warning", description="Level used when a discriminator matches no registered subtype"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise and check the log level."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("log_destination")
    @classmethod
    def validate_log_destination(cls, v: str) -> str:
        destination = v.lower()
        if destination not in LOG_DESTINATIONS:
            raise ValueError(f"log_destination must be one of {', '.join(LOG_DESTINATIONS)}")
        return destination

    @field_validator("unknown_subtype_log_level")
    @classmethod
    def validate_unknown_subtype_log_level(cls, v: str) -> str:
        level = v.lower()
        if level not in SUBTYPE_LOG_LEVELS:
            raise ValueError(
                f"unknown_subtype_log_level must be one of {', '.join(SUBTYPE_LOG_LEVELS)}"
            )
        return level
