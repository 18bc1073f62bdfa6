"""Settings for utilkit, loaded from ``UTILKIT_*`` environment variables."""

import logging
from functools import lru_cache

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from utilkit.core.exceptions import UtilkitConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class UtilkitSettings(BaseSettings):
    """Runtime configuration.

    Attributes:
        log_level: Level used when the CLI configures logging
        color_enabled: Emit ANSI escape codes from the color helpers
        catalog_table: Catalog relation queried by ``table_exists``
    """

    model_config = SettingsConfigDict(
        env_prefix="UTILKIT_",
        env_file=".env",
        extra="ignore",
    )

    log_level: str = "INFO"
    color_enabled: bool = True
    catalog_table: str = "information_schema.tables"

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got '{value}'"
            )
        return level

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


@lru_cache
def get_settings() -> UtilkitSettings:
    """Return the process-wide settings instance.

    Raises:
        UtilkitConfigurationError: If the environment holds invalid values
    """
    try:
        return UtilkitSettings()
    except ValidationError as e:
        setting = None
        errors = e.errors()
        if errors and errors[0].get("loc"):
            setting = str(errors[0]["loc"][0])
        raise UtilkitConfigurationError(
            f"Invalid utilkit configuration: {e.error_count()} error(s)",
            setting=setting,
        ) from e
