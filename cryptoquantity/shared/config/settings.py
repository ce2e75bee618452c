from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    LOG_LEVEL: str = Field(
        default="INFO", description="Logging level [DEBUG, INFO, WARNING, ERROR]"
    )

    JSON_LOGS: bool = Field(
        default=False,
        description="Should logs be in JSON format?",
    )

    LOGGER_LEVELS: dict[str, str] = Field(
        default_factory=dict,
        description="Per-logger level overrides, as JSON",
        examples=[{"cryptoquantity.adapters.serialization": "ERROR"}],
    )

    DEFAULT_PRECISION: int = Field(
        default=8,
        ge=0,
        description="Decimal places used when a precision isn't given explicitly",
    )

    MAX_PRECISION: int = Field(
        default=36,
        ge=0,
        le=300,
        description="Largest precision accepted by the precision service",
    )

    STRICT_PRECISION: bool = Field(
        default=False,
        description="Should mixing quantities of different precisions raise?",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        if value.upper() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid LOG_LEVEL '{value}'. Must be one of {VALID_LOG_LEVELS}"
            )
        return value.upper()

    @field_validator("LOGGER_LEVELS")
    @classmethod
    def validate_logger_levels(cls, value: dict[str, str]) -> dict[str, str]:
        normalized = {name: level.upper() for name, level in value.items()}
        for name, level in normalized.items():
            if level not in VALID_LOG_LEVELS:
                raise ValueError(
                    f"Invalid level '{level}' for logger '{name}'. "
                    f"Must be one of {VALID_LOG_LEVELS}"
                )
        return normalized

    @model_validator(mode="after")
    def validate_precision_relationships(self) -> "Settings":
        if self.DEFAULT_PRECISION > self.MAX_PRECISION:
            raise ValueError(
                f"DEFAULT_PRECISION ({self.DEFAULT_PRECISION}) "
                f"should not be greater than MAX_PRECISION ({self.MAX_PRECISION})"
            )
        return self


@lru_cache()
def get_settings() -> Settings:
    from cryptoquantity.shared.logging import get_logger

    logger = get_logger(__name__)

    try:
        settings = Settings()
        logger.debug("Settings loaded successfully")
        return settings

    except Exception as e:
        logger.error(f"Failed to load settings: {e}", exc_info=True)
        raise
