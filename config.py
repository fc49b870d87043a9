"""Application configuration using pydantic-settings."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging goes to stderr; keep it quiet unless asked so the error
    # stream only carries the fatal message by default.
    LOG_LEVEL: str = "WARNING"

    # Exact decimal arithmetic
    DECIMAL_PRECISION: int = 28
    DECIMAL_MAX_EXPONENT: int = 28

    # Output formatting
    PRICE_PLACES: int = 2
    QUANTITY_PLACES: int = 8

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize LOG_LEVEL to an uppercase Python logging level."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"LOG_LEVEL must be one of {valid}, got {v!r}")
        return v.upper()

    @field_validator("DECIMAL_PRECISION", "DECIMAL_MAX_EXPONENT")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"must be at least 1, got {v}")
        return v

    @field_validator("PRICE_PLACES", "QUANTITY_PLACES")
    @classmethod
    def validate_places(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"decimal places cannot be negative, got {v}")
        return v


settings = Settings()
