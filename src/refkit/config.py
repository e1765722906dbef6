"""Runtime configuration for refkit."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(
        env_prefix="REFKIT_",
        env_file=".env",
        extra="ignore",
        validate_assignment=True,
    )

    app_name: str = "refkit"
    log_level: LogLevel = "INFO"
    directory_file: str | None = Field(
        default=None,
        description="Optional JSON file of user keys to names used by the lookup command.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


settings = Settings()
