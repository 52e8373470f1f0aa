"""Configuration management for s3-tools."""

from typing import Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: LogLevel = "WARNING"
    log_format: str = "json"
    otel_enabled: bool = False
    otel_service_name: str = "s3-tools"

    model_config = {
        "env_prefix": "S3_TOOLS_",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @field_validator("log_level", mode="before")
    @classmethod
    def normalise_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


settings = Settings()
