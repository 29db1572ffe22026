"""
Configuration settings for nginx deployer.
"""
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from .exceptions import SettingsError


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    APP_NAME: str = Field(default="nginx-deployer", description="Application name")

    # Kubernetes Configuration
    K8S_NAMESPACE: str = Field(default="default", description="Default target namespace")
    K8S_CONTEXT: Optional[str] = Field(default=None, description="Kubernetes context")

    # Logging
    LOG_LEVEL: Literal["debug", "info", "warning", "error", "critical"] = Field(
        default="warning", description="Log level: debug|info|warning|error|critical"
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _lower_log_level(cls, value):
        return value.lower() if isinstance(value, str) else value

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        # .env in the working directory may belong to another tool
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process. Invalid values raise SettingsError."""
    try:
        return Settings()
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise SettingsError(problems) from e
