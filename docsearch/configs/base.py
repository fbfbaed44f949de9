"""
Settings foundations.

BaseSettings fixes how every config module reads the environment and the
.env file. ServiceSettings holds the service-wide switches: runtime
environment, debug error detail, log level and the HTTP surface (API
prefix, CORS origins, bind address).

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class BaseSettings(PydanticBaseSettings):
    """Environment and .env loading shared by every settings class."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class ServiceSettings(BaseSettings):
    """Service-wide switches, read from unprefixed variables (DEBUG, LOG_LEVEL, ...)."""

    environment: str = Field(
        default="development",
        description="Deployment name shown in the startup log",
    )
    debug: bool = Field(
        default=False,
        description="Put internal error text in the `detail` of /query 500 responses",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level",
    )
    api_prefix: str = Field(
        default="/api/v1",
        description="Path prefix for the health, index-docs and query routers",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed by CORS, as a JSON list",
    )
    host: str = Field(default="0.0.0.0", description="Bind address when run directly")
    port: int = Field(default=8000, ge=1, le=65535, description="Bind port when run directly")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {v!r}")
        return level

    @field_validator("api_prefix")
    @classmethod
    def normalize_api_prefix(cls, v: str) -> str:
        prefix = v.strip().rstrip("/")
        if prefix and not prefix.startswith("/"):
            prefix = f"/{prefix}"
        return prefix
