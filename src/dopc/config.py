"""Application configuration and settings management."""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="DOPC_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Delivery Order Price Calculator"
    api_prefix: str = "/api/v1"
    home_api_base_url: str = Field(
        default="https://consumer-api.development.dev.woltapi.com",
        description="Base URL of the Home Assignment API serving venue static and dynamic data.",
    )
    http_timeout_seconds: float = Field(
        default=8.0,
        gt=0.0,
        description="Per-call network timeout for upstream venue requests.",
    )
    fetch_deadline_seconds: float = Field(
        default=5.0,
        gt=0.0,
        description="Shared deadline for fetching both venue datasets of one price request.",
    )
    log_level: str = Field(default="INFO")
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("home_api_base_url", mode="after")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("log_level", mode="after")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: Any) -> tuple[str, ...]:
        """Accept a list of origins or a comma-separated string."""
        if value is None:
            return ()
        items = value.split(",") if isinstance(value, str) else value
        return tuple(str(item).strip() for item in items if str(item).strip())


settings = Settings()
