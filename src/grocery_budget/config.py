"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    edamam_app_id: str | None = None
    edamam_app_key: str | None = None
    edamam_base_url: str = "https://api.edamam.com"
    edamam_timeout_seconds: float = 3.0
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    daily_api_limit: int = 150
    catalog_path: str | None = None
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def edamam_configured(self) -> bool:
        """Whether Edamam credentials are present."""
        return bool(self.edamam_app_id and self.edamam_app_key)

    @property
    def supabase_configured(self) -> bool:
        """Whether a Supabase database is configured."""
        return bool(self.supabase_url and self.supabase_service_key)
