"""Configuration management for vultr-tools."""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    api_key: str | None = None
    api_url: str = "https://api.vultr.com/v2"
    timeout: float = 30.0
    per_page_default: int = Field(100, ge=1, le=500)

    log_level: str = "WARNING"
    otel_enabled: bool = False
    otel_service_name: str = "vultr-tools"

    model_config = {
        "env_prefix": "VULTR_",
        "case_sensitive": False,
    }


settings = Settings()
