"""Application configuration using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # System Configuration
    app_name: str = "DevTools"
    api_v1_prefix: str = "/api/v1"
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:8080"

    # Rate Limiting
    rate_limit_enabled: bool = True
    tool_rate_limit: str = "60 per minute"

    # UUID Tool
    uuid_max_count: int = 100

    # JWT Tool
    display_timezone: str = "UTC"  # Zone used for exp/iat/nbf display


settings = Settings()
