"""Configuration management."""

from typing import Optional
from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Gemini API
    api_key: Optional[SecretStr] = None  # supplied via SNIPPET_REVIEW_API_KEY, never in source
    api_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    model_name: str = "gemini-2.5-flash-preview-05-20"
    request_timeout: float = 60.0

    # Retry
    max_attempts: int = 3
    base_delay: float = 1.0  # seconds, doubled on each retry

    # Review
    default_language: str = "Python"

    # Logging
    log_level: str = "INFO"
    verbose: bool = False

    model_config = SettingsConfigDict(
        env_prefix="SNIPPET_REVIEW_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def endpoint_url(self) -> str:
        """Generation endpoint for the configured model."""
        return f"{self.api_base_url.rstrip('/')}/models/{self.model_name}:generateContent"


# Global settings instance
settings = Settings()
