"""Application settings loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strongly typed application configuration."""

    hf_api_key: str | None = Field(default=None, alias="HF_API_KEY")
    hf_api_url: str = Field(
        default="https://api-inference.huggingface.co/models", alias="HF_API_URL"
    )
    hf_status_url: str = Field(
        default="https://api-inference.huggingface.co/status", alias="HF_STATUS_URL"
    )
    hf_model: str = Field(default="microsoft/DialoGPT-medium", alias="HF_MODEL")
    hf_max_new_tokens: int = Field(default=500, alias="HF_MAX_NEW_TOKENS")
    hf_temperature: float = Field(default=0.7, alias="HF_TEMPERATURE")

    github_token: str | None = Field(default=None, alias="GITHUB_TOKEN")
    github_api_url: str = Field(default="https://api.github.com", alias="GITHUB_API_URL")

    environment: str = Field(default="development", alias="ENVIRONMENT")
    log_level: Literal["debug", "info", "warning", "error", "critical"] = Field(
        default="info", alias="LOG_LEVEL"
    )
    host: str = Field(default="127.0.0.1", alias="HOST")
    port: int = Field(default=8000, alias="PORT")

    inference_timeout: float = Field(
        default=30.0, alias="INFERENCE_TIMEOUT", description="Seconds"
    )
    publish_timeout: float = Field(default=15.0, alias="PUBLISH_TIMEOUT", description="Seconds")
    health_timeout: float = Field(default=5.0, alias="HEALTH_TIMEOUT", description="Seconds")

    generate_rate_limit: int = Field(default=10, alias="GENERATE_RATE_LIMIT")
    generate_rate_window: float = Field(
        default=60.0, alias="GENERATE_RATE_WINDOW", description="Seconds"
    )
    publish_rate_limit: int = Field(default=5, alias="PUBLISH_RATE_LIMIT")
    publish_rate_window: float = Field(
        default=60.0, alias="PUBLISH_RATE_WINDOW", description="Seconds"
    )
    max_publish_bytes: int = Field(default=1024 * 1024, alias="MAX_PUBLISH_BYTES")

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)


@lru_cache
def get_settings() -> Settings:
    """Return a cached instance of settings."""

    return Settings()
