"""Application configuration loaded from environment variables.

Settings for the API, the embedding provider and the matchers. Uses
pydantic-settings for validation and .env file support.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API
    # 0.0.0.0 binds to all network interfaces (required for Docker containers)
    api_host: str = "0.0.0.0"  # nosec B104
    api_port: int = 8000

    # CORS
    allowed_origins: list[str] = ["http://localhost:3000"]

    # Application
    environment: str = "development"
    log_level: str = "INFO"

    # Embedding provider
    # No key for the selected provider means the generic matcher runs on
    # the keyword heuristic only.
    embedding_provider: Literal["gemini", "openai", "mock"] = "gemini"
    gemini_api_key: str = ""
    openai_api_key: str = ""
    # Empty model / None dimensions take the provider's defaults
    embedding_model: str = ""
    embedding_dimensions: int | None = Field(default=None, gt=0)
    embedding_timeout_seconds: float = Field(default=10.0, gt=0)

    # Matching
    uae_min_match_score: float = Field(default=0.3, ge=0.0, le=1.0)
    uae_default_limit: int = Field(default=5, ge=1, le=100)

    # Rate Limiting
    # Limits the embedding-backed endpoint to contain API cost
    # Format: "count/period" (e.g., "10/minute", "100/hour")
    rate_limit_matching: str = "30/minute"
    rate_limit_enabled: bool = True  # Disable for testing


settings = Settings()
