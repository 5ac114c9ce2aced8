"""Provider configuration management.

Centralized configuration for the embedding provider used by the
generic matcher.
"""

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ldnexus.core.config import Settings

# Per-provider defaults used when EMBEDDING_MODEL / EMBEDDING_DIMENSIONS
# are not set explicitly.
DEFAULT_EMBEDDING_MODELS: dict[str, tuple[str, int]] = {
    "gemini": ("text-embedding-004", 768),
    "openai": ("text-embedding-3-small", 1536),
    "mock": ("mock-embedding-model", 768),
}


@dataclass
class ProviderConfig:
    """Centralized provider configuration.

    Attributes:
        embedding_provider: Which embedding provider to use
            ("gemini", "openai", "mock").
        gemini_api_key: Google AI API key (loaded from environment).
        openai_api_key: OpenAI API key (loaded from environment).
        embedding_model: Embedding model identifier.
        embedding_dimensions: Vector dimensions produced by the model.
        embedding_timeout_seconds: Per-request timeout for embedding calls.
    """

    embedding_provider: str = "gemini"

    # API keys (loaded from environment)
    gemini_api_key: str | None = None
    openai_api_key: str | None = None

    # Embedding config
    embedding_model: str = "text-embedding-004"
    embedding_dimensions: int = 768
    embedding_timeout_seconds: float = 10.0

    @property
    def api_key(self) -> str | None:
        """Return the API key for the selected embedding provider."""
        if self.embedding_provider == "gemini":
            return self.gemini_api_key
        if self.embedding_provider == "openai":
            return self.openai_api_key
        return None

    @classmethod
    def from_env(cls) -> "ProviderConfig":
        """Load configuration from environment variables.

        Model and dimensions default per provider, so switching
        EMBEDDING_PROVIDER alone is enough.

        Returns:
            ProviderConfig instance with values from environment.
        """
        provider = os.getenv("EMBEDDING_PROVIDER", "gemini").lower()
        default_model, default_dimensions = DEFAULT_EMBEDDING_MODELS.get(
            provider, DEFAULT_EMBEDDING_MODELS["gemini"]
        )
        return cls(
            embedding_provider=provider,
            gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
            openai_api_key=os.getenv("OPENAI_API_KEY") or None,
            embedding_model=os.getenv("EMBEDDING_MODEL", default_model),
            embedding_dimensions=int(
                os.getenv("EMBEDDING_DIMENSIONS", str(default_dimensions))
            ),
            embedding_timeout_seconds=float(
                os.getenv("EMBEDDING_TIMEOUT_SECONDS", "10")
            ),
        )

    @classmethod
    def from_settings(cls, settings: "Settings") -> "ProviderConfig":
        """Build configuration from application settings (.env aware).

        Args:
            settings: Loaded application settings.

        Returns:
            ProviderConfig instance mirroring the embedding settings.
        """
        default_model, default_dimensions = DEFAULT_EMBEDDING_MODELS[
            settings.embedding_provider
        ]
        return cls(
            embedding_provider=settings.embedding_provider,
            gemini_api_key=settings.gemini_api_key or None,
            openai_api_key=settings.openai_api_key or None,
            embedding_model=settings.embedding_model or default_model,
            embedding_dimensions=settings.embedding_dimensions or default_dimensions,
            embedding_timeout_seconds=settings.embedding_timeout_seconds,
        )
