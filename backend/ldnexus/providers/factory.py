"""Provider factory functions."""

import structlog

from ldnexus.providers.config import ProviderConfig
from ldnexus.providers.embedding.base import EmbeddingProvider
from ldnexus.providers.embedding.gemini_adapter import GeminiEmbeddingAdapter
from ldnexus.providers.embedding.mock_adapter import MockEmbeddingProvider
from ldnexus.providers.embedding.openai_adapter import OpenAIEmbeddingAdapter

logger = structlog.get_logger()


def create_embedding_provider(
    config: ProviderConfig | None = None,
) -> EmbeddingProvider | None:
    """Build the embedding provider selected by configuration.

    No singleton: the application lifespan owns the instance and hands it
    to an EmbeddingClient, tests build their own.

    Args:
        config: Optional provider configuration. If None, loads from
            environment.

    Returns:
        EmbeddingProvider instance, or None when the selected provider has
        no API key configured (matching then runs on the fallback scorer).

    Raises:
        ValueError: If the configured provider is unknown.
    """
    if config is None:
        config = ProviderConfig.from_env()

    if config.embedding_provider == "mock":
        return MockEmbeddingProvider()

    if config.embedding_provider not in ("gemini", "openai"):
        raise ValueError(f"Unknown embedding provider: {config.embedding_provider}")

    if not config.api_key:
        logger.warning(
            "embedding_api_key_missing",
            provider=config.embedding_provider,
        )
        return None

    if config.embedding_provider == "gemini":
        return GeminiEmbeddingAdapter(config)
    return OpenAIEmbeddingAdapter(config)
