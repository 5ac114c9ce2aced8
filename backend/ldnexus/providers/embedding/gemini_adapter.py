"""Google Gemini embedding adapter.

Default embedding provider (text-embedding-004, 768 dimensions).
Uses the unified google-genai SDK.
"""

import asyncio
import time
from typing import TYPE_CHECKING

import httpx
import structlog
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from ldnexus.providers.embedding.base import EmbeddingProvider, EmbeddingResult
from ldnexus.providers.errors import (
    AuthenticationError,
    ProviderError,
    RateLimitError,
    TransientError,
)

if TYPE_CHECKING:
    from ldnexus.providers.config import ProviderConfig

logger = structlog.get_logger()

# Error markers Google returns for a bad or revoked key
_INVALID_KEY_MARKERS = ("api_key_invalid", "api key not valid", "unauthenticated")


def _classify_gemini_error(error: Exception) -> ProviderError:
    """Map Gemini exceptions to internal error taxonomy."""
    if isinstance(
        error, (httpx.TimeoutException, httpx.TransportError, asyncio.TimeoutError)
    ):
        return TransientError(str(error))

    error_msg = str(error).lower()
    code = getattr(error, "code", None)

    if code in (401, 403) or any(m in error_msg for m in _INVALID_KEY_MARKERS):
        return AuthenticationError(str(error))
    if code == 429 or ("resource" in error_msg and "exhausted" in error_msg):
        return RateLimitError(str(error))
    if isinstance(error, genai_errors.ServerError) or "unavailable" in error_msg:
        return TransientError(str(error))
    return ProviderError(str(error))


class GeminiEmbeddingAdapter(EmbeddingProvider):
    """Gemini adapter for text embeddings."""

    def __init__(self, config: "ProviderConfig") -> None:
        """Initialize Gemini embedding adapter.

        Args:
            config: Provider configuration with Gemini API key.
        """
        super().__init__(config)
        # HttpOptions.timeout is in milliseconds
        self.client = genai.Client(
            api_key=config.gemini_api_key,
            http_options=types.HttpOptions(
                timeout=int(config.embedding_timeout_seconds * 1000)
            ),
        )
        self._model = config.embedding_model
        self._dimensions = config.embedding_dimensions

    @property
    def provider_name(self) -> str:
        """Return 'gemini'."""
        return "gemini"

    async def embed(self, texts: list[str]) -> EmbeddingResult:
        """Generate embeddings using Gemini.

        Args:
            texts: List of texts to embed.

        Returns:
            EmbeddingResult with vectors in same order as input.

        Raises:
            ProviderError: Classified SDK or transport failure. Exceptions
                from any transport are classified, so a rejected key is
                recognised by its message even outside genai.errors.
        """
        start_time = time.monotonic()
        try:
            response = await self.client.aio.models.embed_content(
                model=self._model,
                contents=texts,
            )
        except Exception as e:
            logger.warning(
                "embedding_request_failed",
                provider="gemini",
                model=self._model,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise _classify_gemini_error(e) from e

        vectors = [list(item.values or []) for item in response.embeddings or []]

        logger.debug(
            "embedding_request_complete",
            provider="gemini",
            model=self._model,
            text_count=len(texts),
            latency_ms=(time.monotonic() - start_time) * 1000,
        )

        return EmbeddingResult(
            vectors=vectors,
            model=self._model,
            dimensions=self._dimensions,
        )

    @property
    def dimensions(self) -> int:
        """Return embedding dimensions (768 for text-embedding-004)."""
        return self._dimensions
