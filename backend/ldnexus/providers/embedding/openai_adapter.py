"""OpenAI embedding adapter.

Alternative to the default Gemini provider, selected with
EMBEDDING_PROVIDER=openai.
"""

import contextlib
import time
from typing import TYPE_CHECKING

import openai
import structlog
from openai import AsyncOpenAI

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

# Models that accept a "dimensions" argument to shorten their vectors
_SHORTENABLE_MODEL_PREFIX = "text-embedding-3"


def _classify_openai_error(error: Exception) -> ProviderError:
    """Map OpenAI SDK exceptions to internal error taxonomy.

    Returns a ProviderError subclass instance (does not raise).
    APITimeoutError is a subclass of APIConnectionError, so timeouts
    land in TransientError.
    """
    if isinstance(error, openai.RateLimitError):
        retry_after = None
        if hasattr(error, "response") and error.response is not None:
            retry_header = error.response.headers.get("retry-after")
            if retry_header is not None:
                with contextlib.suppress(ValueError):
                    retry_after = float(retry_header)
        return RateLimitError(str(error), retry_after_seconds=retry_after)

    if isinstance(error, (openai.AuthenticationError, openai.PermissionDeniedError)):
        return AuthenticationError(str(error))

    if isinstance(error, (openai.APIConnectionError, openai.InternalServerError)):
        return TransientError(str(error))

    return ProviderError(str(error))


class OpenAIEmbeddingAdapter(EmbeddingProvider):
    """OpenAI adapter for text embeddings."""

    def __init__(self, config: "ProviderConfig") -> None:
        """Initialize OpenAI embedding adapter.

        Args:
            config: Provider configuration with OpenAI API key.
        """
        super().__init__(config)
        self.client = AsyncOpenAI(
            api_key=config.openai_api_key,
            timeout=config.embedding_timeout_seconds,
            max_retries=0,
        )
        self._model = config.embedding_model
        self._dimensions = config.embedding_dimensions

    @property
    def provider_name(self) -> str:
        """Return 'openai'."""
        return "openai"

    async def embed(self, texts: list[str]) -> EmbeddingResult:
        """Generate embeddings using OpenAI.

        Args:
            texts: List of texts to embed.

        Returns:
            EmbeddingResult with vectors in same order as input.

        Raises:
            ProviderError: Classified SDK failure.
        """
        request: dict = {"model": self._model, "input": texts}
        if self._model.startswith(_SHORTENABLE_MODEL_PREFIX):
            request["dimensions"] = self._dimensions

        start_time = time.monotonic()
        try:
            response = await self.client.embeddings.create(**request)
        except openai.OpenAIError as e:
            logger.warning(
                "embedding_request_failed",
                provider="openai",
                model=self._model,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise _classify_openai_error(e) from e

        vectors = [item.embedding for item in response.data]

        logger.debug(
            "embedding_request_complete",
            provider="openai",
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
        """Return embedding dimensions (e.g., 1536 for text-embedding-3-small)."""
        return self._dimensions
