"""Abstract base class and types for embedding providers.

Batch-first interface: single-text embedding is ``embed([text])``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ldnexus.providers.config import ProviderConfig


@dataclass
class EmbeddingResult:
    """Result of embedding operation.

    Attributes:
        vectors: One embedding vector per input text, in same order.
        model: Model identifier used for embedding.
        dimensions: Number of dimensions in each vector.
    """

    vectors: list[list[float]]
    model: str
    dimensions: int


class EmbeddingProvider(ABC):
    """Abstract base class for embedding providers."""

    def __init__(self, config: "ProviderConfig") -> None:
        """Initialize with provider configuration.

        Args:
            config: Provider configuration including API keys.
        """
        self.config = config

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Short provider identifier used in log events."""
        ...

    @abstractmethod
    async def embed(self, texts: list[str]) -> EmbeddingResult:
        """Generate embeddings for a list of texts.

        Args:
            texts: List of strings to embed.

        Returns:
            EmbeddingResult with vectors in same order as input.

        Raises:
            AuthenticationError: If the API key is missing, invalid or expired.
            TransientError: On network failure or timeout.
            ProviderError: On any other API failure.
        """
        ...

    @property
    @abstractmethod
    def dimensions(self) -> int:
        """Return the embedding dimensions (e.g., 768)."""
        ...
