"""Mock embedding provider for testing.

Lets unit tests drive the embedding client and matcher without real APIs.
"""

from typing import Any

from ldnexus.providers.embedding.base import EmbeddingProvider, EmbeddingResult


class MockEmbeddingProvider(EmbeddingProvider):
    """Mock provider for embedding tests.

    Vectors are fixed (all 0.1 values) unless a per-text override is
    registered in ``vectors``. Setting ``error`` makes every call raise it,
    which is how tests simulate revoked keys and network failures.

    Attributes:
        calls: Record of all method invocations for test assertions.
        vectors: Optional mapping of input text to the vector to return.
        error: Exception raised by every embed() call while set.
    """

    MOCK_DIMENSIONS = 768

    def __init__(
        self,
        vectors: dict[str, list[float]] | None = None,
        error: Exception | None = None,
    ) -> None:
        """Initialize mock embedding provider.

        Note: Does not call super().__init__() - we don't need a config for mock.
        """
        self.calls: list[dict[str, Any]] = []
        self.vectors = dict(vectors) if vectors else {}
        self.error = error

    @property
    def provider_name(self) -> str:
        """Return 'mock'."""
        return "mock"

    async def embed(self, texts: list[str]) -> EmbeddingResult:
        """Generate mock embeddings.

        Args:
            texts: List of strings to embed.

        Returns:
            EmbeddingResult with mock vectors.

        Raises:
            Exception: The configured ``error``, if any.
        """
        self.calls.append(
            {
                "method": "embed",
                "texts": texts,
            }
        )

        if self.error is not None:
            raise self.error

        vectors = [
            self.vectors.get(text, [0.1] * self.MOCK_DIMENSIONS) for text in texts
        ]

        return EmbeddingResult(
            vectors=vectors,
            model="mock-embedding-model",
            dimensions=self.MOCK_DIMENSIONS,
        )

    @property
    def dimensions(self) -> int:
        """Return the mock embedding dimensions."""
        return self.MOCK_DIMENSIONS

    def assert_embedded(self, text: str) -> None:
        """Test helper to verify a text was embedded.

        Args:
            text: The text that should have been embedded.

        Raises:
            AssertionError: If the text was not embedded.
        """
        all_texts = []
        for call in self.calls:
            all_texts.extend(call["texts"])
        assert text in all_texts, f"Expected '{text}' to be embedded, got {all_texts}"
