"""Embedding provider module.

Exports:
    EmbeddingProvider: Abstract base class for embeddings
    EmbeddingResult: Result dataclass from embedding operations
    GeminiEmbeddingAdapter: Gemini implementation (default)
    OpenAIEmbeddingAdapter: OpenAI implementation
    MockEmbeddingProvider: Deterministic provider for tests
"""

from ldnexus.providers.embedding.base import EmbeddingProvider, EmbeddingResult
from ldnexus.providers.embedding.gemini_adapter import GeminiEmbeddingAdapter
from ldnexus.providers.embedding.mock_adapter import MockEmbeddingProvider
from ldnexus.providers.embedding.openai_adapter import OpenAIEmbeddingAdapter

__all__ = [
    "EmbeddingProvider",
    "EmbeddingResult",
    "GeminiEmbeddingAdapter",
    "MockEmbeddingProvider",
    "OpenAIEmbeddingAdapter",
]
