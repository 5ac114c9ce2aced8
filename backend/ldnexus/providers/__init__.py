"""Provider abstraction layer.

Exports:
    Error classes for provider error handling
    ProviderConfig for configuration
    Factory function for embedding provider instances
"""

from ldnexus.providers.config import ProviderConfig
from ldnexus.providers.errors import (
    AuthenticationError,
    ProviderError,
    RateLimitError,
    TransientError,
)
from ldnexus.providers.factory import create_embedding_provider

__all__ = [
    # Config
    "ProviderConfig",
    # Errors
    "ProviderError",
    "RateLimitError",
    "AuthenticationError",
    "TransientError",
    # Factory
    "create_embedding_provider",
]
