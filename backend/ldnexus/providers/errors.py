"""Provider error taxonomy.

Adapters translate SDK-specific exceptions into these classes so the
embedding client can tell a dead credential apart from a one-off failure:

- AuthenticationError: the key is missing, invalid or expired. The client
  disables itself until the process is restarted.
- RateLimitError / TransientError: this call failed, the next one may not.
- ProviderError: anything else the provider rejected.
"""


__all__ = [
    "ProviderError",
    "RateLimitError",
    "AuthenticationError",
    "TransientError",
]


class ProviderError(Exception):
    """Base class for all provider errors.

    All provider-specific exceptions should inherit from this class,
    allowing callers to catch all provider errors with a single handler.
    """

    pass


class RateLimitError(ProviderError):
    """Rate limit or quota exceeded for the embedding API."""

    def __init__(self, message: str, retry_after_seconds: float | None = None):
        """Initialize RateLimitError.

        Args:
            message: Error description from the provider.
            retry_after_seconds: Optional hint from provider on when to retry.
        """
        super().__init__(message)
        self.retry_after_seconds = retry_after_seconds


class AuthenticationError(ProviderError):
    """Invalid or expired API key.

    Not recoverable without operator action (a new key and a restart).
    """

    pass


class TransientError(ProviderError):
    """Temporary failure: connection error, timeout or 5xx response."""

    pass
