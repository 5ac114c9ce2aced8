"""Embedding client for the generic matcher.

Wraps an EmbeddingProvider with the availability state the matcher needs:

- initialize() probes the provider once at startup. A missing key or a
  failed probe leaves the client unavailable for the life of the process.
- embed() never raises. Empty text and an unavailable client return None
  without touching the network. A rejected credential flips the client to
  unavailable; any other failure returns None for that call only.

The client is passed into the matcher explicitly (app.state in the API,
a fresh instance per test), so there is no module-level provider state.
The availability flag has a single writer and only ever moves to False
outside initialize(), so concurrent calls need no lock.
"""

import structlog

from ldnexus.providers.embedding.base import EmbeddingProvider
from ldnexus.providers.errors import AuthenticationError
from ldnexus.schemas.matching import JobPosting, ProfessionalProfile

logger = structlog.get_logger()

# Separator between profile/job fields in the embedded text
FIELD_SEPARATOR = " | "

# Text sent by the startup liveness probe
_PROBE_TEXT = "test"


def build_profile_text(profile: ProfessionalProfile) -> str:
    """Join non-empty profile fields used for the profile embedding."""
    fields = [profile.title, profile.bio, profile.industry_focus]
    return FIELD_SEPARATOR.join(f for f in fields if f)


def build_job_text(job: JobPosting) -> str:
    """Join non-empty job fields used for the job embedding."""
    fields = [job.title, job.description, job.requirements, job.job_type, job.location]
    return FIELD_SEPARATOR.join(f for f in fields if f)


class EmbeddingClient:
    """Availability-aware front for an embedding provider.

    Attributes:
        provider: The wrapped provider, or None once the client is disabled.
    """

    def __init__(self, provider: EmbeddingProvider | None) -> None:
        """Create a client. Call initialize() before use.

        Args:
            provider: Provider to wrap. None means no credentials were
                configured; the client stays unavailable.
        """
        self.provider = provider
        self._available = False

    def is_available(self) -> bool:
        """Return True if embeddings can currently be requested."""
        return self._available and self.provider is not None

    async def initialize(self) -> bool:
        """Validate the provider with one trivial embedding request.

        Runs once per process lifecycle, not per request.

        Returns:
            True if the provider answered the probe, False otherwise.
        """
        if self.provider is None:
            logger.warning("embedding_provider_not_configured")
            self._available = False
            return False

        provider_name = self.provider.provider_name
        try:
            await self.provider.embed([_PROBE_TEXT])
        except Exception as e:
            logger.error(
                "embedding_provider_validation_failed",
                provider=provider_name,
                error=str(e),
                error_type=type(e).__name__,
            )
            self._disable()
            return False

        self._available = True
        logger.info("embedding_provider_validated", provider=provider_name)
        return True

    async def embed(self, text: str | None) -> list[float] | None:
        """Embed a single text.

        Args:
            text: Text to embed.

        Returns:
            The embedding vector, or None if the client is unavailable, the
            text is empty, or the request failed.
        """
        if not self.is_available():
            logger.debug("embedding_skipped_unavailable")
            return None

        if not text or not text.strip():
            logger.debug("embedding_skipped_empty_text")
            return None

        provider = self.provider
        try:
            result = await provider.embed([text])  # type: ignore[union-attr]
        except AuthenticationError as e:
            logger.error(
                "embedding_credentials_rejected",
                provider=provider.provider_name,  # type: ignore[union-attr]
                error=str(e),
            )
            self._disable()
            return None
        except Exception as e:
            logger.warning(
                "embedding_request_failed",
                provider=provider.provider_name,  # type: ignore[union-attr]
                error=str(e),
                error_type=type(e).__name__,
            )
            return None

        if not result.vectors:
            return None
        return result.vectors[0]

    async def embed_profile(self, profile: ProfessionalProfile) -> list[float] | None:
        """Embed a professional profile (title, bio, industry focus)."""
        return await self.embed(build_profile_text(profile))

    async def embed_job(self, job: JobPosting) -> list[float] | None:
        """Embed a job posting (title, description, requirements, type, location)."""
        return await self.embed(build_job_text(job))

    def _disable(self) -> None:
        """Mark the client unavailable and drop the provider."""
        self._available = False
        self.provider = None
