"""Shared fixtures for matching tests.

No database and no network: embeddings come from MockEmbeddingProvider
and fallback jitter from a stubbed random source.
"""

import random
from unittest.mock import MagicMock

import pytest

from ldnexus.providers.embedding.mock_adapter import MockEmbeddingProvider
from ldnexus.schemas.matching import JobPosting, ProfessionalProfile
from ldnexus.services.embedding_client import EmbeddingClient


@pytest.fixture(autouse=True)
def disable_rate_limiting():
    """Keep slowapi out of the way unless a test opts back in."""
    from ldnexus.core.rate_limiting import limiter

    original = limiter.enabled
    limiter.enabled = False
    yield
    limiter.enabled = original


@pytest.fixture
def zero_jitter_rng():
    """Random source whose uniform() always returns 0.0."""
    rng = MagicMock(spec=random.Random)
    rng.uniform.return_value = 0.0
    return rng


@pytest.fixture
def mock_embedding_provider():
    """Fresh mock embedding provider (all-0.1 vectors)."""
    return MockEmbeddingProvider()


@pytest.fixture
async def embedding_client(mock_embedding_provider):
    """Embedding client validated against the mock provider."""
    client = EmbeddingClient(mock_embedding_provider)
    await client.initialize()
    return client


@pytest.fixture
def ld_profile():
    """Dubai-based L&D specialist."""
    return ProfessionalProfile(
        title="Learning and Development Specialist",
        bio="Experienced in training and curriculum design with coaching background",
        industry_focus="Technology",
        location="Dubai",
        years_experience=6,
    )


@pytest.fixture
def ld_job():
    """L&D manager role matching ld_profile."""
    return JobPosting(
        title="Learning and Development Manager",
        description="Lead training programs for technology teams",
        requirements="5 years experience in curriculum and coaching",
        location="Dubai",
    )
