"""Generic profile/job match score.

Two strategies:
1. Embedding similarity: embed profile and job, take the cosine
   similarity and map it onto [0, 1].
2. Keyword heuristic (fallback_score): used whenever either embedding is
   missing or anything in the embedding path fails.

A score is always produced. Failures are logged, never raised.
"""

import logging
import random
from dataclasses import dataclass
from typing import Literal

from ldnexus.schemas.matching import JobPosting, ProfessionalProfile
from ldnexus.services.embedding_client import EmbeddingClient
from ldnexus.services.fallback_score import calculate_fallback_score
from ldnexus.services.similarity import cosine_similarity, normalize_similarity

logger = logging.getLogger(__name__)

MatchMethod = Literal["embedding", "fallback"]


@dataclass(frozen=True)
class GenericMatchResult:
    """Generic match score and the strategy that produced it.

    Attributes:
        score: Match score in [0, 1].
        method: "embedding" or "fallback".
    """

    score: float
    method: MatchMethod


def _fallback(
    profile: ProfessionalProfile,
    job: JobPosting,
    rng: random.Random | None,
) -> GenericMatchResult:
    result = calculate_fallback_score(profile, job, rng=rng)
    return GenericMatchResult(score=result.total, method="fallback")


async def score_match(
    profile: ProfessionalProfile,
    job: JobPosting,
    client: EmbeddingClient,
    rng: random.Random | None = None,
) -> GenericMatchResult:
    """Score a profile against a job, preferring embeddings.

    Args:
        profile: Professional profile.
        job: Job posting.
        client: Embedding client. An unavailable client goes straight to
            the fallback heuristic without network traffic.
        rng: Jitter source for the fallback heuristic.

    Returns:
        GenericMatchResult with score in [0, 1].
    """
    try:
        profile_embedding = await client.embed_profile(profile)
        job_embedding = await client.embed_job(job)

        if profile_embedding is None or job_embedding is None:
            logger.info("Embeddings unavailable, using fallback match score")
            return _fallback(profile, job, rng)

        similarity = cosine_similarity(profile_embedding, job_embedding)
        score = max(0.0, min(1.0, normalize_similarity(similarity)))
        logger.debug("Embedding similarity %.3f -> score %.3f", similarity, score)
        return GenericMatchResult(score=score, method="embedding")
    except Exception:
        logger.exception("Embedding match failed, using fallback match score")
        return _fallback(profile, job, rng)


async def compute_generic_match(
    profile: ProfessionalProfile,
    job: JobPosting,
    client: EmbeddingClient,
    rng: random.Random | None = None,
) -> float:
    """Return the generic match score in [0, 1]. Never raises.

    See score_match() for arguments.
    """
    result = await score_match(profile, job, client, rng=rng)
    return result.score
