"""Matching API router.

Profiles and jobs travel in the request body; nothing is read from or
written to storage. Scoring failures never surface as errors: the generic
matcher falls back to the keyword heuristic and the UAE matcher to its
neutral result.
"""

from dataclasses import asdict

from fastapi import APIRouter, Request

from ldnexus.api.deps import EmbeddingClientDep
from ldnexus.core.config import settings
from ldnexus.core.errors import ValidationError
from ldnexus.core.rate_limiting import limiter
from ldnexus.core.responses import DataResponse
from ldnexus.schemas.matching import (
    GenericMatchRequest,
    GenericMatchResponse,
    UAEJobMatchesResponse,
    UAEJobsForProfessionalRequest,
    UAEMarketInsightsRequest,
    UAEMarketInsightsResponse,
    UAEMatchRequest,
    UAEMatchResponse,
    UAEProfessionalMatchesResponse,
    UAEProfessionalsForJobRequest,
)
from ldnexus.services.match_score import score_match
from ldnexus.services.uae_keywords import UAESector
from ldnexus.services.uae_market import (
    build_market_insights,
    rank_jobs_for_professional,
    rank_professionals_for_job,
)
from ldnexus.services.uae_match import compute_uae_match

router = APIRouter()

_KNOWN_SECTORS = tuple(s.value for s in UAESector)


def parse_sector_filter(sector: str | None) -> str | None:
    """Normalize a sector filter to the text searched for in job postings.

    Accepts the sector name in any case, with spaces or underscores
    ("Real Estate", "real_estate").

    Args:
        sector: Raw sector filter from the request body.

    Returns:
        Lowercase sector name with spaces, or None when no filter is set.

    Raises:
        ValidationError: If the sector is not a known UAE sector.
    """
    if sector is None:
        return None

    normalized = "_".join(sector.lower().split())
    if normalized not in _KNOWN_SECTORS:
        raise ValidationError(
            f"Unknown sector '{sector}'",
            details=[{"field": "sector", "allowed": list(_KNOWN_SECTORS)}],
        )
    return normalized.replace("_", " ")


@router.post("/score")
@limiter.limit(settings.rate_limit_matching)
async def score_generic_match(
    request: Request,  # noqa: ARG001 - Required by rate limiter
    body: GenericMatchRequest,
    client: EmbeddingClientDep,
) -> DataResponse[GenericMatchResponse]:
    """Score a professional against a job with the generic matcher.

    Security: Rate limited to contain embedding API cost.

    Args:
        request: HTTP request (required by rate limiter).
        body: Profile and job to compare.
        client: Process-wide embedding client.

    Returns:
        Score in [0, 1] and the method that produced it.
    """
    result = await score_match(body.profile, body.job, client)
    return DataResponse(
        data=GenericMatchResponse(score=result.score, method=result.method)
    )


@router.post("/uae")
def score_uae_match(body: UAEMatchRequest) -> DataResponse[UAEMatchResponse]:
    """Score a professional against a job with the UAE regional matcher."""
    result = compute_uae_match(body.profile, body.job, body.context)
    return DataResponse(data=UAEMatchResponse(**asdict(result)))


@router.post("/uae/jobs")
def find_uae_jobs(
    body: UAEJobsForProfessionalRequest,
) -> DataResponse[UAEJobMatchesResponse]:
    """Rank the supplied jobs for one professional.

    Args:
        body: Professional, candidate jobs, optional limit and sector filter.

    Returns:
        Top matches (percent scores) and the number of matches found.
    """
    matches, total = rank_jobs_for_professional(
        body.profile,
        body.jobs,
        sector=parse_sector_filter(body.sector),
        limit=body.limit or settings.uae_default_limit,
        min_score=settings.uae_min_match_score,
    )
    return DataResponse(
        data=UAEJobMatchesResponse(
            matches=matches,
            total_found=total,
            sector=body.sector,
        )
    )


@router.post("/uae/professionals")
def find_uae_professionals(
    body: UAEProfessionalsForJobRequest,
) -> DataResponse[UAEProfessionalMatchesResponse]:
    """Rank the supplied professionals for one job.

    Args:
        body: Job, candidate professionals, optional limit and emirate.

    Returns:
        Top matches, the number of matches found and search insights.
    """
    matches, total, insights = rank_professionals_for_job(
        body.job,
        body.professionals,
        emirate=body.emirate,
        limit=body.limit or settings.uae_default_limit,
        min_score=settings.uae_min_match_score,
    )
    return DataResponse(
        data=UAEProfessionalMatchesResponse(
            matches=matches,
            total_found=total,
            emirate=body.emirate,
            search_insights=insights,
        )
    )


@router.post("/uae/insights")
def get_uae_market_insights(
    body: UAEMarketInsightsRequest,
) -> DataResponse[UAEMarketInsightsResponse]:
    """Market overview over the supplied professionals and jobs."""
    return DataResponse(
        data=build_market_insights(
            body.professionals,
            body.jobs,
            sector=parse_sector_filter(body.sector),
            emirate=body.emirate,
        )
    )
