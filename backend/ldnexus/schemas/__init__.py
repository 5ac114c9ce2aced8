"""Pydantic request/response schemas for API endpoints."""

from ldnexus.schemas.matching import (
    GenericMatchRequest,
    GenericMatchResponse,
    JobPosting,
    ProfessionalProfile,
    UAEContextOverrides,
    UAEJobMatchesResponse,
    UAEJobsForProfessionalRequest,
    UAEMarketInsightsRequest,
    UAEMarketInsightsResponse,
    UAEMatchRequest,
    UAEMatchResponse,
    UAEProfessionalMatchesResponse,
    UAEProfessionalsForJobRequest,
)

__all__ = [
    # Matching inputs
    "JobPosting",
    "ProfessionalProfile",
    "UAEContextOverrides",
    # Generic matcher
    "GenericMatchRequest",
    "GenericMatchResponse",
    # UAE matcher
    "UAEMatchRequest",
    "UAEMatchResponse",
    "UAEJobsForProfessionalRequest",
    "UAEJobMatchesResponse",
    "UAEProfessionalsForJobRequest",
    "UAEProfessionalMatchesResponse",
    "UAEMarketInsightsRequest",
    "UAEMarketInsightsResponse",
]
