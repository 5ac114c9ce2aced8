"""Matching schemas.

ProfessionalProfile and JobPosting are the inputs to both matchers. They
are transient: callers send them in the request body and nothing is stored.
The remaining models are request/response bodies for the matching router.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# Upper bound on free-text fields to keep keyword scans and embedding
# requests bounded
_MAX_TEXT_LENGTH = 20_000
_MAX_SHORT_TEXT_LENGTH = 500
_MAX_BATCH_SIZE = 200

Emirate = Literal[
    "abu_dhabi",
    "dubai",
    "sharjah",
    "ajman",
    "ras_al_khaimah",
    "fujairah",
    "umm_al_quwain",
    "multi_emirate",
]
CompanyType = Literal["multinational", "local", "sme", "startup", "government"]


# =============================================================================
# Matching inputs
# =============================================================================


class ProfessionalProfile(BaseModel):
    """L&D professional profile as seen by the matchers.

    Attributes:
        title: Professional headline (e.g., "L&D Manager").
        bio: Free-text biography.
        industry_focus: Industry the professional specializes in.
        location: Where the professional is based.
        years_experience: Years of professional experience.
        interests: Free-text interests.
    """

    model_config = ConfigDict(extra="forbid", from_attributes=True)

    id: int | None = None
    title: str | None = Field(default=None, max_length=_MAX_SHORT_TEXT_LENGTH)
    bio: str | None = Field(default=None, max_length=_MAX_TEXT_LENGTH)
    industry_focus: str | None = Field(default=None, max_length=_MAX_SHORT_TEXT_LENGTH)
    location: str | None = Field(default=None, max_length=_MAX_SHORT_TEXT_LENGTH)
    years_experience: int | None = Field(default=None, ge=0, le=80)
    interests: str | None = Field(default=None, max_length=_MAX_TEXT_LENGTH)


class JobPosting(BaseModel):
    """Job posting as seen by the matchers.

    Attributes:
        title: Job title.
        description: Full job description.
        requirements: Requirements text (experience, skills).
        job_type: Engagement type (e.g., "contract", "full-time").
        location: Job location or "Remote".
        max_compensation: Upper compensation bound, used by market insights.
    """

    model_config = ConfigDict(extra="forbid", from_attributes=True)

    id: int | None = None
    title: str | None = Field(default=None, max_length=_MAX_SHORT_TEXT_LENGTH)
    description: str | None = Field(default=None, max_length=_MAX_TEXT_LENGTH)
    requirements: str | None = Field(default=None, max_length=_MAX_TEXT_LENGTH)
    job_type: str | None = Field(default=None, max_length=_MAX_SHORT_TEXT_LENGTH)
    location: str | None = Field(default=None, max_length=_MAX_SHORT_TEXT_LENGTH)
    max_compensation: float | None = Field(default=None, ge=0)


class UAEContextOverrides(BaseModel):
    """Optional business-context overrides for the UAE matcher.

    Any field left unset is derived from the job text.
    """

    model_config = ConfigDict(extra="forbid")

    emirate: Emirate | None = None
    company_type: CompanyType | None = None
    cultural_sensitivity: float | None = Field(default=None, ge=0.0, le=1.0)
    compliance_requirements: list[str] | None = None


# =============================================================================
# Requests
# =============================================================================


class GenericMatchRequest(BaseModel):
    """Request body for POST /matching/score."""

    model_config = ConfigDict(extra="forbid")

    profile: ProfessionalProfile
    job: JobPosting


class UAEMatchRequest(BaseModel):
    """Request body for POST /matching/uae."""

    model_config = ConfigDict(extra="forbid")

    profile: ProfessionalProfile
    job: JobPosting
    context: UAEContextOverrides | None = None


class UAEJobsForProfessionalRequest(BaseModel):
    """Request body for POST /matching/uae/jobs.

    Attributes:
        profile: Professional to find jobs for.
        jobs: Candidate jobs to rank.
        limit: Maximum number of matches returned.
        sector: Optional filter; jobs whose description lacks it are skipped.
    """

    model_config = ConfigDict(extra="forbid")

    profile: ProfessionalProfile
    jobs: list[JobPosting] = Field(..., max_length=_MAX_BATCH_SIZE)
    limit: int | None = Field(default=None, ge=1, le=100)
    sector: str | None = Field(default=None, max_length=100)


class UAEProfessionalsForJobRequest(BaseModel):
    """Request body for POST /matching/uae/professionals."""

    model_config = ConfigDict(extra="forbid")

    job: JobPosting
    professionals: list[ProfessionalProfile] = Field(..., max_length=_MAX_BATCH_SIZE)
    limit: int | None = Field(default=None, ge=1, le=100)
    emirate: Emirate | None = None


class UAEMarketInsightsRequest(BaseModel):
    """Request body for POST /matching/uae/insights."""

    model_config = ConfigDict(extra="forbid")

    professionals: list[ProfessionalProfile] = Field(..., max_length=_MAX_BATCH_SIZE)
    jobs: list[JobPosting] = Field(..., max_length=_MAX_BATCH_SIZE)
    sector: str | None = Field(default=None, max_length=100)
    emirate: str | None = Field(default=None, max_length=100)


# =============================================================================
# Responses
# =============================================================================


class GenericMatchResponse(BaseModel):
    """Generic match score.

    Attributes:
        score: Match score in [0, 1].
        method: "embedding" when semantic similarity was used,
            "fallback" when the keyword heuristic produced the score.
    """

    score: float
    method: Literal["embedding", "fallback"]


class UAEMatchResponse(BaseModel):
    """UAE composite match with sub-scores in [0, 1]."""

    overall_score: float
    sector_score: float
    language_score: float
    format_score: float
    cultural_score: float
    recommendations: list[str]


class UAEJobMatch(BaseModel):
    """One ranked job for a professional. Scores are percentages (0-100)."""

    job: JobPosting
    match_score: int
    sector_score: int
    language_score: int
    format_score: int
    cultural_score: int
    match_strength: str
    recommendations: list[str]


class UAEJobMatchesResponse(BaseModel):
    """Ranked jobs for a professional."""

    matches: list[UAEJobMatch]
    total_found: int
    sector: str | None = None


class UAEProfessionalMatch(BaseModel):
    """One ranked professional for a job. Scores are percentages (0-100)."""

    professional: ProfessionalProfile
    match_score: int
    sector_score: int
    language_score: int
    format_score: int
    cultural_score: int
    match_strength: str
    recommendations: list[str]
    relevant_experience: list[str]


class FactorScore(BaseModel):
    """Average score of one matching factor across a result set."""

    factor: str
    score: int


class UAESearchInsights(BaseModel):
    """Aggregate view over a set of professional matches."""

    average_match_score: float
    top_matching_factors: list[FactorScore]
    improvement_suggestions: list[str]


class UAEProfessionalMatchesResponse(BaseModel):
    """Ranked professionals for a job."""

    matches: list[UAEProfessionalMatch]
    total_found: int
    emirate: str | None = None
    search_insights: UAESearchInsights


class UAEMarketInsightsResponse(BaseModel):
    """Market overview built from the supplied professionals and jobs."""

    market_overview: dict
    sector_analysis: dict | None = None
    emirate_analysis: dict | None = None
    recommendations: list[str]
    cultural_considerations: list[str]
    compliance_requirements: list[str]
