"""UAE regional matcher entry point.

Rule-based alternative to the generic matcher; never calls the embedding
API. Any failure during analysis or scoring yields a fixed neutral result
instead of an error.
"""

import logging
from dataclasses import dataclass, field

from ldnexus.schemas.matching import (
    JobPosting,
    ProfessionalProfile,
    UAEContextOverrides,
)
from ldnexus.services.uae_analysis import analyze_job, analyze_profile
from ldnexus.services.uae_scoring import (
    calculate_overall_score,
    calculate_sub_scores,
    generate_recommendations,
)

logger = logging.getLogger(__name__)

UAE_NEUTRAL_SCORE = 0.5
UAE_FALLBACK_RECOMMENDATION = (
    "Basic matching used - consider providing more detailed profile information"
)


@dataclass(frozen=True)
class UAEMatchResult:
    """UAE match: composite, sub-scores (all 0-1) and recommendations."""

    overall_score: float
    sector_score: float
    language_score: float
    format_score: float
    cultural_score: float
    recommendations: list[str] = field(default_factory=list)


def neutral_uae_result() -> UAEMatchResult:
    """Result returned when matching fails."""
    return UAEMatchResult(
        overall_score=UAE_NEUTRAL_SCORE,
        sector_score=UAE_NEUTRAL_SCORE,
        language_score=UAE_NEUTRAL_SCORE,
        format_score=UAE_NEUTRAL_SCORE,
        cultural_score=UAE_NEUTRAL_SCORE,
        recommendations=[UAE_FALLBACK_RECOMMENDATION],
    )


def compute_uae_match(
    profile: ProfessionalProfile,
    job: JobPosting,
    context: UAEContextOverrides | None = None,
) -> UAEMatchResult:
    """Match a professional to a job for the UAE market. Never raises.

    Args:
        profile: Professional profile.
        job: Job posting.
        context: Optional business-context overrides (emirate, company type,
            cultural sensitivity, compliance list).

    Returns:
        UAEMatchResult. The neutral result (all 0.5) if anything failed.
    """
    try:
        profile_analysis = analyze_profile(profile)
        job_analysis = analyze_job(job, context)
        scores = calculate_sub_scores(profile_analysis, job_analysis)

        return UAEMatchResult(
            overall_score=calculate_overall_score(scores),
            sector_score=scores.sector,
            language_score=scores.language,
            format_score=scores.format,
            cultural_score=scores.cultural,
            recommendations=generate_recommendations(
                profile_analysis, job_analysis, scores
            ),
        )
    except Exception:
        logger.exception("UAE matching failed, returning neutral result")
        return neutral_uae_result()
