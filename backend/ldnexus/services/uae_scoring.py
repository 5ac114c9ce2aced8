"""UAE regional match scoring.

Component weights:
- Sector:    35%: Sector expertise and sector vocabulary
- Language:  25%: Arabic/English proficiency vs. requirements
- Format:    20%: Can deliver the format the job asks for
- Cultural:  20%: Cultural fit plus UAE residency tier

Total: 100%

Each sub-score is capped at 1.0. The composite is the plain weighted sum.
"""

from dataclasses import dataclass

from ldnexus.services.uae_analysis import UAEJobAnalysis, UAEProfileAnalysis
from ldnexus.services.uae_keywords import (
    UAE_SECTOR_KEYWORDS,
    TrainingFormat,
    UAEExperienceLevel,
    contains_keyword,
    proficiency_score,
)

# =============================================================================
# Component Weights
# =============================================================================

UAE_WEIGHT_SECTOR = 0.35
UAE_WEIGHT_LANGUAGE = 0.25
UAE_WEIGHT_FORMAT = 0.20
UAE_WEIGHT_CULTURAL = 0.20

_WEIGHT_SUM = UAE_WEIGHT_SECTOR + UAE_WEIGHT_LANGUAGE + UAE_WEIGHT_FORMAT + UAE_WEIGHT_CULTURAL

# RuntimeError survives python -O, unlike assert
if abs(_WEIGHT_SUM - 1.0) >= 0.001:
    raise RuntimeError(f"UAE match weights must sum to 1.0, got {_WEIGHT_SUM}")

# =============================================================================
# Component Constants
# =============================================================================

SECTOR_EXPERTISE_SCORE = 0.7
SECTOR_KEYWORD_WEIGHT = 0.3
ARABIC_KEYWORD_MULTIPLIER = 1.1

LANGUAGE_SHARE = 0.5  # per required language
PREFERRED_LANGUAGE_BONUS = 0.2
CULTURAL_COMMUNICATION_WEIGHT = 0.3

FORMAT_MATCH_SCORE = 0.8
FORMAT_MISMATCH_SCORE = 0.2
IN_PERSON_EXPERIENCE_BONUS = 0.2

EXPERIENCE_TIER_WEIGHT = 0.3
GOVERNMENT_EXPERIENCE_BONUS = 0.2

# =============================================================================
# Recommendation Thresholds
# =============================================================================

LOW_SECTOR_THRESHOLD = 0.5
HIGH_SECTOR_THRESHOLD = 0.8
LOW_LANGUAGE_THRESHOLD = 0.6
LOW_FORMAT_THRESHOLD = 0.5
LOW_CULTURAL_THRESHOLD = 0.6


@dataclass(frozen=True)
class UAESubScores:
    """The four UAE sub-scores, each in [0, 1]."""

    sector: float
    language: float
    format: float
    cultural: float


# =============================================================================
# Sub-scores
# =============================================================================


def calculate_sector_score(profile: UAEProfileAnalysis, job: UAEJobAnalysis) -> float:
    """Score sector fit (0-1).

    0.7 for declared expertise in the job's sector, plus up to 0.3 from the
    share of the sector vocabulary found in the profile title and bio.
    Arabic keyword hits count 1.1x.
    """
    score = 0.0
    if job.sector in profile.sectors:
        score += SECTOR_EXPERTISE_SCORE

    keywords = UAE_SECTOR_KEYWORDS[job.sector]
    profile_text = f"{profile.profile.title or ''} {profile.profile.bio or ''}".lower()

    english_matches = sum(
        1 for keyword in keywords.english if contains_keyword(profile_text, keyword)
    )
    arabic_matches = sum(1 for keyword in keywords.arabic if keyword in profile_text)

    keyword_score = (
        english_matches + arabic_matches * ARABIC_KEYWORD_MULTIPLIER
    ) / len(keywords.english)
    score += keyword_score * SECTOR_KEYWORD_WEIGHT

    return min(score, 1.0)


def calculate_language_score(profile: UAEProfileAnalysis, job: UAEJobAnalysis) -> float:
    """Score language fit (0-1)."""
    capability = profile.language
    requirement = job.language

    score = 0.0
    if requirement.arabic_required:
        score += proficiency_score(capability.arabic) * LANGUAGE_SHARE
    if requirement.english_required:
        score += proficiency_score(capability.english) * LANGUAGE_SHARE

    if (
        capability.preferred_language == requirement.preferred_language
        or capability.preferred_language == "bilingual"
    ):
        score += PREFERRED_LANGUAGE_BONUS

    score += capability.cultural_communication * CULTURAL_COMMUNICATION_WEIGHT

    return min(score, 1.0)


def calculate_format_score(profile: UAEProfileAnalysis, job: UAEJobAnalysis) -> float:
    """Score delivery-format fit (0-1)."""
    if job.training_format in profile.formats:
        score = FORMAT_MATCH_SCORE
    else:
        score = FORMAT_MISMATCH_SCORE

    if (
        job.training_format == TrainingFormat.IN_PERSON_UAE
        and profile.experience_level >= UAEExperienceLevel.EXPERIENCED_EXPAT
    ):
        score += IN_PERSON_EXPERIENCE_BONUS

    return min(score, 1.0)


def calculate_cultural_score(profile: UAEProfileAnalysis, job: UAEJobAnalysis) -> float:
    """Score cultural fit (0-1): base fit plus residency tier."""
    score = profile.cultural_fit
    score += (int(profile.experience_level) / 5) * EXPERIENCE_TIER_WEIGHT

    if (
        job.context.company_type == "government"
        and profile.experience_level >= UAEExperienceLevel.EXPERIENCED_EXPAT
    ):
        score += GOVERNMENT_EXPERIENCE_BONUS

    return min(score, 1.0)


def calculate_sub_scores(
    profile: UAEProfileAnalysis, job: UAEJobAnalysis
) -> UAESubScores:
    """Run all four sub-scorers."""
    return UAESubScores(
        sector=calculate_sector_score(profile, job),
        language=calculate_language_score(profile, job),
        format=calculate_format_score(profile, job),
        cultural=calculate_cultural_score(profile, job),
    )


# =============================================================================
# Composite
# =============================================================================


def calculate_overall_score(scores: UAESubScores) -> float:
    """Weighted composite of the four sub-scores.

    Operands are clamped to [0, 1] first so the composite stays in [0, 1].
    """

    def clamp(value: float) -> float:
        return max(0.0, min(1.0, value))

    return (
        clamp(scores.sector) * UAE_WEIGHT_SECTOR
        + clamp(scores.language) * UAE_WEIGHT_LANGUAGE
        + clamp(scores.format) * UAE_WEIGHT_FORMAT
        + clamp(scores.cultural) * UAE_WEIGHT_CULTURAL
    )


# =============================================================================
# Recommendations
# =============================================================================


def generate_recommendations(
    profile: UAEProfileAnalysis,
    job: UAEJobAnalysis,
    scores: UAESubScores,
) -> list[str]:
    """Produce human-readable next steps from threshold rules."""
    recommendations: list[str] = []
    sector = job.sector.value

    if scores.sector < LOW_SECTOR_THRESHOLD:
        recommendations.append(
            f"Consider gaining more experience in {sector} sector specific to UAE market"
        )

    if (
        scores.language < LOW_LANGUAGE_THRESHOLD
        and job.language.arabic_required
        and profile.language.arabic == "basic"
    ):
        recommendations.append(
            "Improve Arabic language skills for better market fit in UAE"
        )

    if scores.format < LOW_FORMAT_THRESHOLD:
        recommendations.append(
            f"Develop expertise in {job.training_format.value} training delivery method"
        )

    if scores.cultural < LOW_CULTURAL_THRESHOLD:
        recommendations.append(
            "Gain more experience with UAE business culture and practices"
        )

    if scores.sector > HIGH_SECTOR_THRESHOLD:
        recommendations.append(
            f"Excellent sector expertise in {sector} - highlight this in your proposal"
        )

    return recommendations
