"""UAE market views built on the regional matcher.

- Rank jobs for a professional, or professionals for a job
- Search insights over a ranked result set
- Market insights over a pool of professionals and jobs

Scores in ranked results are whole percentages (0-100). Matches at or
below the minimum overall score are dropped.
"""

import math
from collections import Counter

from ldnexus.schemas.matching import (
    FactorScore,
    JobPosting,
    ProfessionalProfile,
    UAEContextOverrides,
    UAEJobMatch,
    UAEMarketInsightsResponse,
    UAEProfessionalMatch,
    UAESearchInsights,
)
from ldnexus.services.uae_analysis import sector_matches
from ldnexus.services.uae_keywords import (
    ARABIC_WORD,
    UAE_SECTOR_KEYWORDS,
    UAESector,
    contains_any,
)
from ldnexus.services.uae_match import UAEMatchResult, compute_uae_match

DEFAULT_MIN_MATCH_SCORE = 0.3
DEFAULT_MATCH_LIMIT = 5
_TOP_SECTOR_COUNT = 5

# (minimum overall score, label), highest first
_MATCH_STRENGTH_LABELS: tuple[tuple[float, str], ...] = (
    (0.9, "Exceptional UAE Match"),
    (0.8, "Excellent UAE Match"),
    (0.7, "Strong UAE Match"),
    (0.6, "Good UAE Match"),
    (0.4, "Moderate UAE Match"),
)
_BASIC_MATCH_LABEL = "Basic UAE Match"

CULTURAL_GUIDELINES: tuple[str, ...] = (
    "Respect for Islamic values and local customs is essential",
    "Business meetings may be scheduled around prayer times",
    "Relationship building is crucial before business discussions",
    "Formal attire and professional demeanor expected",
    "Friday is the holy day - avoid scheduling on Friday afternoons",
    "Ramadan considerations for training schedules and content delivery",
    "Arabic greetings and basic phrases appreciated",
    "Hierarchy and respect for authority emphasized in corporate culture",
)

COMPLIANCE_REQUIREMENTS: tuple[str, ...] = (
    "UAE Labor Law compliance for employment practices",
    "ADGM/DIFC regulations for financial sector training",
    "UAE Data Protection Law (PDPL) for data handling",
    "MOHRE approvals for certain professional training",
    "Emirates Authority for Standardization requirements",
    "Ministry of Education approvals for educational content",
    "NCEMA guidelines for crisis management training",
    "UAE Central Bank regulations for financial training",
)


# =============================================================================
# Helpers
# =============================================================================


def to_percent(score: float) -> int:
    """Convert a 0-1 score to a whole percentage, rounding half up."""
    return int(math.floor(score * 100 + 0.5))


def match_strength(score: float) -> str:
    """Label an overall UAE score."""
    for threshold, label in _MATCH_STRENGTH_LABELS:
        if score >= threshold:
            return label
    return _BASIC_MATCH_LABEL


def _profile_text(profile: ProfessionalProfile) -> str:
    return f"{profile.title or ''} {profile.bio or ''}".lower()


def _job_text(job: JobPosting) -> str:
    return f"{job.title or ''} {job.description or ''}".lower()


def extract_relevant_experience(
    profile: ProfessionalProfile, job: JobPosting
) -> list[str]:
    """List UAE-relevant experience signals found in the profile."""
    profile_text = _profile_text(profile)
    experience: list[str] = []

    if contains_any(profile_text, ("uae", "dubai", "abu dhabi")):
        experience.append("UAE market experience")
    if contains_any(profile_text, ("arabic", "bilingual")):
        experience.append("Arabic language capabilities")
    if contains_any(profile_text, ("cultural", "cross-cultural")):
        experience.append("Cross-cultural training expertise")
    if "government" in profile_text and "government" in _job_text(job):
        experience.append("UAE government sector experience")

    return experience


def _percent_scores(result: UAEMatchResult) -> dict[str, int]:
    return {
        "match_score": to_percent(result.overall_score),
        "sector_score": to_percent(result.sector_score),
        "language_score": to_percent(result.language_score),
        "format_score": to_percent(result.format_score),
        "cultural_score": to_percent(result.cultural_score),
    }


# =============================================================================
# Ranking
# =============================================================================


def rank_jobs_for_professional(
    profile: ProfessionalProfile,
    jobs: list[JobPosting],
    *,
    sector: str | None = None,
    limit: int = DEFAULT_MATCH_LIMIT,
    min_score: float = DEFAULT_MIN_MATCH_SCORE,
) -> tuple[list[UAEJobMatch], int]:
    """Rank jobs for a professional by UAE match score.

    Args:
        profile: Professional looking for work.
        jobs: Candidate jobs.
        sector: Optional filter; jobs whose description does not mention it
            are skipped.
        limit: Maximum number of matches returned.
        min_score: Matches with overall score at or below this are dropped.

    Returns:
        Tuple of (top matches sorted by match score, total matches found).
    """
    matches: list[UAEJobMatch] = []
    sector_filter = sector.lower() if sector else None

    for job in jobs:
        if sector_filter and sector_filter not in (job.description or "").lower():
            continue

        result = compute_uae_match(profile, job)
        if result.overall_score <= min_score:
            continue

        matches.append(
            UAEJobMatch(
                job=job,
                **_percent_scores(result),
                match_strength=match_strength(result.overall_score),
                recommendations=result.recommendations,
            )
        )

    matches.sort(key=lambda m: m.match_score, reverse=True)
    return matches[:limit], len(matches)


def _professional_rank_key(match: UAEProfessionalMatch) -> float:
    """Match score plus a small boost for cultural and language fit."""
    uae_bonus = (match.cultural_score + match.language_score) / 200
    return match.match_score + uae_bonus * 10


def rank_professionals_for_job(
    job: JobPosting,
    professionals: list[ProfessionalProfile],
    *,
    emirate: str | None = None,
    limit: int = DEFAULT_MATCH_LIMIT,
    min_score: float = DEFAULT_MIN_MATCH_SCORE,
) -> tuple[list[UAEProfessionalMatch], int, UAESearchInsights]:
    """Rank professionals for a job by UAE match score.

    The job is scored in a multinational context for the given emirate.

    Returns:
        Tuple of (top matches, total matches found, insights over all matches).
    """
    context = UAEContextOverrides(
        emirate=emirate,
        company_type="multinational",
        cultural_sensitivity=0.7,
        compliance_requirements=[],
    )
    matches: list[UAEProfessionalMatch] = []

    for professional in professionals:
        result = compute_uae_match(professional, job, context)
        if result.overall_score <= min_score:
            continue

        matches.append(
            UAEProfessionalMatch(
                professional=professional,
                **_percent_scores(result),
                match_strength=match_strength(result.overall_score),
                recommendations=result.recommendations,
                relevant_experience=extract_relevant_experience(professional, job),
            )
        )

    matches.sort(key=_professional_rank_key, reverse=True)
    return matches[:limit], len(matches), build_search_insights(matches)


def build_search_insights(matches: list[UAEProfessionalMatch]) -> UAESearchInsights:
    """Average scores per factor and suggestions for the job poster."""
    if not matches:
        return UAESearchInsights(
            average_match_score=0.0,
            top_matching_factors=[],
            improvement_suggestions=[],
        )

    count = len(matches)
    averages = {
        "sector": sum(m.sector_score for m in matches) / count,
        "language": sum(m.language_score for m in matches) / count,
        "format": sum(m.format_score for m in matches) / count,
        "cultural": sum(m.cultural_score for m in matches) / count,
    }
    factors = [
        FactorScore(factor=factor, score=round(score))
        for factor, score in sorted(averages.items(), key=lambda kv: kv[1], reverse=True)
    ]

    suggestions: list[str] = []
    if averages["language"] < 70:
        suggestions.append(
            "Consider Arabic language requirements or bilingual professionals"
        )
    if averages["cultural"] < 60:
        suggestions.append("Emphasize UAE cultural experience in job requirements")

    return UAESearchInsights(
        average_match_score=sum(m.match_score for m in matches) / count,
        top_matching_factors=factors,
        improvement_suggestions=suggestions,
    )


# =============================================================================
# Market Insights
# =============================================================================


def analyze_top_sectors(jobs: list[JobPosting]) -> list[dict]:
    """Count jobs per sector (a job may count in several sectors).

    Ties are broken by the sector's market weight.
    """
    counts: Counter[UAESector] = Counter()
    for job in jobs:
        text = _job_text(job)
        for sector in UAE_SECTOR_KEYWORDS:
            if sector_matches(text, sector):
                counts[sector] += 1

    ranked = sorted(
        counts.items(),
        key=lambda kv: (kv[1], UAE_SECTOR_KEYWORDS[kv[0]].weight),
        reverse=True,
    )
    return [
        {
            "sector": sector.value,
            "count": count,
            "market_weight": UAE_SECTOR_KEYWORDS[sector].weight,
        }
        for sector, count in ranked[:_TOP_SECTOR_COUNT]
    ]


def _is_arabic_capable(profile: ProfessionalProfile) -> bool:
    return contains_any(_profile_text(profile), ("arabic", ARABIC_WORD))


def analyze_language_distribution(professionals: list[ProfessionalProfile]) -> dict:
    """Count Arabic-capable and bilingual professionals."""
    arabic_capable = sum(1 for p in professionals if _is_arabic_capable(p))
    bilingual_capable = sum(
        1
        for p in professionals
        if contains_any(_profile_text(p), ("bilingual", "multilingual"))
    )
    return {
        "arabic_capable": arabic_capable,
        "bilingual_capable": bilingual_capable,
        "english_only": len(professionals) - arabic_capable,
        "total": len(professionals),
    }


def analyze_format_preferences(jobs: list[JobPosting]) -> dict:
    """Count jobs by delivery format."""
    formats = {"in_person": 0, "virtual": 0, "hybrid": 0}
    for job in jobs:
        text = _job_text(job)
        if contains_any(text, ("virtual", "online", "remote")):
            formats["virtual"] += 1
        elif contains_any(text, ("hybrid", "blended")):
            formats["hybrid"] += 1
        else:
            formats["in_person"] += 1
    return formats


def analyze_sector(
    professionals: list[ProfessionalProfile],
    jobs: list[JobPosting],
    sector: str,
) -> dict:
    """Demand/supply for one sector, by plain text mention."""
    needle = sector.lower()
    sector_jobs = [j for j in jobs if needle in _job_text(j)]
    sector_professionals = [
        p
        for p in professionals
        if needle in f"{_profile_text(p)} {(p.industry_focus or '').lower()}"
    ]

    average_compensation = 0.0
    if sector_jobs:
        average_compensation = sum(
            j.max_compensation or 0 for j in sector_jobs
        ) / len(sector_jobs)

    return {
        "job_count": len(sector_jobs),
        "professional_count": len(sector_professionals),
        "demand_supply_ratio": len(sector_jobs) / (len(sector_professionals) or 1),
        "average_compensation": average_compensation,
    }


def analyze_emirate(
    professionals: list[ProfessionalProfile],
    jobs: list[JobPosting],
    emirate: str,
) -> dict:
    """Local talent vs. jobs for one emirate, by location text."""
    # "abu_dhabi" should match "Abu Dhabi"
    needle = emirate.lower().replace("_", " ")
    emirate_jobs = [j for j in jobs if needle in (j.location or "").lower()]
    emirate_professionals = [
        p for p in professionals if needle in (p.location or "").lower()
    ]
    return {
        "job_count": len(emirate_jobs),
        "professional_count": len(emirate_professionals),
        "local_talent_ratio": len(emirate_professionals) / (len(emirate_jobs) or 1),
    }


def generate_market_recommendations(
    professionals: list[ProfessionalProfile],
    jobs: list[JobPosting],
) -> list[str]:
    """Market-level advice for professionals."""
    recommendations: list[str] = []

    tech_jobs = sum(1 for j in jobs if "technology" in _job_text(j))
    finance_jobs = sum(1 for j in jobs if "finance" in _job_text(j))
    if tech_jobs > finance_jobs:
        recommendations.append(
            "Technology sector shows highest demand - consider specializing in "
            "digital transformation and fintech"
        )
    else:
        recommendations.append(
            "Financial services remain strong - Islamic banking and sharia "
            "compliance expertise valuable"
        )

    arabic_professionals = sum(
        1 for p in professionals if "arabic" in _profile_text(p)
    )
    if arabic_professionals < len(professionals) * 0.3:
        recommendations.append(
            "Arabic language skills are in high demand - consider developing "
            "bilingual capabilities"
        )

    recommendations.append(
        "UAE government initiatives in AI and smart cities create opportunities "
        "for specialized training"
    )
    recommendations.append(
        "Cultural sensitivity training increasingly important for multinational "
        "companies"
    )
    return recommendations


def build_market_insights(
    professionals: list[ProfessionalProfile],
    jobs: list[JobPosting],
    *,
    sector: str | None = None,
    emirate: str | None = None,
) -> UAEMarketInsightsResponse:
    """Full market insights report."""
    return UAEMarketInsightsResponse(
        market_overview={
            "total_professionals": len(professionals),
            "total_active_jobs": len(jobs),
            "top_sectors": analyze_top_sectors(jobs),
            "language_distribution": analyze_language_distribution(professionals),
            "format_preferences": analyze_format_preferences(jobs),
        },
        sector_analysis=analyze_sector(professionals, jobs, sector) if sector else None,
        emirate_analysis=(
            analyze_emirate(professionals, jobs, emirate) if emirate else None
        ),
        recommendations=generate_market_recommendations(professionals, jobs),
        cultural_considerations=list(CULTURAL_GUIDELINES),
        compliance_requirements=list(COMPLIANCE_REQUIREMENTS),
    )
