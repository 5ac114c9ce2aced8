"""Keyword-heuristic match score used when embeddings are unavailable.

Component weights (maximum contribution of each):
- Title:       0.35: Exact / L&D-keyword / containment / word overlap
- Skills:      0.30: Weighted L&D vocabulary co-occurrence
- Experience:  0.20: Years vs. "<N> years experience" in requirements
- Location:    0.10: Exact / remote / containment
- Industry:    0.05: Industry focus mentioned in job description

Total: 1.00 nominal

The component sum gets uniform jitter in [-0.05, +0.05] and is then
clamped to [0.15, 0.95], so the heuristic never claims a total match or
total mismatch. The clamp is applied last and is the only bound.

A component whose input fields are missing contributes 0. That is a
neutral signal, not an error.
"""

import logging
import random
import re
from dataclasses import dataclass

from ldnexus.schemas.matching import JobPosting, ProfessionalProfile

logger = logging.getLogger(__name__)

# =============================================================================
# Component Weights
# =============================================================================

TITLE_EXACT_SCORE = 0.35
TITLE_LEARNING_SCORE = 0.30
TITLE_DEVELOPMENT_SCORE = 0.28
TITLE_CONTAINS_SCORE = 0.25
TITLE_OVERLAP_WEIGHT = 0.15

SKILLS_WEIGHT = 0.30

EXPERIENCE_MEETS_SCORE = 0.20
EXPERIENCE_CLOSE_SCORE = 0.15  # >= 80% of required
EXPERIENCE_REASONABLE_SCORE = 0.10  # >= 60% of required
EXPERIENCE_SENIOR_SCORE = 0.15  # no requirement, >= 5 years
EXPERIENCE_MID_SCORE = 0.10  # no requirement, >= 2 years
EXPERIENCE_JUNIOR_SCORE = 0.05  # no requirement, < 2 years

LOCATION_EXACT_SCORE = 0.10
LOCATION_REMOTE_SCORE = 0.08
LOCATION_CONTAINS_SCORE = 0.06

INDUSTRY_SCORE = 0.05

# =============================================================================
# Bounds
# =============================================================================

JITTER_RANGE = 0.05
MIN_FALLBACK_SCORE = 0.15
MAX_FALLBACK_SCORE = 0.95

# =============================================================================
# L&D Vocabulary
# =============================================================================

# Term -> weight. A term counts when it appears in both the bio and the
# job description + requirements.
LD_SKILL_KEYWORDS: dict[str, float] = {
    "learning": 1.0,
    "development": 1.0,
    "training": 0.9,
    "coaching": 0.8,
    "mentoring": 0.8,
    "leadership": 0.7,
    "management": 0.6,
    "strategy": 0.5,
    "curriculum": 0.9,
    "instructional": 0.9,
    "facilitation": 0.8,
    "workshop": 0.7,
}

_TOTAL_SKILL_WEIGHT = sum(LD_SKILL_KEYWORDS.values())

# "5 years experience", "3+ years of experience", "1 year experience"
_EXPERIENCE_PATTERN = re.compile(
    r"(\d+)\s*(?:\+)?\s*years?\s*(?:of\s*)?experience", re.IGNORECASE
)

# Title words this short are ignored by the overlap rule
_MIN_TITLE_WORD_LENGTH = 3


@dataclass(frozen=True)
class FallbackScoreResult:
    """Breakdown of a fallback heuristic score.

    Attributes:
        title: Title component (0-0.35).
        skills: Skills component (0-0.30).
        experience: Experience component (0-0.20).
        location: Location component (0-0.10).
        industry: Industry component (0-0.05).
        jitter: Random variance added to the component sum.
        total: Final score, clamped to [0.15, 0.95].
    """

    title: float
    skills: float
    experience: float
    location: float
    industry: float
    jitter: float
    total: float

    @property
    def component_sum(self) -> float:
        """Sum of the five components before jitter and clamping."""
        return self.title + self.skills + self.experience + self.location + self.industry


# =============================================================================
# Components
# =============================================================================


def score_title(profile_title: str | None, job_title: str | None) -> float:
    """Score title similarity (0-0.35).

    Rules, first match wins:
    1. Exact match after lowercase/trim → 0.35
    2. Both mention "learning" → 0.30
    3. Both mention "development" → 0.28
    4. One contains the other → 0.25
    5. Word overlap ratio × 0.15
    """
    profile_norm = (profile_title or "").lower().strip()
    job_norm = (job_title or "").lower().strip()
    if not profile_norm or not job_norm:
        return 0.0

    if profile_norm == job_norm:
        return TITLE_EXACT_SCORE
    if "learning" in profile_norm and "learning" in job_norm:
        return TITLE_LEARNING_SCORE
    if "development" in profile_norm and "development" in job_norm:
        return TITLE_DEVELOPMENT_SCORE
    if profile_norm in job_norm or job_norm in profile_norm:
        return TITLE_CONTAINS_SCORE

    profile_words = [w for w in profile_norm.split() if len(w) >= _MIN_TITLE_WORD_LENGTH]
    job_words = [w for w in job_norm.split() if len(w) >= _MIN_TITLE_WORD_LENGTH]
    common_words = [
        word
        for word in profile_words
        if any(job_word in word or word in job_word for job_word in job_words)
    ]
    if not common_words:
        return 0.0

    overlap = len(common_words) / max(len(profile_words), len(job_words))
    return TITLE_OVERLAP_WEIGHT * overlap


def score_skills(
    bio: str | None,
    job_description: str | None,
    job_requirements: str | None,
) -> float:
    """Score L&D vocabulary co-occurrence (0-0.30)."""
    if not bio or not job_description:
        return 0.0

    profile_text = bio.lower()
    job_text = f"{job_description} {job_requirements or ''}".lower()

    matched_weight = sum(
        weight
        for word, weight in LD_SKILL_KEYWORDS.items()
        if word in profile_text and word in job_text
    )
    return SKILLS_WEIGHT * (matched_weight / _TOTAL_SKILL_WEIGHT)


def extract_required_years(requirements: str | None) -> int | None:
    """Extract the first "<N> years experience" figure from requirements.

    Returns:
        The required years, or None when no requirement is stated.
    """
    if not requirements:
        return None
    match = _EXPERIENCE_PATTERN.search(requirements)
    if match is None:
        return None
    return int(match.group(1))


def score_experience(years: int | None, job_requirements: str | None) -> float:
    """Score experience fit (0-0.20).

    With an explicit requirement, candidates below 60% of it score 0.
    Without one, the score is tiered by the candidate's absolute years.
    """
    # Zero years counts as missing data
    if not years or not job_requirements:
        return 0.0

    required = extract_required_years(job_requirements) or 0

    if required > 0:
        if years >= required:
            return EXPERIENCE_MEETS_SCORE
        if years >= required * 0.8:
            return EXPERIENCE_CLOSE_SCORE
        if years >= required * 0.6:
            return EXPERIENCE_REASONABLE_SCORE
        return 0.0

    if years >= 5:
        return EXPERIENCE_SENIOR_SCORE
    if years >= 2:
        return EXPERIENCE_MID_SCORE
    return EXPERIENCE_JUNIOR_SCORE


def score_location(profile_location: str | None, job_location: str | None) -> float:
    """Score location fit (0-0.10)."""
    profile_norm = (profile_location or "").lower().strip()
    job_norm = (job_location or "").lower().strip()
    if not profile_norm or not job_norm:
        return 0.0

    if profile_norm == job_norm:
        return LOCATION_EXACT_SCORE
    if "remote" in profile_norm or "remote" in job_norm:
        return LOCATION_REMOTE_SCORE
    if profile_norm in job_norm or job_norm in profile_norm:
        return LOCATION_CONTAINS_SCORE
    return 0.0


def score_industry(industry_focus: str | None, job_description: str | None) -> float:
    """Score industry alignment (0 or 0.05)."""
    industry = (industry_focus or "").lower().strip()
    if not industry or not job_description:
        return 0.0
    if industry in job_description.lower():
        return INDUSTRY_SCORE
    return 0.0


# =============================================================================
# Aggregation
# =============================================================================


def calculate_fallback_score(
    profile: ProfessionalProfile,
    job: JobPosting,
    rng: random.Random | None = None,
) -> FallbackScoreResult:
    """Calculate the heuristic match score for a profile/job pair.

    Args:
        profile: Professional profile.
        job: Job posting.
        rng: Source of the jitter. Defaults to the module-level random
            generator; pass a seeded or stubbed instance for reproducible
            scores.

    Returns:
        FallbackScoreResult whose total is in [0.15, 0.95].
    """
    title = score_title(profile.title, job.title)
    skills = score_skills(profile.bio, job.description, job.requirements)
    experience = score_experience(profile.years_experience, job.requirements)
    location = score_location(profile.location, job.location)
    industry = score_industry(profile.industry_focus, job.description)

    source = rng if rng is not None else random
    jitter = source.uniform(-JITTER_RANGE, JITTER_RANGE)

    component_sum = title + skills + experience + location + industry
    total = max(MIN_FALLBACK_SCORE, min(MAX_FALLBACK_SCORE, component_sum + jitter))

    logger.debug(
        "Fallback match breakdown: title=%.3f skills=%.3f experience=%.3f "
        "location=%.3f industry=%.3f jitter=%.3f total=%.3f",
        title,
        skills,
        experience,
        location,
        industry,
        jitter,
        total,
    )

    return FallbackScoreResult(
        title=title,
        skills=skills,
        experience=experience,
        location=location,
        industry=industry,
        jitter=jitter,
        total=total,
    )
