"""Profile and job analysis for the UAE regional matcher.

Turns free-text profiles and jobs into the structured view the UAE
sub-scorers work on: sectors, language capability and requirements,
delivery formats, residency tier, cultural fit and business context.
Everything here is keyword detection over lowercased text.
"""

from dataclasses import dataclass, field
from typing import Literal

from ldnexus.schemas.matching import (
    JobPosting,
    ProfessionalProfile,
    UAEContextOverrides,
)
from ldnexus.services.uae_keywords import (
    ARABIC_SCRIPT_PATTERN,
    ARABIC_WORD,
    CULTURAL_FIT_BASE,
    CULTURAL_FIT_BONUSES,
    DEFAULT_CULTURAL_SENSITIVITY,
    DEFAULT_JOB_FORMAT,
    DEFAULT_PROFILE_FORMAT,
    JOB_FORMAT_KEYWORDS,
    PROFILE_FORMAT_KEYWORDS,
    UAE_LOCATION_KEYWORDS,
    UAE_SECTOR_KEYWORDS,
    URGENCY_KEYWORDS,
    TrainingFormat,
    UAEExperienceLevel,
    UAESector,
    contains_any,
    contains_keyword,
)

Proficiency = Literal["native", "fluent", "conversational", "basic", "none"]
PreferredLanguage = Literal["arabic", "english", "bilingual"]
Urgency = Literal["low", "medium", "high"]


# =============================================================================
# Analysis Types
# =============================================================================


@dataclass(frozen=True)
class LanguageCapability:
    """What a professional can deliver in.

    Attributes:
        arabic: Arabic proficiency level.
        english: English proficiency level.
        preferred_language: Preferred delivery language.
        cultural_communication: Grasp of UAE business communication (0-1).
    """

    arabic: Proficiency
    english: Proficiency
    preferred_language: PreferredLanguage
    cultural_communication: float


@dataclass(frozen=True)
class LanguageRequirement:
    """What a job needs in terms of language."""

    arabic_required: bool
    english_required: bool
    preferred_language: PreferredLanguage
    formality_level: Literal["formal", "business", "casual"]


@dataclass(frozen=True)
class UAEBusinessContext:
    """Business setting of a job."""

    emirate: str
    company_type: str
    cultural_sensitivity: float
    compliance_requirements: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class UAEProfileAnalysis:
    """UAE view of a professional profile."""

    profile: ProfessionalProfile
    sectors: list[UAESector]
    language: LanguageCapability
    formats: list[TrainingFormat]
    experience_level: UAEExperienceLevel
    cultural_fit: float


@dataclass(frozen=True)
class UAEJobAnalysis:
    """UAE view of a job posting."""

    job: JobPosting
    sector: UAESector
    language: LanguageRequirement
    training_format: TrainingFormat
    context: UAEBusinessContext
    urgency: Urgency


# =============================================================================
# Text helpers
# =============================================================================


def _text(*parts: str | None) -> str:
    """Join non-null parts with spaces and lowercase."""
    return " ".join(p for p in parts if p).lower()


def _has_arabic(text: str) -> bool:
    return ARABIC_SCRIPT_PATTERN.search(text) is not None


def sector_matches(text: str, sector: UAESector) -> bool:
    """Return True if any English keyword of the sector occurs in text."""
    keywords = UAE_SECTOR_KEYWORDS[sector]
    return any(contains_keyword(text, keyword) for keyword in keywords.english)


# =============================================================================
# Profile Analysis
# =============================================================================


def identify_profile_sectors(profile: ProfessionalProfile) -> list[UAESector]:
    """Return every sector whose keywords appear in title, bio or industry."""
    text = _text(profile.title, profile.bio, profile.industry_focus)
    return [sector for sector in UAE_SECTOR_KEYWORDS if sector_matches(text, sector)]


def assess_language_capability(profile: ProfessionalProfile) -> LanguageCapability:
    """Estimate language capability from title and bio.

    Arabic script or a mention of Arabic marks the professional as fluent.
    English is assumed fluent for all platform users.
    """
    text = _text(profile.title, profile.bio)
    arabic = _has_arabic(text) or contains_any(text, ("arabic", ARABIC_WORD))
    bilingual = contains_any(text, ("bilingual", "multilingual"))

    return LanguageCapability(
        arabic="fluent" if arabic else "basic",
        english="fluent",
        preferred_language="bilingual" if bilingual else "english",
        cultural_communication=0.8 if arabic else 0.5,
    )


def extract_format_preferences(profile: ProfessionalProfile) -> list[TrainingFormat]:
    """Return the delivery formats mentioned in title and bio.

    Defaults to virtual delivery when nothing is mentioned.
    """
    text = _text(profile.title, profile.bio)
    formats = [
        training_format
        for training_format, keywords in PROFILE_FORMAT_KEYWORDS.items()
        if contains_any(text, keywords)
    ]
    return formats or [DEFAULT_PROFILE_FORMAT]


def assess_uae_experience(profile: ProfessionalProfile) -> UAEExperienceLevel:
    """Estimate the residency tier from title, bio and location."""
    text = _text(profile.title, profile.bio, profile.location)

    if not contains_any(text, UAE_LOCATION_KEYWORDS):
        return UAEExperienceLevel.REMOTE_ONLY
    if "years" in text and "uae" in text:
        return UAEExperienceLevel.LONG_TERM_RESIDENT
    return UAEExperienceLevel.EXPERIENCED_EXPAT


def assess_cultural_fit(profile: ProfessionalProfile) -> float:
    """Base cultural-fit score (0.5-1.0) from title and bio."""
    text = _text(profile.title, profile.bio)
    score = CULTURAL_FIT_BASE
    for keywords, bonus in CULTURAL_FIT_BONUSES:
        if contains_any(text, keywords):
            score += bonus
    return min(score, 1.0)


def analyze_profile(profile: ProfessionalProfile) -> UAEProfileAnalysis:
    """Build the UAE view of a professional profile."""
    return UAEProfileAnalysis(
        profile=profile,
        sectors=identify_profile_sectors(profile),
        language=assess_language_capability(profile),
        formats=extract_format_preferences(profile),
        experience_level=assess_uae_experience(profile),
        cultural_fit=assess_cultural_fit(profile),
    )


# =============================================================================
# Job Analysis
# =============================================================================


def identify_job_sector(job: JobPosting) -> UAESector:
    """Return the first sector (in table order) matching title/description.

    Defaults to technology.
    """
    text = _text(job.title, job.description)
    for sector in UAE_SECTOR_KEYWORDS:
        if sector_matches(text, sector):
            return sector
    return UAESector.TECHNOLOGY


def extract_language_requirements(job: JobPosting) -> LanguageRequirement:
    """Derive language requirements from title, description and requirements."""
    text = _text(job.title, job.description, job.requirements)
    arabic_required = contains_any(text, ("arabic", ARABIC_WORD)) or _has_arabic(text)

    return LanguageRequirement(
        arabic_required=arabic_required,
        english_required=True,
        preferred_language="bilingual" if "bilingual" in text else "english",
        formality_level=(
            "formal" if contains_any(text, ("government", "formal")) else "business"
        ),
    )


def determine_training_format(job: JobPosting) -> TrainingFormat:
    """Pick the delivery format a job asks for. Defaults to in-person."""
    text = _text(job.title, job.description)
    for training_format, keywords in JOB_FORMAT_KEYWORDS.items():
        if contains_any(text, keywords):
            return training_format
    return DEFAULT_JOB_FORMAT


def build_business_context(
    job: JobPosting,
    overrides: UAEContextOverrides | None = None,
) -> UAEBusinessContext:
    """Combine explicit overrides with defaults inferred from the job text."""
    text = _text(job.title, job.description)
    overrides = overrides or UAEContextOverrides()

    emirate = overrides.emirate or ("dubai" if "dubai" in text else "abu_dhabi")
    company_type = overrides.company_type or (
        "government" if "government" in text else "multinational"
    )
    cultural_sensitivity = (
        overrides.cultural_sensitivity
        if overrides.cultural_sensitivity is not None
        else DEFAULT_CULTURAL_SENSITIVITY
    )

    return UAEBusinessContext(
        emirate=emirate,
        company_type=company_type,
        cultural_sensitivity=cultural_sensitivity,
        compliance_requirements=list(overrides.compliance_requirements or []),
    )


def assess_urgency(job: JobPosting) -> Urgency:
    """Classify hiring urgency from title and description."""
    text = _text(job.title, job.description)
    if contains_any(text, URGENCY_KEYWORDS["high"]):
        return "high"
    if contains_any(text, URGENCY_KEYWORDS["medium"]):
        return "medium"
    return "low"


def analyze_job(
    job: JobPosting,
    overrides: UAEContextOverrides | None = None,
) -> UAEJobAnalysis:
    """Build the UAE view of a job posting."""
    return UAEJobAnalysis(
        job=job,
        sector=identify_job_sector(job),
        language=extract_language_requirements(job),
        training_format=determine_training_format(job),
        context=build_business_context(job, overrides),
        urgency=assess_urgency(job),
    )
