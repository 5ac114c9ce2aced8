"""Static configuration for the UAE regional matcher.

Keyword tables, proficiency scores and tier values live here as data so
the analyzers and scorers stay declarative. Adding a sector means adding
a table entry, not a branch.
"""

import re
from dataclasses import dataclass
from enum import Enum, IntEnum
from functools import lru_cache

# =============================================================================
# Enumerations
# =============================================================================


class UAESector(str, Enum):
    """UAE market sectors."""

    TECHNOLOGY = "technology"
    FINANCE = "finance"
    OIL_GAS = "oil_gas"
    REAL_ESTATE = "real_estate"
    TOURISM = "tourism"
    HEALTHCARE = "healthcare"
    EDUCATION = "education"
    LOGISTICS = "logistics"
    GOVERNMENT = "government"
    MANUFACTURING = "manufacturing"


class TrainingFormat(str, Enum):
    """Training delivery formats."""

    IN_PERSON_UAE = "in_person_uae"
    VIRTUAL_UAE_TIMEZONE = "virtual_uae_timezone"
    HYBRID_UAE = "hybrid_uae"
    SELF_PACED_ARABIC = "self_paced_arabic"
    WORKSHOP_BASED = "workshop_based"
    MENTORING = "mentoring"


class UAEExperienceLevel(IntEnum):
    """UAE residency/experience tier. Higher means deeper local exposure."""

    REMOTE_ONLY = 1
    RECENT_ARRIVAL = 2
    EXPERIENCED_EXPAT = 3
    LONG_TERM_RESIDENT = 4
    UAE_NATIVE = 5


# =============================================================================
# Sector Keywords
# =============================================================================


@dataclass(frozen=True)
class SectorKeywords:
    """Keyword vocabulary for one sector.

    Attributes:
        english: Lowercase English keywords and company names.
        arabic: Arabic keywords.
        weight: Market priority multiplier (1.1-1.4).
    """

    english: tuple[str, ...]
    arabic: tuple[str, ...]
    weight: float


# Order matters: job sector detection takes the first sector that matches.
UAE_SECTOR_KEYWORDS: dict[UAESector, SectorKeywords] = {
    UAESector.TECHNOLOGY: SectorKeywords(
        english=(
            "fintech",
            "smartcity",
            "blockchain",
            "ai",
            "digital transformation",
            "cybersecurity",
            "iot",
        ),
        arabic=(
            "التكنولوجيا المالية",
            "المدن الذكية",
            "البلوك تشين",
            "الذكاء الاصطناعي",
            "التحول الرقمي",
        ),
        weight=1.2,
    ),
    UAESector.FINANCE: SectorKeywords(
        english=(
            "islamic banking",
            "sharia compliance",
            "adcb",
            "emirates nbd",
            "financial services",
            "investment",
        ),
        arabic=(
            "المصرفية الإسلامية",
            "الامتثال للشريعة",
            "الخدمات المالية",
            "الاستثمار",
        ),
        weight=1.3,
    ),
    UAESector.OIL_GAS: SectorKeywords(
        english=(
            "adnoc",
            "petrochemicals",
            "energy",
            "refineries",
            "downstream",
            "upstream",
        ),
        arabic=("البتروكيماويات", "الطاقة", "المصافي", "أدنوك"),
        weight=1.4,
    ),
    UAESector.REAL_ESTATE: SectorKeywords(
        english=(
            "emaar",
            "dubai properties",
            "construction",
            "property management",
            "property development",
        ),
        arabic=("إعمار", "العقارات", "الإنشاءات", "إدارة الممتلكات", "التطوير"),
        weight=1.1,
    ),
    UAESector.TOURISM: SectorKeywords(
        english=(
            "hospitality",
            "expo",
            "tourism board",
            "heritage",
            "cultural tourism",
        ),
        arabic=("الضيافة", "إكسبو", "مجلس السياحة", "التراث", "السياحة الثقافية"),
        weight=1.2,
    ),
    UAESector.HEALTHCARE: SectorKeywords(
        english=(
            "healthcare",
            "hospital",
            "clinical",
            "patient care",
            "medical",
            "pharmaceutical",
        ),
        arabic=("الرعاية الصحية", "مستشفى", "الطبية", "الصيدلة"),
        weight=1.2,
    ),
    UAESector.EDUCATION: SectorKeywords(
        english=(
            "education",
            "school",
            "university",
            "adek",
            "khda",
            "academic",
        ),
        arabic=("التعليم", "مدرسة", "جامعة", "أكاديمي"),
        weight=1.3,
    ),
    UAESector.LOGISTICS: SectorKeywords(
        english=(
            "logistics",
            "supply chain",
            "dp world",
            "freight",
            "shipping",
            "aviation",
        ),
        arabic=("الخدمات اللوجستية", "سلسلة التوريد", "الشحن", "الطيران"),
        weight=1.2,
    ),
    UAESector.GOVERNMENT: SectorKeywords(
        english=(
            "government",
            "ministry",
            "federal authority",
            "public sector",
            "emiratisation",
        ),
        arabic=("الحكومة", "وزارة", "القطاع العام", "التوطين"),
        weight=1.3,
    ),
    UAESector.MANUFACTURING: SectorKeywords(
        english=(
            "manufacturing",
            "industrial",
            "factory",
            "production line",
            "quality control",
        ),
        arabic=("التصنيع", "الصناعة", "الإنتاج", "مصنع"),
        weight=1.1,
    ),
}


# =============================================================================
# Language
# =============================================================================

# Proficiency level -> score. Unknown levels score as "none".
LANGUAGE_PROFICIENCY_SCORES: dict[str, float] = {
    "native": 1.0,
    "fluent": 0.9,
    "conversational": 0.7,
    "basic": 0.4,
    "none": 0.1,
}

ARABIC_SCRIPT_PATTERN = re.compile(r"[\u0600-\u06FF]")

ARABIC_WORD = "عربي"


def proficiency_score(level: str) -> float:
    """Return the score for a proficiency level."""
    return LANGUAGE_PROFICIENCY_SCORES.get(level, LANGUAGE_PROFICIENCY_SCORES["none"])


# =============================================================================
# Delivery Formats
# =============================================================================

# Profile text keywords -> format the professional can deliver.
PROFILE_FORMAT_KEYWORDS: dict[TrainingFormat, tuple[str, ...]] = {
    TrainingFormat.VIRTUAL_UAE_TIMEZONE: ("online", "virtual"),
    TrainingFormat.IN_PERSON_UAE: ("in-person", "face-to-face"),
    TrainingFormat.HYBRID_UAE: ("hybrid", "blended"),
    TrainingFormat.WORKSHOP_BASED: ("workshop", "seminar"),
}

# Job text keywords -> format the job asks for. First match wins,
# in-person when nothing matches.
JOB_FORMAT_KEYWORDS: dict[TrainingFormat, tuple[str, ...]] = {
    TrainingFormat.VIRTUAL_UAE_TIMEZONE: ("remote", "virtual"),
    TrainingFormat.HYBRID_UAE: ("hybrid",),
    TrainingFormat.WORKSHOP_BASED: ("workshop",),
}

DEFAULT_PROFILE_FORMAT = TrainingFormat.VIRTUAL_UAE_TIMEZONE
DEFAULT_JOB_FORMAT = TrainingFormat.IN_PERSON_UAE


# =============================================================================
# Residency, culture, urgency
# =============================================================================

UAE_LOCATION_KEYWORDS = ("uae", "dubai", "abu dhabi")

# (keywords, bonus) added on top of the 0.5 base cultural fit
CULTURAL_FIT_BASE = 0.5
CULTURAL_FIT_BONUSES: tuple[tuple[tuple[str, ...], float], ...] = (
    (("cultural", "cross-cultural"), 0.2),
    (("international", "multicultural"), 0.1),
    (("middle east", "gulf"), 0.2),
)

URGENCY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "high": ("urgent", "asap", "immediate"),
    "medium": ("soon", "quick"),
}

DEFAULT_CULTURAL_SENSITIVITY = 0.7


# =============================================================================
# Keyword matching
# =============================================================================


def contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    """Return True if any keyword occurs in text as a substring."""
    return any(keyword in text for keyword in keywords)


@lru_cache(maxsize=512)
def _keyword_pattern(keyword: str) -> re.Pattern[str]:
    return re.compile(rf"(?<!\w){re.escape(keyword)}(?!\w)")


def contains_keyword(text: str, keyword: str) -> bool:
    """Return True if keyword occurs in text as a whole word or phrase.

    Sector vocabularies include short tokens such as "ai" and "iot" that
    would otherwise match inside unrelated words ("dubai", "training").
    """
    return _keyword_pattern(keyword).search(text) is not None
