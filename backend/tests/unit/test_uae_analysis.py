"""Tests for UAE profile and job analysis.

Keyword detection over profile/job text: sectors, language, formats,
residency tier, cultural fit, business context and urgency.
"""

import pytest

from ldnexus.schemas.matching import (
    JobPosting,
    ProfessionalProfile,
    UAEContextOverrides,
)
from ldnexus.services.uae_analysis import (
    analyze_job,
    analyze_profile,
    assess_cultural_fit,
    assess_language_capability,
    assess_uae_experience,
    assess_urgency,
    build_business_context,
    determine_training_format,
    extract_format_preferences,
    extract_language_requirements,
    identify_job_sector,
    identify_profile_sectors,
)
from ldnexus.services.uae_keywords import (
    TrainingFormat,
    UAEExperienceLevel,
    UAESector,
    contains_keyword,
    proficiency_score,
)


class TestKeywordMatching:
    """Tests for contains_keyword() and proficiency_score()."""

    @pytest.mark.parametrize("text", ["based in dubai", "corporate training"])
    def test_short_keyword_does_not_match_inside_words(self, text):
        """'ai' must not match 'dubai' or 'training'."""
        assert contains_keyword(text, "ai") is False

    def test_short_keyword_matches_as_word(self):
        assert contains_keyword("ai and data literacy", "ai") is True

    def test_phrase_keyword_matches(self):
        assert contains_keyword("lead digital transformation.", "digital transformation")

    def test_unknown_proficiency_scores_as_none(self):
        assert proficiency_score("elementary") == proficiency_score("none") == 0.1


class TestProfileSectors:
    """Tests for identify_profile_sectors()."""

    def test_detects_all_mentioned_sectors(self):
        profile = ProfessionalProfile(
            title="Trainer",
            bio="Worked with ADNOC on petrochemicals and with hospital staff",
            industry_focus="Cybersecurity",
        )
        sectors = identify_profile_sectors(profile)
        assert sectors == [UAESector.TECHNOLOGY, UAESector.OIL_GAS, UAESector.HEALTHCARE]

    def test_no_sector_vocabulary(self, arabic_dubai_profile):
        assert identify_profile_sectors(arabic_dubai_profile) == []


class TestLanguageCapability:
    """Tests for assess_language_capability()."""

    def test_arabic_mention_means_fluent(self, arabic_dubai_profile):
        capability = assess_language_capability(arabic_dubai_profile)
        assert capability.arabic == "fluent"
        assert capability.english == "fluent"
        assert capability.preferred_language == "english"
        assert capability.cultural_communication == 0.8

    def test_arabic_script_means_fluent(self):
        profile = ProfessionalProfile(bio="مدرب معتمد في القيادة")
        assert assess_language_capability(profile).arabic == "fluent"

    def test_no_arabic_means_basic(self):
        capability = assess_language_capability(ProfessionalProfile(bio="English trainer"))
        assert capability.arabic == "basic"
        assert capability.cultural_communication == 0.5

    @pytest.mark.parametrize("word", ["bilingual", "Multilingual"])
    def test_bilingual_preference(self, word):
        profile = ProfessionalProfile(bio=f"{word} facilitator")
        assert assess_language_capability(profile).preferred_language == "bilingual"


class TestFormatPreferences:
    """Tests for extract_format_preferences()."""

    def test_defaults_to_virtual(self):
        assert extract_format_preferences(ProfessionalProfile()) == [
            TrainingFormat.VIRTUAL_UAE_TIMEZONE
        ]

    def test_collects_every_mentioned_format(self):
        profile = ProfessionalProfile(
            bio="Online and face-to-face sessions, blended programs and seminars"
        )
        assert extract_format_preferences(profile) == [
            TrainingFormat.VIRTUAL_UAE_TIMEZONE,
            TrainingFormat.IN_PERSON_UAE,
            TrainingFormat.HYBRID_UAE,
            TrainingFormat.WORKSHOP_BASED,
        ]


class TestUAEExperience:
    """Tests for assess_uae_experience()."""

    def test_no_uae_mention_is_remote_only(self):
        profile = ProfessionalProfile(location="London")
        assert assess_uae_experience(profile) == UAEExperienceLevel.REMOTE_ONLY

    def test_uae_location_is_experienced_expat(self, arabic_dubai_profile):
        assert (
            assess_uae_experience(arabic_dubai_profile)
            == UAEExperienceLevel.EXPERIENCED_EXPAT
        )

    def test_years_in_uae_is_long_term_resident(self):
        profile = ProfessionalProfile(bio="8 years in the UAE")
        assert assess_uae_experience(profile) == UAEExperienceLevel.LONG_TERM_RESIDENT

    def test_location_field_counts(self):
        profile = ProfessionalProfile(title="Coach", location="Abu Dhabi")
        assert assess_uae_experience(profile) == UAEExperienceLevel.EXPERIENCED_EXPAT


class TestCulturalFit:
    """Tests for assess_cultural_fit()."""

    def test_base_score(self):
        assert assess_cultural_fit(ProfessionalProfile(bio="Trainer")) == 0.5

    def test_bonuses_add_up(self):
        profile = ProfessionalProfile(bio="Cross-cultural trainer for international teams")
        assert assess_cultural_fit(profile) == pytest.approx(0.8)

    def test_capped_at_one(self):
        profile = ProfessionalProfile(
            bio="Cultural and multicultural programs across the Middle East"
        )
        assert assess_cultural_fit(profile) == pytest.approx(1.0)


class TestAnalyzeProfile:
    """Tests for analyze_profile()."""

    def test_builds_full_view(self, finance_expert_profile):
        analysis = analyze_profile(finance_expert_profile)

        assert analysis.profile is finance_expert_profile
        assert analysis.sectors == [UAESector.FINANCE]
        assert analysis.language.arabic == "fluent"
        assert analysis.language.preferred_language == "bilingual"
        assert analysis.formats == [TrainingFormat.IN_PERSON_UAE]
        assert analysis.experience_level == UAEExperienceLevel.LONG_TERM_RESIDENT
        assert analysis.cultural_fit == pytest.approx(0.9)


class TestJobSector:
    """Tests for identify_job_sector()."""

    def test_first_matching_sector_wins(self):
        job = JobPosting(title="Fintech trainer", description="Islamic banking products")
        assert identify_job_sector(job) == UAESector.TECHNOLOGY

    def test_detects_finance(self, islamic_banking_job):
        assert identify_job_sector(islamic_banking_job) == UAESector.FINANCE

    def test_defaults_to_technology(self):
        job = JobPosting(title="Trainer", description="Training in Dubai")
        assert identify_job_sector(job) == UAESector.TECHNOLOGY

    def test_property_development_is_real_estate(self):
        job = JobPosting(title="Trainer", description="Property development firm")
        assert identify_job_sector(job) == UAESector.REAL_ESTATE

    def test_generic_development_is_not_real_estate(self):
        job = JobPosting(
            title="Learning and development lead",
            description="Hospital staff onboarding",
        )
        assert identify_job_sector(job) == UAESector.HEALTHCARE


class TestLanguageRequirements:
    """Tests for extract_language_requirements()."""

    def test_arabic_in_requirements(self, islamic_banking_job):
        requirement = extract_language_requirements(islamic_banking_job)
        assert requirement.arabic_required is True
        assert requirement.english_required is True
        assert requirement.preferred_language == "english"
        assert requirement.formality_level == "business"

    def test_arabic_script_requires_arabic(self):
        job = JobPosting(description="مطلوب مدرب")
        assert extract_language_requirements(job).arabic_required is True

    def test_bilingual_and_formal(self):
        job = JobPosting(description="Bilingual trainer for a government client")
        requirement = extract_language_requirements(job)
        assert requirement.arabic_required is False
        assert requirement.preferred_language == "bilingual"
        assert requirement.formality_level == "formal"


class TestTrainingFormat:
    """Tests for determine_training_format()."""

    @pytest.mark.parametrize(
        ("description", "expected"),
        [
            ("Remote delivery", TrainingFormat.VIRTUAL_UAE_TIMEZONE),
            ("Virtual sessions", TrainingFormat.VIRTUAL_UAE_TIMEZONE),
            ("Hybrid program", TrainingFormat.HYBRID_UAE),
            ("Two-day workshop", TrainingFormat.WORKSHOP_BASED),
            ("On site at our office", TrainingFormat.IN_PERSON_UAE),
        ],
    )
    def test_format_from_text(self, description, expected):
        assert determine_training_format(JobPosting(description=description)) == expected


class TestBusinessContext:
    """Tests for build_business_context()."""

    def test_defaults_from_text(self):
        job = JobPosting(description="Government entity in Dubai")
        context = build_business_context(job)
        assert context.emirate == "dubai"
        assert context.company_type == "government"
        assert context.cultural_sensitivity == 0.7
        assert context.compliance_requirements == []

    def test_defaults_without_mentions(self):
        context = build_business_context(JobPosting(description="Sales training"))
        assert context.emirate == "abu_dhabi"
        assert context.company_type == "multinational"

    def test_overrides_win(self):
        job = JobPosting(description="Government entity in Dubai")
        overrides = UAEContextOverrides(
            emirate="sharjah",
            company_type="sme",
            cultural_sensitivity=0.9,
            compliance_requirements=["MOHRE"],
        )
        context = build_business_context(job, overrides)
        assert context.emirate == "sharjah"
        assert context.company_type == "sme"
        assert context.cultural_sensitivity == 0.9
        assert context.compliance_requirements == ["MOHRE"]

    def test_zero_cultural_sensitivity_is_kept(self):
        """An explicit 0.0 is a value, not a missing override."""
        overrides = UAEContextOverrides(cultural_sensitivity=0.0)
        context = build_business_context(JobPosting(), overrides)
        assert context.cultural_sensitivity == 0.0


class TestUrgency:
    """Tests for assess_urgency()."""

    @pytest.mark.parametrize(
        ("title", "expected"),
        [
            ("URGENT: facilitator", "high"),
            ("Start ASAP", "high"),
            ("Immediate start", "high"),
            ("Starting soon", "medium"),
            ("Quick turnaround", "medium"),
            ("Facilitator", "low"),
        ],
    )
    def test_urgency_levels(self, title, expected):
        assert assess_urgency(JobPosting(title=title)) == expected


class TestAnalyzeJob:
    """Tests for analyze_job()."""

    def test_builds_full_view(self, dubai_finance_job):
        analysis = analyze_job(dubai_finance_job)

        assert analysis.job is dubai_finance_job
        assert analysis.sector == UAESector.FINANCE
        assert analysis.language.arabic_required is True
        assert analysis.training_format == TrainingFormat.IN_PERSON_UAE
        assert analysis.context.emirate == "dubai"
        assert analysis.context.company_type == "multinational"
        assert analysis.urgency == "low"
