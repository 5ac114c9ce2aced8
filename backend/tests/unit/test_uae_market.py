"""Tests for UAE ranking, search insights and market insights."""

import pytest

from ldnexus.schemas.matching import JobPosting, ProfessionalProfile
from ldnexus.services.uae_market import (
    analyze_emirate,
    analyze_format_preferences,
    analyze_language_distribution,
    analyze_sector,
    analyze_top_sectors,
    build_market_insights,
    build_search_insights,
    extract_relevant_experience,
    generate_market_recommendations,
    match_strength,
    rank_jobs_for_professional,
    rank_professionals_for_job,
    to_percent,
)


@pytest.fixture
def tech_job():
    """Remote technology role, no Arabic."""
    return JobPosting(
        id=2,
        title="Digital Transformation Trainer",
        description="Remote AI and cybersecurity training for technology teams",
        location="Abu Dhabi",
        max_compensation=15000,
    )


class TestHelpers:
    """Tests for percent conversion, labels and experience extraction."""

    @pytest.mark.parametrize(
        ("score", "expected"), [(0.9475, 95), (0.466, 47), (0.125, 13), (0.0, 0)]
    )
    def test_to_percent_rounds_half_up(self, score, expected):
        assert to_percent(score) == expected

    @pytest.mark.parametrize(
        ("score", "label"),
        [
            (0.95, "Exceptional UAE Match"),
            (0.9, "Exceptional UAE Match"),
            (0.85, "Excellent UAE Match"),
            (0.7, "Strong UAE Match"),
            (0.65, "Good UAE Match"),
            (0.4, "Moderate UAE Match"),
            (0.39, "Basic UAE Match"),
        ],
    )
    def test_match_strength_labels(self, score, label):
        assert match_strength(score) == label

    def test_relevant_experience(self, finance_expert_profile, dubai_finance_job):
        assert extract_relevant_experience(finance_expert_profile, dubai_finance_job) == [
            "UAE market experience",
            "Arabic language capabilities",
            "Cross-cultural training expertise",
        ]

    def test_government_experience_needs_both_sides(self):
        profile = ProfessionalProfile(bio="Government trainer")
        assert extract_relevant_experience(
            profile, JobPosting(title="Government academy")
        ) == ["UAE government sector experience"]
        assert extract_relevant_experience(profile, JobPosting(title="Bank")) == []


class TestRankJobsForProfessional:
    """Tests for rank_jobs_for_professional()."""

    def test_sorted_by_match_score(self, finance_expert_profile, dubai_finance_job, tech_job):
        matches, total = rank_jobs_for_professional(
            finance_expert_profile, [tech_job, dubai_finance_job]
        )

        assert total == 2
        assert [m.job.id for m in matches] == [1, 2]
        top = matches[0]
        assert top.match_score == 95
        assert top.sector_score == 85
        assert top.language_score == 100
        assert top.match_strength == "Exceptional UAE Match"
        assert matches[1].match_score == 46

    def test_sector_filter_checks_description(
        self, finance_expert_profile, dubai_finance_job, tech_job
    ):
        matches, total = rank_jobs_for_professional(
            finance_expert_profile, [tech_job, dubai_finance_job], sector="Finance"
        )
        assert total == 1
        assert matches[0].job.id == 1

    def test_min_score_filters(self, finance_expert_profile, dubai_finance_job, tech_job):
        _, total = rank_jobs_for_professional(
            finance_expert_profile, [tech_job, dubai_finance_job], min_score=0.5
        )
        assert total == 1

    def test_limit_keeps_total(self, finance_expert_profile, dubai_finance_job, tech_job):
        matches, total = rank_jobs_for_professional(
            finance_expert_profile, [tech_job, dubai_finance_job], limit=1
        )
        assert len(matches) == 1
        assert total == 2


class TestRankProfessionalsForJob:
    """Tests for rank_professionals_for_job() and build_search_insights()."""

    def test_ranked_with_insights(
        self, arabic_dubai_profile, finance_expert_profile, dubai_finance_job
    ):
        matches, total, insights = rank_professionals_for_job(
            dubai_finance_job,
            [arabic_dubai_profile, finance_expert_profile],
            emirate="dubai",
        )

        assert total == 2
        assert matches[0].professional == finance_expert_profile
        assert matches[0].match_score == 95
        assert matches[1].match_score == 47
        assert matches[1].match_strength == "Moderate UAE Match"
        assert insights.average_match_score == pytest.approx(71.0)
        assert [f.factor for f in insights.top_matching_factors] == [
            "language",
            "cultural",
            "format",
            "sector",
        ]
        assert insights.improvement_suggestions == []

    def test_limit(self, arabic_dubai_profile, finance_expert_profile, dubai_finance_job):
        matches, total, _ = rank_professionals_for_job(
            dubai_finance_job, [arabic_dubai_profile, finance_expert_profile], limit=1
        )
        assert len(matches) == 1
        assert total == 2

    def test_no_professionals(self, dubai_finance_job):
        matches, total, insights = rank_professionals_for_job(dubai_finance_job, [])

        assert matches == []
        assert total == 0
        assert insights.average_match_score == 0.0
        assert insights.top_matching_factors == []

    def test_suggestions_for_weak_language_and_culture(self):
        job = JobPosting(description="Bilingual facilitator")
        profile = ProfessionalProfile(bio="English trainer")
        matches, _, _ = rank_professionals_for_job(job, [profile])

        insights = build_search_insights(matches)

        assert insights.improvement_suggestions == [
            "Consider Arabic language requirements or bilingual professionals",
            "Emphasize UAE cultural experience in job requirements",
        ]


class TestMarketInsights:
    """Tests for market overview helpers."""

    def test_top_sectors_tie_break_by_weight(self, dubai_finance_job, tech_job):
        oil_job = JobPosting(title="ADNOC trainer", description="Energy safety")
        sectors = analyze_top_sectors([dubai_finance_job, tech_job, oil_job])

        assert [s["sector"] for s in sectors] == ["oil_gas", "finance", "technology"]
        assert sectors[0] == {"sector": "oil_gas", "count": 1, "market_weight": 1.4}

    def test_language_distribution(
        self, arabic_dubai_profile, finance_expert_profile
    ):
        distribution = analyze_language_distribution(
            [arabic_dubai_profile, finance_expert_profile, ProfessionalProfile()]
        )
        assert distribution == {
            "arabic_capable": 2,
            "bilingual_capable": 1,
            "english_only": 1,
            "total": 3,
        }

    def test_format_preferences(self, dubai_finance_job, tech_job):
        hybrid_job = JobPosting(title="Hybrid coaching program")
        assert analyze_format_preferences([dubai_finance_job, tech_job, hybrid_job]) == {
            "in_person": 1,
            "virtual": 1,
            "hybrid": 1,
        }

    def test_sector_analysis(self, finance_expert_profile, dubai_finance_job, tech_job):
        analysis = analyze_sector(
            [finance_expert_profile], [dubai_finance_job, tech_job], "finance"
        )
        assert analysis == {
            "job_count": 1,
            "professional_count": 1,
            "demand_supply_ratio": 1.0,
            "average_compensation": 20000.0,
        }

    def test_emirate_analysis_matches_spaced_names(
        self, arabic_dubai_profile, dubai_finance_job, tech_job
    ):
        analysis = analyze_emirate([arabic_dubai_profile], [dubai_finance_job, tech_job], "abu_dhabi")
        assert analysis == {
            "job_count": 1,
            "professional_count": 0,
            "local_talent_ratio": 0.0,
        }

    def test_recommendations_follow_demand(self, tech_job):
        recommendations = generate_market_recommendations(
            [ProfessionalProfile(bio="English trainer")], [tech_job]
        )
        assert recommendations[0].startswith("Technology sector shows highest demand")
        assert (
            "Arabic language skills are in high demand - consider developing "
            "bilingual capabilities"
        ) in recommendations

    def test_build_market_insights(
        self, arabic_dubai_profile, finance_expert_profile, dubai_finance_job, tech_job
    ):
        insights = build_market_insights(
            [arabic_dubai_profile, finance_expert_profile],
            [dubai_finance_job, tech_job],
            sector="finance",
        )

        assert insights.market_overview["total_professionals"] == 2
        assert insights.market_overview["total_active_jobs"] == 2
        assert insights.sector_analysis is not None
        assert insights.emirate_analysis is None
        assert len(insights.cultural_considerations) == 8
        assert len(insights.compliance_requirements) == 8
