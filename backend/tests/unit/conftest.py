"""Unit-test fixtures for the UAE matcher."""

import pytest

from ldnexus.schemas.matching import JobPosting, ProfessionalProfile


@pytest.fixture
def arabic_dubai_profile():
    """Arabic-speaking Dubai trainer with no sector vocabulary."""
    return ProfessionalProfile(
        title="Corporate Trainer",
        bio="Arabic-speaking trainer based in Dubai",
        location="Dubai",
    )


@pytest.fixture
def finance_expert_profile():
    """Bilingual long-term UAE resident with Islamic banking expertise."""
    return ProfessionalProfile(
        title="Islamic Banking Trainer",
        bio=(
            "Bilingual Arabic/English trainer with 12 years in UAE delivering "
            "in-person programs on sharia compliance and financial services "
            "for the Gulf region, with a cross-cultural approach."
        ),
        industry_focus="Finance",
        location="Dubai",
    )


@pytest.fixture
def islamic_banking_job():
    """Arabic-required in-person finance role (no emirate in the text)."""
    return JobPosting(
        title="Islamic Banking Trainer",
        description="Train financial services staff on sharia compliance",
        requirements="Arabic required",
    )


@pytest.fixture
def dubai_finance_job():
    """In-person finance role in Dubai."""
    return JobPosting(
        id=1,
        title="Islamic Banking Trainer",
        description=(
            "In-person sharia compliance training for financial services "
            "and finance teams in Dubai"
        ),
        requirements="Arabic speaker required",
        location="Dubai",
        max_compensation=20000,
    )
