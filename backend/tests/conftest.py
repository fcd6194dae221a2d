"""Shared test configuration, fixtures and pytest markers."""

import pytest

from models.schemas.applicant_profile import ApplicantProfile


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "catalog_wide: runs against every visa in the requirement catalog"
    )


@pytest.fixture(autouse=True)
def _no_rate_limit():
    from api.router import limiter

    limiter.enabled = False
    yield
    limiter.enabled = True


@pytest.fixture
def strong_profile() -> ApplicantProfile:
    """Verified, well-qualified applicant."""
    return ApplicantProfile.model_validate({
        "education": {"level": "masters", "field": "Computer Science", "institution": "TU Munich", "verified": True},
        "experience": {"total_years": 8, "current_role": "Senior Software Engineer", "verified": True},
        "salary": {"amount": 90000, "currency": "EUR", "verified": True},
        "funds": {"amount": 30000, "currency": "EUR", "verified": True},
        "languages": [
            {"language": "English", "proficiency": "C1", "verified": True},
            {"language": "German", "proficiency": "B2"},
        ],
        "has_job_offer": True,
        "job_offer": {"company": "Acme GmbH", "position": "Software Engineer", "sponsorship": True, "verified": True},
        "age": 29,
        "skills": ["Python", "Docker", "Kubernetes", "PostgreSQL"],
    })
