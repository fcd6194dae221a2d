"""Tests for purpose-based visa suggestions."""

import pytest

from models.schemas.requirement_spec import VisaPurpose
from services.scoring.catalog import RequirementCatalog, get_catalog
from services.scoring.errors import InvalidCallContract
from services.scoring.suggestions import base_documents, parse_purpose, suggest_visas

BLUE_CARD_PROFILE = {
    "education": {"level": "master", "verified": True},
    "salary": {"amount": 50000, "currency": "EUR", "verified": True},
    "has_job_offer": True,
    "experience": {"total_years": 2},
}


class TestSuggestVisas:
    def test_only_visas_for_the_purpose(self):
        suggestions = suggest_visas("Germany", VisaPurpose.WORK_JOB_OFFER, BLUE_CARD_PROFILE)
        assert {s.visa_type for s in suggestions} == {"EU Blue Card", "ICT Permit", "Skilled Workers Visa"}
        assert all(VisaPurpose.WORK_JOB_OFFER in s.purposes for s in suggestions)

    def test_ranked_by_match_then_eligibility(self):
        suggestions = suggest_visas("Germany", "Work - Job Offer", BLUE_CARD_PROFILE)
        assert [s.match_score for s in suggestions] == [100, 100, 90]
        assert suggestions[0].visa_type == "EU Blue Card"
        assert suggestions[0].normalized_score == 85
        assert suggestions[0].is_passing is True
        assert suggestions[-1].visa_type == "Skilled Workers Visa"

    def test_empty_profile_gets_base_score(self):
        suggestions = suggest_visas("Germany", VisaPurpose.WORK_JOB_OFFER, {})
        assert [s.match_score for s in suggestions] == [70, 70, 70]
        assert all(s.matched == [] for s in suggestions)

    def test_salary_in_other_currency_not_counted(self):
        profile = dict(BLUE_CARD_PROFILE, salary={"amount": 50000, "currency": "USD"})
        blue_card = next(
            s for s in suggest_visas("Germany", VisaPurpose.WORK_JOB_OFFER, profile)
            if s.visa_type == "EU Blue Card"
        )
        assert "Salary meets the minimum" not in blue_card.matched
        assert blue_card.match_score == 90

    def test_study_purpose(self):
        suggestions = suggest_visas("Australia", VisaPurpose.MASTERS_STUDY, {})
        assert [s.visa_type for s in suggestions] == ["Student Visa (500)"]

    def test_country_lookup_tolerates_case(self):
        suggestions = suggest_visas(" uk ", VisaPurpose.SKILLED_MIGRATION, {})
        assert {s.country for s in suggestions} == {"UK"}

    def test_no_matching_visa(self):
        assert suggest_visas("Germany", VisaPurpose.FAMILY_REUNIFICATION, {}) == []

    def test_unknown_country(self):
        assert suggest_visas("Atlantis", VisaPurpose.WORK_JOB_OFFER, {}) == []

    def test_injected_catalog(self):
        table = {"Testland": {"Work Visa": {"purposes": ["Work - Job Offer"], "requirements": [
            {"kind": "job_offer", "required": True, "weight": 10},
        ]}}}
        suggestions = suggest_visas(
            "Testland", VisaPurpose.WORK_JOB_OFFER, {"has_job_offer": True},
            RequirementCatalog(table, version="test"),
        )
        assert len(suggestions) == 1
        assert suggestions[0].match_score == 80

    def test_every_catalog_entry_has_a_purpose(self):
        catalog = get_catalog()
        for country in catalog.list_countries():
            for visa_type in catalog.list_visa_types(country):
                assert catalog.lookup(country, visa_type).purposes


class TestPurposes:
    def test_parse_by_value_or_name(self):
        assert parse_purpose("skilled migration") is VisaPurpose.SKILLED_MIGRATION
        assert parse_purpose("PHD_RESEARCH") is VisaPurpose.PHD_RESEARCH
        assert parse_purpose(VisaPurpose.BUSINESS) is VisaPurpose.BUSINESS

    def test_unknown_purpose(self):
        with pytest.raises(InvalidCallContract):
            suggest_visas("Germany", "Tourism", {})

    def test_non_string_purpose(self):
        with pytest.raises(InvalidCallContract):
            parse_purpose(3)

    def test_non_string_country(self):
        with pytest.raises(InvalidCallContract):
            suggest_visas(None, VisaPurpose.WORK_JOB_OFFER, {})

    def test_base_documents(self):
        assert "Job Offer Letter" in base_documents(VisaPurpose.WORK_JOB_OFFER)
        assert "Statement of Purpose" in base_documents("Master's Degree Study")
        assert "Relationship Proof" in base_documents(VisaPurpose.FAMILY_REUNIFICATION)

    def test_base_documents_are_copies(self):
        base_documents(VisaPurpose.BUSINESS).append("Extra")
        assert "Extra" not in base_documents(VisaPurpose.BUSINESS)
