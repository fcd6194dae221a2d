"""Tests for the scoring engine: aggregation, caps, ceiling and call contract."""

import pytest

from models.schemas.applicant_profile import ApplicantProfile
from models.schemas.requirement_spec import RequirementKind
from services.scoring.catalog import RequirementCatalog, get_catalog
from services.scoring.engine import GLOBAL_SCORE_CEILING, round_half_up, score
from services.scoring.errors import InvalidCallContract

BLUE_CARD_PROFILE = {
    "education": {"level": "master", "verified": True},
    "salary": {"amount": 50000, "currency": "EUR", "verified": True},
    "has_job_offer": True,
    "experience": {"total_years": 2},
}

# 5 of 8 weight points earned -> exactly 62.5 before rounding
EDGE_TABLE = {
    "Testland": {
        "Edge Visa": {
            "passing_score": 63,
            "requirements": [
                {"kind": "age", "weight": 5, "min_age": 18, "max_age": 60, "optimal_min": 18, "optimal_max": 60},
                {"kind": "job_offer", "weight": 3},
            ],
        }
    }
}


class TestBlueCardScenarios:
    def test_qualified_applicant_passes(self):
        result = score("Germany", "EU Blue Card", BLUE_CARD_PROFILE)
        breakdown = result.breakdown
        assert breakdown[RequirementKind.EDUCATION].score >= 0.9 * breakdown[RequirementKind.EDUCATION].max_score
        assert breakdown[RequirementKind.SALARY].score == pytest.approx(30)
        assert breakdown[RequirementKind.JOB_OFFER].score == pytest.approx(25)
        assert result.is_passing is True
        assert result.normalized_score == GLOBAL_SCORE_CEILING
        assert result.used_default_requirements is False
        assert result.applied_cap is None

    def test_empty_profile_is_capped(self):
        result = score("Germany", "EU Blue Card", {})
        breakdown = result.breakdown
        assert breakdown[RequirementKind.EDUCATION].score == 0
        assert breakdown[RequirementKind.SALARY].score == 0
        assert breakdown[RequirementKind.JOB_OFFER].score == 0
        assert result.applied_cap == 30
        assert result.normalized_score <= 40
        assert result.normalized_score == 8
        assert result.is_passing is False
        assert len(result.hard_fails) == 3
        assert len(result.failed_requirements) == 3

    def test_cap_clamps_strong_other_dimensions(self):
        profile = dict(BLUE_CARD_PROFILE, has_job_offer=False)
        result = score("Germany", "EU Blue Card", profile)
        assert result.applied_cap == 40
        assert result.normalized_score == 40
        assert result.is_passing is False


class TestFallbackAndLookup:
    def test_unknown_country_uses_default_requirements(self):
        result = score("Atlantis", "Work Visa", {})
        assert result.used_default_requirements is True
        assert result.country == "Atlantis"
        assert len(result.breakdown) == 5
        # Five optional unknown dimensions at 40% each
        assert result.normalized_score == 40
        assert result.passing_score == 60

    def test_lookup_tolerates_case_and_spacing(self):
        result = score(" germany ", "eu blue card", {})
        assert result.used_default_requirements is False
        assert result.country == "Germany"
        assert result.visa_type == "EU Blue Card"

    def test_scoring_log_mentions_fallback(self):
        result = score("Atlantis", "Work Visa", {})
        assert "default requirements" in result.scoring_log[0]


class TestScoreBounds:
    @pytest.mark.catalog_wide
    def test_score_never_exceeds_ceiling(self, strong_profile):
        catalog = get_catalog()
        for country in catalog.list_countries():
            for visa_type in catalog.list_visa_types(country):
                result = score(country, visa_type, strong_profile)
                assert 0 <= result.normalized_score <= GLOBAL_SCORE_CEILING
                assert 50 <= result.confidence <= 95

    @pytest.mark.catalog_wide
    def test_required_unknown_dimensions_score_zero(self):
        catalog = get_catalog()
        for country in catalog.list_countries():
            for visa_type in catalog.list_visa_types(country):
                definition = catalog.lookup(country, visa_type)
                result = score(country, visa_type, ApplicantProfile())
                for req in definition.requirements:
                    if req.required:
                        assert result.breakdown[req.kind].score == 0

    def test_idempotent(self, strong_profile):
        first = score("Canada", "Express Entry", strong_profile)
        second = score("Canada", "Express Entry", strong_profile)
        assert first.model_dump_json() == second.model_dump_json()

    def test_breakdown_follows_catalog_order(self):
        result = score("Australia", "Skilled Independent (189)", {})
        definition = get_catalog().lookup("Australia", "Skilled Independent (189)")
        assert list(result.breakdown) == [r.kind for r in definition.requirements]

    def test_raw_and_total_weight(self):
        result = score("Germany", "EU Blue Card", BLUE_CARD_PROFILE)
        assert result.total_weight == 100
        assert result.raw_score == pytest.approx(93.5)
        assert result.precise_score == pytest.approx(85)


class TestRounding:
    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(62.5) == 63
        assert round_half_up(60.49) == 60
        assert round_half_up(0) == 0

    def test_passing_uses_unrounded_score(self):
        catalog = RequirementCatalog(EDGE_TABLE, version="test")
        result = score("Testland", "Edge Visa", {"age": 30, "has_job_offer": False}, catalog)
        assert result.precise_score == pytest.approx(62.5)
        assert result.normalized_score == 63
        assert result.is_passing is False


class TestCallContract:
    def test_non_string_country(self):
        with pytest.raises(InvalidCallContract):
            score(123, "EU Blue Card", {})

    def test_non_string_visa_type(self):
        with pytest.raises(InvalidCallContract):
            score("Germany", None, {})

    def test_profile_of_wrong_type(self):
        with pytest.raises(InvalidCallContract):
            score("Germany", "EU Blue Card", "not a profile")

    def test_mapping_that_does_not_validate(self):
        with pytest.raises(InvalidCallContract):
            score("Germany", "EU Blue Card", {"age": "very old"})

    def test_contract_error_is_a_type_error(self):
        with pytest.raises(TypeError):
            score("Germany", "EU Blue Card", 42)

    def test_profile_model_and_mapping_agree(self):
        from_mapping = score("Germany", "EU Blue Card", BLUE_CARD_PROFILE)
        from_model = score("Germany", "EU Blue Card", ApplicantProfile.model_validate(BLUE_CARD_PROFILE))
        assert from_mapping == from_model

    def test_unrecognized_profile_keys_are_rejected(self):
        profile = {
            "education": {"level": "master", "verified": True},
            "salary": {"amount": 50000, "currency": "EUR", "verified": True},
            "hasJobOffer": True,
            "experience": {"totalYears": 2},
        }
        with pytest.raises(InvalidCallContract):
            score("Germany", "EU Blue Card", profile)

    def test_unrecognized_nested_key_is_rejected(self):
        with pytest.raises(InvalidCallContract):
            score("Germany", "EU Blue Card", {"experience": {"totalYears": 2}})

    def test_injected_empty_catalog_is_used(self):
        result = score("Germany", "EU Blue Card", BLUE_CARD_PROFILE, RequirementCatalog({}, version="empty"))
        assert result.used_default_requirements is True
        assert result.passing_score == 60
