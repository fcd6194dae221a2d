from models.schemas.applicant_profile import ApplicantProfile
from services.scoring.confidence import confidence


def test_empty_profile_is_base():
    assert confidence(ApplicantProfile()) == 50


def test_all_signals_reach_maximum(strong_profile):
    assert confidence(strong_profile) == 95


def test_individual_signals():
    assert confidence(ApplicantProfile.model_validate({"education": {"level": "phd", "verified": True}})) == 60
    assert confidence(ApplicantProfile.model_validate({"salary": {"amount": 1, "verified": True}})) == 60
    assert confidence(ApplicantProfile.model_validate({"job_offer": {"verified": True}})) == 60
    assert confidence(ApplicantProfile.model_validate({"languages": [{"language": "English", "verified": True}]})) == 55
    assert confidence(ApplicantProfile.model_validate({"skills": ["a", "b", "c", "d"]})) == 55


def test_zero_experience_adds_nothing():
    assert confidence(ApplicantProfile.model_validate({"experience": {"total_years": 0}})) == 50
    assert confidence(ApplicantProfile.model_validate({"experience": {"total_years": 1}})) == 55


def test_unverified_fields_add_nothing():
    profile = ApplicantProfile.model_validate({
        "education": {"level": "masters"},
        "salary": {"amount": 60000},
        "skills": ["python", "sql"],
    })
    assert confidence(profile) == 50


def test_data_quality_raises_value():
    assert confidence(ApplicantProfile(data_quality=80)) == 80
    assert confidence(ApplicantProfile(data_quality=20)) == 50


def test_clamped_to_95():
    assert confidence(ApplicantProfile(data_quality=100)) == 95
