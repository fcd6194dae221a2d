"""Normalized applicant profile consumed by the scoring engine.

Every optional field left as ``None`` means "unknown", which is scored
differently from a known zero (e.g. ``total_years=0``).
"""

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class EducationInfo(_Frozen):
    level: str | None = None  # free text; canonicalized by services.scoring.levels
    field: str | None = None
    institution: str | None = None
    verified: bool = False


class ExperienceInfo(_Frozen):
    total_years: float | None = Field(default=None, ge=0)
    current_role: str | None = None
    current_company: str | None = None
    verified: bool = False


class MoneyInfo(_Frozen):
    amount: float | None = Field(default=None, ge=0)
    currency: str | None = None
    verified: bool = False


class LanguageInfo(_Frozen):
    language: str = ""
    proficiency: str | None = None  # CEFR level such as "B2"
    test_type: str | None = None  # IELTS, CELPIP, TOEFL, Goethe ...
    score: float | None = None
    verified: bool = False


class JobOfferInfo(_Frozen):
    company: str | None = None
    position: str | None = None
    country: str | None = None
    salary: float | None = None
    currency: str | None = None
    sponsorship: bool | None = None
    verified: bool = False


class ApplicantProfile(_Frozen):
    education: EducationInfo | None = None
    experience: ExperienceInfo | None = None
    salary: MoneyInfo | None = None
    funds: MoneyInfo | None = None
    languages: tuple[LanguageInfo, ...] = ()
    has_job_offer: bool | None = None
    job_offer: JobOfferInfo | None = None
    age: int | None = Field(default=None, ge=0, le=120)
    shortage_occupation: bool | None = None
    skills: tuple[str, ...] = ()
    nationality: str | None = None
    data_quality: int | None = Field(default=None, ge=0, le=100)

    @property
    def offer_known(self) -> bool | None:
        """Job offer status, falling back to the presence of offer details."""
        if self.has_job_offer is not None:
            return self.has_job_offer
        if self.job_offer is not None:
            return True
        return None
