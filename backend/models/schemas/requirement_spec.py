"""Catalog contracts: typed requirement specs and visa definitions.

Each scoring dimension is one member of a closed tagged union keyed on
``kind``, so the engine can dispatch exhaustively on it.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RequirementKind(str, Enum):
    EDUCATION = "education"
    EXPERIENCE = "experience"
    SALARY = "salary"
    FINANCIAL_PROOF = "financial_proof"
    JOB_OFFER = "job_offer"
    LANGUAGE = "language"
    AGE = "age"
    OCCUPATION = "occupation"


class VisaPurpose(str, Enum):
    BACHELORS_STUDY = "Bachelor's Degree Study"
    MASTERS_STUDY = "Master's Degree Study"
    PHD_RESEARCH = "PhD/Research"
    WORK_JOB_OFFER = "Work - Job Offer"
    WORK_JOB_SEEKING = "Work - Job Seeking"
    SKILLED_MIGRATION = "Skilled Migration"
    BUSINESS = "Business/Entrepreneurship"
    FAMILY_REUNIFICATION = "Family Reunification"
    INTERNSHIP = "Internship/Training"


EducationLevel = Literal["highschool", "diploma", "bachelors", "masters", "phd"]
CefrLevel = Literal["A1", "A2", "B1", "B2", "C1", "C2"]


class _Requirement(BaseModel):
    model_config = ConfigDict(frozen=True)

    required: bool = False
    weight: float = Field(gt=0)
    hard_fail_cap: int | None = Field(default=None, ge=0, le=100)
    criteria: str = ""


class EducationRequirement(_Requirement):
    kind: Literal[RequirementKind.EDUCATION] = RequirementKind.EDUCATION
    min_level: EducationLevel = "bachelors"


class ExperienceRequirement(_Requirement):
    kind: Literal[RequirementKind.EXPERIENCE] = RequirementKind.EXPERIENCE
    min_years: float = Field(default=0.0, ge=0)
    bonus_years: float = Field(default=3.0, gt=0)  # years past the minimum that reach full weight


class SalaryRequirement(_Requirement):
    """Annual gross salary threshold."""
    kind: Literal[RequirementKind.SALARY] = RequirementKind.SALARY
    min_amount: float = Field(gt=0)
    currency: str = "EUR"
    alternate_min_for_shortage_occupation: float | None = Field(default=None, gt=0)
    young_applicant_min_amount: float | None = Field(default=None, gt=0)
    young_applicant_max_age: int | None = None


class FinancialProofRequirement(_Requirement):
    kind: Literal[RequirementKind.FINANCIAL_PROOF] = RequirementKind.FINANCIAL_PROOF
    min_amount: float | None = Field(default=None, gt=0)
    currency: str = "EUR"


class JobOfferRequirement(_Requirement):
    kind: Literal[RequirementKind.JOB_OFFER] = RequirementKind.JOB_OFFER
    sponsor_required: bool = False


class LanguageRequirement(_Requirement):
    kind: Literal[RequirementKind.LANGUAGE] = RequirementKind.LANGUAGE
    min_level: CefrLevel = "B1"
    accepted_languages: tuple[str, ...] = ()  # empty accepts any language


class AgeRequirement(_Requirement):
    kind: Literal[RequirementKind.AGE] = RequirementKind.AGE
    min_age: int = 18
    max_age: int = 45
    optimal_min: int = 20
    optimal_max: int = 32

    @model_validator(mode="after")
    def _check_ranges(self) -> "AgeRequirement":
        if not self.min_age <= self.optimal_min <= self.optimal_max <= self.max_age:
            raise ValueError("age bounds must satisfy min <= optimal_min <= optimal_max <= max")
        return self


class OccupationRequirement(_Requirement):
    kind: Literal[RequirementKind.OCCUPATION] = RequirementKind.OCCUPATION
    listed_occupations: tuple[str, ...] = ()


RequirementSpec = Annotated[
    Union[
        EducationRequirement,
        ExperienceRequirement,
        SalaryRequirement,
        FinancialProofRequirement,
        JobOfferRequirement,
        LanguageRequirement,
        AgeRequirement,
        OccupationRequirement,
    ],
    Field(discriminator="kind"),
]


class OfficialSource(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    url: str
    relevance: str = ""


class VisaDefinition(BaseModel):
    """One immutable catalog entry for a (country, visa type) pair."""
    model_config = ConfigDict(frozen=True)

    country: str
    visa_type: str
    description: str = ""
    requirements: tuple[RequirementSpec, ...] = ()
    passing_score: int = Field(default=60, ge=0, le=100)
    purposes: tuple[VisaPurpose, ...] = ()
    official_sources: tuple[OfficialSource, ...] = ()
    required_documents: tuple[str, ...] = ()
    optional_documents: tuple[str, ...] = ()

    @model_validator(mode="after")
    def _unique_kinds(self) -> "VisaDefinition":
        kinds = [r.kind for r in self.requirements]
        if len(kinds) != len(set(kinds)):
            raise ValueError(f"duplicate requirement kinds for {self.country} / {self.visa_type}")
        return self

    @property
    def total_weight(self) -> float:
        return sum(r.weight for r in self.requirements)
