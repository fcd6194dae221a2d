"""Raw per-document extraction output handed to the profile normalizer."""

from enum import Enum
from typing import Any

from pydantic import BaseModel


class DocumentType(str, Enum):
    RESUME = "resume"
    DEGREE = "degree"
    JOB_OFFER = "job_offer"
    SALARY_PROOF = "salary_proof"
    LANGUAGE_CERTIFICATE = "language_certificate"
    PASSPORT = "passport"
    EMPLOYMENT_LETTER = "employment_letter"
    FINANCIAL_PROOF = "financial_proof"


class ExtractedDocument(BaseModel):
    """One document's structured guess from the extraction service.

    ``data`` keeps the extractor's nested shape, e.g.
    ``{"degree": {"level": "Master of Science"}, "institution": {"name": "TU Munich"}}``.
    """
    extraction_success: bool | None = None
    confidence: float | None = None
    data: dict[str, Any] = {}


class ConfirmedLanguage(BaseModel):
    language: str = ""
    proficiency: str | None = None


class ConfirmedData(BaseModel):
    """Values the applicant typed in or confirmed by hand. Never verified."""
    education_level: str | None = None
    education_field: str | None = None
    years_experience: float | None = None
    current_role: str | None = None
    salary_amount: float | None = None
    salary_currency: str | None = None
    funds_amount: float | None = None
    funds_currency: str | None = None
    has_job_offer: bool | None = None
    age: int | None = None
    shortage_occupation: bool | None = None
    languages: list[ConfirmedLanguage] = []
    skills: list[str] = []


class RawExtraction(BaseModel):
    documents: dict[DocumentType, ExtractedDocument] = {}
    confirmed: ConfirmedData | None = None
