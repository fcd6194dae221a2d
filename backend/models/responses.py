from pydantic import BaseModel

from models.schemas.advice import VisaAdvice
from models.schemas.applicant_profile import ApplicantProfile
from models.schemas.comparison import ComparisonEntry, SkippedPair
from models.schemas.evaluation_result import EvaluationResult
from models.schemas.requirement_spec import VisaPurpose
from models.schemas.suggestion import VisaSuggestion


class CountryVisas(BaseModel):
    country: str
    visa_types: list[str] = []


class VisaSummary(BaseModel):
    visa_type: str
    description: str = ""
    passing_score: int = 60
    purposes: list[VisaPurpose] = []


class EvaluateResponse(BaseModel):
    result: EvaluationResult
    profile: ApplicantProfile
    advice: VisaAdvice | None = None


class CompareResponse(BaseModel):
    entries: list[ComparisonEntry] = []
    skipped: list[SkippedPair] = []
    best_match: ComparisonEntry | None = None


class SuggestResponse(BaseModel):
    country: str
    purpose: VisaPurpose
    suggestions: list[VisaSuggestion] = []
    base_documents: list[str] = []
    profile: ApplicantProfile
