"""Pydantic contracts shared by the catalog, normalizer, engine and comparator."""

from models.schemas.advice import VisaAdvice
from models.schemas.applicant_profile import ApplicantProfile
from models.schemas.comparison import ComparisonEntry, ComparisonResult, SkippedPair
from models.schemas.evaluation_result import EvaluationResult, ScoreBreakdown
from models.schemas.extraction import DocumentType, ExtractedDocument, RawExtraction
from models.schemas.requirement_spec import RequirementKind, RequirementSpec, VisaDefinition, VisaPurpose
from models.schemas.suggestion import VisaSuggestion

__all__ = [
    "ApplicantProfile",
    "ComparisonEntry",
    "ComparisonResult",
    "DocumentType",
    "EvaluationResult",
    "ExtractedDocument",
    "RawExtraction",
    "RequirementKind",
    "RequirementSpec",
    "ScoreBreakdown",
    "SkippedPair",
    "VisaAdvice",
    "VisaDefinition",
    "VisaPurpose",
    "VisaSuggestion",
]
