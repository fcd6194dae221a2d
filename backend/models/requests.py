from pydantic import BaseModel, Field, model_validator

from models.schemas.applicant_profile import ApplicantProfile
from models.schemas.extraction import RawExtraction
from models.schemas.requirement_spec import VisaPurpose


class _ProfileInput(BaseModel):
    """Either a ready profile or raw extraction output, not both."""
    profile: ApplicantProfile | None = None
    extraction: RawExtraction | None = None

    @model_validator(mode="after")
    def _one_source(self):
        if self.profile is not None and self.extraction is not None:
            raise ValueError("send either 'profile' or 'extraction', not both")
        return self


class EvaluateRequest(_ProfileInput):
    country: str = Field(..., min_length=1, max_length=100)
    visa_type: str = Field(..., min_length=1, max_length=200)
    include_advice: bool = False


class CompareRequest(_ProfileInput):
    countries: list[str] | None = Field(default=None, max_length=50)


class SuggestRequest(_ProfileInput):
    country: str = Field(..., min_length=1, max_length=100)
    purpose: VisaPurpose
