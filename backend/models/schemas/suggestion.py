"""Purpose-based visa suggestions for one destination country."""

from pydantic import BaseModel

from models.schemas.requirement_spec import VisaPurpose


class VisaSuggestion(BaseModel):
    country: str
    visa_type: str
    description: str = ""
    purposes: list[VisaPurpose] = []
    match_score: int = 70
    matched: list[str] = []
    normalized_score: int = 0
    is_passing: bool = False
    passing_score: int = 60
