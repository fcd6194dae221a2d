"""Comparator output: ranked visa options plus skipped pairs."""

from pydantic import BaseModel


class ComparisonEntry(BaseModel):
    country: str
    visa_type: str
    normalized_score: int = 0
    is_passing: bool = False
    confidence: int = 50
    passing_score: int = 60
    summary: str = ""


class SkippedPair(BaseModel):
    """A (country, visa type) pair that could not be scored."""
    country: str
    visa_type: str | None = None
    reason: str = ""


class ComparisonResult(BaseModel):
    entries: list[ComparisonEntry] = []
    skipped: list[SkippedPair] = []

    @property
    def best_match(self) -> ComparisonEntry | None:
        return self.entries[0] if self.entries else None
