"""Engine output: per-dimension breakdown and the aggregated evaluation."""

from pydantic import BaseModel

from models.schemas.requirement_spec import RequirementKind


class ScoreBreakdown(BaseModel):
    """Score for one requirement dimension."""
    kind: RequirementKind
    category: str = ""
    score: float = 0.0
    max_score: float = 0.0
    notes: list[str] = []
    verified: bool = False
    hard_fail: str | None = None
    score_cap: int | None = None  # set only together with hard_fail


class EvaluationResult(BaseModel):
    """Structured output of one ``score()`` call.

    ``normalized_score`` is the reported integer (0-85); ``precise_score``
    keeps the capped value before rounding.
    """
    country: str
    visa_type: str
    raw_score: float = 0.0
    total_weight: float = 0.0
    precise_score: float = 0.0
    normalized_score: int = 0
    confidence: int = 50
    passing_score: int = 60
    is_passing: bool = False
    breakdown: dict[RequirementKind, ScoreBreakdown] = {}
    met_requirements: list[str] = []
    failed_requirements: list[str] = []
    warnings: list[str] = []
    hard_fails: list[str] = []
    applied_cap: int | None = None
    used_default_requirements: bool = False
    scoring_log: list[str] = []
