"""Optional LLM advice attached next to (never inside) an evaluation."""

from pydantic import BaseModel


class VisaAdvice(BaseModel):
    summary: str = ""
    strengths: list[str] = []
    weaknesses: list[str] = []
    suggestions: list[str] = []
