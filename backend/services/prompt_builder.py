"""Prompt templates for Gemini API calls."""

from models.schemas.applicant_profile import ApplicantProfile
from models.schemas.evaluation_result import EvaluationResult


def _profile_lines(profile: ApplicantProfile) -> str:
    lines = []
    if profile.education:
        lines.append(f"- Education: {profile.education.level or 'unknown'}"
                     f" in {profile.education.field or 'unspecified field'}")
    if profile.experience and profile.experience.total_years is not None:
        role = profile.experience.current_role or "unspecified role"
        lines.append(f"- Experience: {profile.experience.total_years:g} years, currently {role}")
    if profile.salary and profile.salary.amount is not None:
        lines.append(f"- Salary: {profile.salary.amount:,.0f} {profile.salary.currency or ''}".rstrip())
    for lang in profile.languages:
        level = lang.proficiency or (f"{lang.test_type} {lang.score:g}" if lang.score is not None else "unknown")
        lines.append(f"- Language: {lang.language or 'unspecified'} ({level})")
    if profile.offer_known is not None:
        lines.append(f"- Job offer: {'yes' if profile.offer_known else 'no'}")
    if profile.age is not None:
        lines.append(f"- Age: {profile.age}")
    if profile.skills:
        lines.append(f"- Skills: {', '.join(profile.skills[:15])}")
    return "\n".join(lines) or "- No profile data available"


def build_advice_prompt(profile: ApplicantProfile, result: EvaluationResult) -> str:
    """Ask for qualitative advice on an already computed evaluation.

    The score is fixed; the model is told explicitly not to rescore.
    """
    breakdown = "\n".join(
        f"- {b.category}: {b.score:.1f}/{b.max_score:g}" + (f" ({'; '.join(b.notes)})" if b.notes else "")
        for b in result.breakdown.values()
    )
    failed = "\n".join(f"- {f}" for f in result.failed_requirements) or "- none"
    warnings = "\n".join(f"- {w}" for w in result.warnings) or "- none"

    return f"""You are an experienced immigration consultant.

An applicant was assessed for the {result.visa_type} visa in {result.country}.
The rule-based eligibility score is {result.normalized_score}/100
(passing score {result.passing_score}, {'passing' if result.is_passing else 'not passing'}).
Do NOT produce a new score. Explain the result and give practical next steps.

APPLICANT PROFILE:
{_profile_lines(profile)}

SCORE BREAKDOWN:
{breakdown}

FAILED REQUIREMENTS:
{failed}

WARNINGS:
{warnings}

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "summary": "<2-3 sentence overview of the applicant's position>",
  "strengths": ["<strength 1>", "<strength 2>"],
  "weaknesses": ["<weakness 1>", "<weakness 2>"],
  "suggestions": ["<concrete action 1>", "<concrete action 2>", "<concrete action 3>"]
}}"""
