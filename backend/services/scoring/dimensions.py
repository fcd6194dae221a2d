"""Per-dimension scoring rules.

Each ``assess_*`` function looks at one requirement and the matching part of
the profile and returns an ``Assessment``: the fraction of the weight earned
(``None`` when the profile does not say), a band and explanatory notes.
``score_dimension`` then applies the shared unknown-field and hard-fail
policies and turns the assessment into a ``DimensionScore``.

Band fractions on value / minimum:

    >= 1.5  exceeds  100%
    >= 1.0  meets     85%  (+ per-kind bonuses, capped at 100%)
    >= 0.7  near      50%
    <  0.7  far       20%
"""

import re
from dataclasses import dataclass, field
from typing import Callable

from models.schemas.applicant_profile import ApplicantProfile, LanguageInfo
from models.schemas.evaluation_result import ScoreBreakdown
from models.schemas.requirement_spec import (
    AgeRequirement,
    EducationRequirement,
    ExperienceRequirement,
    FinancialProofRequirement,
    JobOfferRequirement,
    LanguageRequirement,
    OccupationRequirement,
    RequirementKind,
    SalaryRequirement,
)
from services.scoring import levels

EXCEEDS = "exceeds"
MEETS = "meets"
NEAR = "near"
FAR = "far"

BAND_FRACTIONS: dict[str, float] = {EXCEEDS: 1.0, MEETS: 0.85, NEAR: 0.5, FAR: 0.2}

UNKNOWN_CREDIT = 0.4
VERIFIED_BONUS = 0.15
LEVEL_STEP_BONUS = 0.10
INSTITUTION_BONUS = 0.05
AGE_ACCEPTABLE = 0.6

CATEGORY_NAMES: dict[RequirementKind, str] = {
    RequirementKind.EDUCATION: "Education",
    RequirementKind.EXPERIENCE: "Work experience",
    RequirementKind.SALARY: "Salary",
    RequirementKind.FINANCIAL_PROOF: "Financial proof",
    RequirementKind.JOB_OFFER: "Job offer",
    RequirementKind.LANGUAGE: "Language",
    RequirementKind.AGE: "Age",
    RequirementKind.OCCUPATION: "Occupation",
}


@dataclass
class Assessment:
    fraction: float | None  # None = field unknown
    band: str | None = None
    notes: list[str] = field(default_factory=list)
    verified: bool = False
    summary: str = ""


@dataclass
class DimensionScore:
    breakdown: ScoreBreakdown
    met: str | None = None
    failed: str | None = None
    warning: str | None = None


def band_for_ratio(ratio: float) -> str:
    if ratio >= 1.5:
        return EXCEEDS
    if ratio >= 1.0:
        return MEETS
    if ratio >= 0.7:
        return NEAR
    return FAR


def _is_met(band: str | None) -> bool:
    return band in (EXCEEDS, MEETS)


def _money(amount: float, currency: str) -> str:
    return f"{amount:,.0f} {currency}"


def _with_verified(fraction: float, band: str, verified: bool, notes: list[str]) -> float:
    if verified and _is_met(band) and fraction < 1.0:
        notes.append("Verified by document")
        return min(1.0, fraction + VERIFIED_BONUS)
    return fraction


def _same_currency(given: str | None, expected: str) -> bool:
    return given is None or given.strip().upper() == expected.upper()


# --- education ---------------------------------------------------------------

def assess_education(req: EducationRequirement, profile: ApplicantProfile) -> Assessment:
    edu = profile.education
    if edu is None or not edu.level:
        return Assessment(None, summary="Education level not provided")

    level = levels.parse_education_level(edu.level)
    if level is None:
        return Assessment(
            None,
            notes=[f"Unrecognized education level '{edu.level}'"],
            summary="Education level could not be determined",
        )

    rank = levels.education_rank(level)
    min_rank = levels.education_rank(req.min_level)
    band = band_for_ratio(rank / min_rank)
    notes = [f"{level} against minimum {req.min_level}"]

    if level == "phd":
        fraction = 1.0
        band = EXCEEDS
        notes.append("Doctorate earns full credit")
    elif _is_met(band):
        fraction = max(BAND_FRACTIONS[band], BAND_FRACTIONS[MEETS] + LEVEL_STEP_BONUS * (rank - min_rank))
        if rank > min_rank:
            notes.append(f"{rank - min_rank} level(s) above minimum")
        if edu.institution:
            fraction += INSTITUTION_BONUS
            notes.append(f"Institution: {edu.institution}")
    else:
        fraction = BAND_FRACTIONS[band]

    fraction = min(1.0, _with_verified(min(1.0, fraction), band, edu.verified, notes))
    if _is_met(band):
        summary = f"Education: {level} meets {req.min_level} minimum"
    else:
        summary = f"Education: {level} is below {req.min_level} minimum"
    return Assessment(fraction, band, notes, edu.verified, summary)


# --- experience --------------------------------------------------------------

def assess_experience(req: ExperienceRequirement, profile: ApplicantProfile) -> Assessment:
    exp = profile.experience
    if exp is None or exp.total_years is None:
        return Assessment(None, summary="Work experience not provided")

    years = exp.total_years
    notes = [f"{years:g} year(s) against minimum {req.min_years:g}"]

    if req.min_years > 0:
        ratio = years / req.min_years
        band = band_for_ratio(ratio)
        if band == EXCEEDS:
            fraction = 1.0
        elif band == MEETS:
            surplus = min(1.0, (years - req.min_years) / req.bonus_years)
            fraction = BAND_FRACTIONS[MEETS] + (1.0 - BAND_FRACTIONS[MEETS]) * surplus
        else:
            fraction = BAND_FRACTIONS[band]
    elif years >= req.bonus_years:
        band = EXCEEDS
        fraction = 1.0
    elif years > 0:
        band = MEETS
        fraction = BAND_FRACTIONS[MEETS] + (1.0 - BAND_FRACTIONS[MEETS]) * years / req.bonus_years
    else:
        band = FAR
        fraction = BAND_FRACTIONS[FAR]
        notes.append("No professional experience")

    fraction = _with_verified(fraction, band, exp.verified, notes)
    if _is_met(band):
        summary = f"Work experience: {years:g} year(s) meets requirement"
    else:
        summary = f"Work experience: {years:g} year(s) below {req.min_years:g} year minimum"
    return Assessment(fraction, band, notes, exp.verified, summary)


# --- salary and funds --------------------------------------------------------

def _salary_threshold(req: SalaryRequirement, profile: ApplicantProfile) -> tuple[float, str]:
    threshold, reason = req.min_amount, "standard"
    if profile.shortage_occupation and req.alternate_min_for_shortage_occupation:
        if req.alternate_min_for_shortage_occupation < threshold:
            threshold, reason = req.alternate_min_for_shortage_occupation, "shortage occupation"
    if (
        req.young_applicant_min_amount
        and req.young_applicant_max_age is not None
        and profile.age is not None
        and profile.age <= req.young_applicant_max_age
        and req.young_applicant_min_amount < threshold
    ):
        threshold, reason = req.young_applicant_min_amount, f"applicant aged {req.young_applicant_max_age} or under"
    return threshold, reason


def assess_salary(req: SalaryRequirement, profile: ApplicantProfile) -> Assessment:
    amount, currency, verified, notes = None, None, False, []
    if profile.salary is not None and profile.salary.amount is not None:
        amount, currency, verified = profile.salary.amount, profile.salary.currency, profile.salary.verified
    elif profile.job_offer is not None and profile.job_offer.salary is not None:
        amount, currency, verified = profile.job_offer.salary, profile.job_offer.currency, profile.job_offer.verified
        notes.append("Salary taken from job offer")

    if amount is None:
        return Assessment(None, summary="Salary not provided")
    if not _same_currency(currency, req.currency):
        notes.append(f"Salary currency {currency} differs from {req.currency}; not converted")
        return Assessment(None, notes=notes, summary=f"Salary in {currency} cannot be compared")

    threshold, reason = _salary_threshold(req, profile)
    notes.append(f"{_money(amount, req.currency)} against {_money(threshold, req.currency)} ({reason})")
    band = band_for_ratio(amount / threshold)
    fraction = _with_verified(BAND_FRACTIONS[band], band, verified, notes)
    if _is_met(band):
        summary = f"Salary: {_money(amount, req.currency)} meets threshold"
    else:
        summary = f"Salary: {_money(amount, req.currency)} below {_money(threshold, req.currency)} threshold"
    return Assessment(fraction, band, notes, verified, summary)


def assess_financial_proof(req: FinancialProofRequirement, profile: ApplicantProfile) -> Assessment:
    funds = profile.funds
    if funds is None or funds.amount is None:
        return Assessment(None, summary="Proof of funds not provided")
    if not _same_currency(funds.currency, req.currency):
        return Assessment(
            None,
            notes=[f"Funds currency {funds.currency} differs from {req.currency}; not converted"],
            summary=f"Funds in {funds.currency} cannot be compared",
        )

    notes = []
    if req.min_amount is None:
        band = MEETS if funds.amount > 0 else FAR
        notes.append(f"{_money(funds.amount, req.currency)} available")
    else:
        band = band_for_ratio(funds.amount / req.min_amount)
        notes.append(f"{_money(funds.amount, req.currency)} against {_money(req.min_amount, req.currency)}")
    fraction = _with_verified(BAND_FRACTIONS[band], band, funds.verified, notes)
    if _is_met(band):
        summary = "Financial proof: sufficient funds"
    else:
        summary = "Financial proof: insufficient funds"
    return Assessment(fraction, band, notes, funds.verified, summary)


# --- job offer ---------------------------------------------------------------

def assess_job_offer(req: JobOfferRequirement, profile: ApplicantProfile) -> Assessment:
    known = profile.offer_known
    if known is None:
        return Assessment(None, summary="Job offer status not provided")

    offer = profile.job_offer
    verified = bool(offer and offer.verified)
    if not known:
        return Assessment(0.0, FAR, ["No job offer"], False, "Job offer: none")

    notes = []
    if offer is not None and offer.company:
        notes.append(f"Offer from {offer.company}")
    if req.sponsor_required and offer is not None and offer.sponsorship is False:
        notes.append("Employer is not a licensed sponsor")
        return Assessment(BAND_FRACTIONS[NEAR], NEAR, notes, verified, "Job offer: employer cannot sponsor")
    return Assessment(1.0, EXCEEDS, notes, verified, "Job offer: in hand")


# --- language ----------------------------------------------------------------

def _accepted(entry: LanguageInfo, accepted: tuple[str, ...]) -> bool:
    if not accepted or not entry.language:
        return True
    return entry.language.strip().casefold() in {a.casefold() for a in accepted}


def assess_language(req: LanguageRequirement, profile: ApplicantProfile) -> Assessment:
    if not profile.languages:
        return Assessment(None, summary="Language proficiency not provided")

    candidates = [e for e in profile.languages if _accepted(e, req.accepted_languages)]
    rated = []
    for entry in candidates:
        level = levels.language_level(entry.proficiency, entry.score, entry.test_type)
        if level:
            rated.append((levels.cefr_rank(level), entry.verified, level, entry))

    if not rated:
        if candidates or not req.accepted_languages:
            return Assessment(None, summary="Language level could not be determined")
        accepted = ", ".join(req.accepted_languages)
        return Assessment(
            BAND_FRACTIONS[FAR], FAR, [f"None of {accepted}"], False,
            f"Language: no proficiency in {accepted}",
        )

    rank, verified, level, entry = max(rated, key=lambda r: (r[0], r[1]))
    min_rank = levels.cefr_rank(req.min_level)
    name = entry.language or "Language"
    band = band_for_ratio(rank / min_rank)
    notes = [f"{name} {level} against minimum {req.min_level}"]
    if _is_met(band):
        fraction = max(BAND_FRACTIONS[band], BAND_FRACTIONS[MEETS] + LEVEL_STEP_BONUS * (rank - min_rank))
        summary = f"Language: {name} {level} meets {req.min_level}"
    else:
        fraction = BAND_FRACTIONS[band]
        summary = f"Language: {name} {level} below {req.min_level}"
    fraction = min(1.0, _with_verified(min(1.0, fraction), band, verified, notes))
    return Assessment(fraction, band, notes, verified, summary)


# --- age ---------------------------------------------------------------------

def assess_age(req: AgeRequirement, profile: ApplicantProfile) -> Assessment:
    age = profile.age
    if age is None:
        return Assessment(None, summary="Age not provided")
    if req.optimal_min <= age <= req.optimal_max:
        return Assessment(1.0, EXCEEDS, [f"{age} within optimal range"], False, f"Age: {age} optimal")
    if req.min_age <= age <= req.max_age:
        return Assessment(
            AGE_ACCEPTABLE, MEETS, [f"{age} outside optimal {req.optimal_min}-{req.optimal_max}"],
            False, f"Age: {age} eligible",
        )
    return Assessment(
        BAND_FRACTIONS[FAR], FAR, [f"{age} outside {req.min_age}-{req.max_age}"],
        False, f"Age: {age} outside eligible range",
    )


# --- occupation --------------------------------------------------------------

def assess_occupation(req: OccupationRequirement, profile: ApplicantProfile) -> Assessment:
    role = None
    if profile.job_offer is not None and profile.job_offer.position:
        role = profile.job_offer.position
    elif profile.experience is not None and profile.experience.current_role:
        role = profile.experience.current_role
    if not role:
        return Assessment(None, summary="Occupation not provided")

    if not req.listed_occupations:
        return Assessment(BAND_FRACTIONS[MEETS], MEETS, [role], False, f"Occupation: {role}")
    for occupation in req.listed_occupations:
        if re.search(rf"\b{re.escape(occupation)}(?:s)?(?!\w)", role, re.IGNORECASE):
            return Assessment(1.0, EXCEEDS, [f"'{role}' matches '{occupation}'"], False,
                              f"Occupation: {role} is listed")
    return Assessment(BAND_FRACTIONS[FAR], FAR, [f"'{role}' not on the eligible list"], False,
                      f"Occupation: {role} is not listed")


SCORERS: dict[RequirementKind, Callable[..., Assessment]] = {
    RequirementKind.EDUCATION: assess_education,
    RequirementKind.EXPERIENCE: assess_experience,
    RequirementKind.SALARY: assess_salary,
    RequirementKind.FINANCIAL_PROOF: assess_financial_proof,
    RequirementKind.JOB_OFFER: assess_job_offer,
    RequirementKind.LANGUAGE: assess_language,
    RequirementKind.AGE: assess_age,
    RequirementKind.OCCUPATION: assess_occupation,
}


def score_dimension(req, profile: ApplicantProfile) -> DimensionScore:
    """Score one requirement, applying the unknown-field and hard-fail policies."""
    kind = RequirementKind(req.kind)
    category = CATEGORY_NAMES[kind]
    assessment = SCORERS[kind](req, profile)
    notes = list(assessment.notes)
    breakdown = ScoreBreakdown(kind=kind, category=category, max_score=req.weight)

    if assessment.fraction is None:
        if req.required:
            notes.append("Required but not provided")
            hard_fail = f"{category} is required but unknown" if req.hard_fail_cap is not None else None
            return DimensionScore(
                breakdown.model_copy(update={
                    "score": 0.0, "notes": notes, "hard_fail": hard_fail,
                    "score_cap": req.hard_fail_cap if hard_fail else None,
                }),
                failed=f"{assessment.summary} (required)",
            )
        notes.append(f"Unknown; {UNKNOWN_CREDIT:.0%} partial credit")
        return DimensionScore(
            breakdown.model_copy(update={"score": req.weight * UNKNOWN_CREDIT, "notes": notes}),
            warning=assessment.summary,
        )

    points = min(assessment.fraction, 1.0) * req.weight
    update = {"score": points, "notes": notes, "verified": assessment.verified}
    result = DimensionScore(breakdown)

    if _is_met(assessment.band):
        result.met = assessment.summary
    # Required education below the minimum caps the score even when close
    elif assessment.band == NEAR and not (kind == RequirementKind.EDUCATION and req.required):
        result.warning = assessment.summary
    elif req.required:
        result.failed = assessment.summary
        if req.hard_fail_cap is not None:
            update["hard_fail"] = assessment.summary
            update["score_cap"] = req.hard_fail_cap
    elif kind != RequirementKind.JOB_OFFER:
        result.warning = assessment.summary

    result.breakdown = breakdown.model_copy(update=update)
    return result
