"""Suggest visa types for a destination country and a travel purpose.

Every catalog entry tagged with the purpose gets a match score: 70 for the
purpose itself, plus 10 for each headline requirement the profile already
covers (education on file, a job offer, a salary at or above the minimum).
Suggestions are ranked by match score, then by eligibility score, ties
keeping catalog order.
"""

import logging
from collections.abc import Mapping

from models.schemas.applicant_profile import ApplicantProfile
from models.schemas.requirement_spec import (
    RequirementKind,
    SalaryRequirement,
    VisaDefinition,
    VisaPurpose,
)
from models.schemas.suggestion import VisaSuggestion
from services.scoring.catalog import RequirementCatalog, get_catalog
from services.scoring.catalog_data import BASE_DOCUMENTS, PURPOSE_DOCUMENT_GROUPS
from services.scoring.engine import coerce_profile, score
from services.scoring.errors import InvalidCallContract

logger = logging.getLogger(__name__)

BASE_MATCH_SCORE = 70
MATCH_BONUS = 10


def parse_purpose(purpose) -> VisaPurpose:
    """Accept a ``VisaPurpose``, its value or its name, case-insensitively."""
    if isinstance(purpose, VisaPurpose):
        return purpose
    if not isinstance(purpose, str):
        raise InvalidCallContract(f"purpose must be a string, got {type(purpose).__name__}")
    wanted = " ".join(purpose.split()).casefold()
    for member in VisaPurpose:
        if wanted in (member.value.casefold(), member.name.casefold()):
            return member
    raise InvalidCallContract(f"unknown purpose '{purpose}'")


def base_documents(purpose) -> list[str]:
    return list(BASE_DOCUMENTS[PURPOSE_DOCUMENT_GROUPS[parse_purpose(purpose).value]])


def _salary_covered(req: SalaryRequirement, profile: ApplicantProfile) -> bool:
    amount, currency = None, None
    if profile.salary is not None and profile.salary.amount is not None:
        amount, currency = profile.salary.amount, profile.salary.currency
    elif profile.job_offer is not None and profile.job_offer.salary is not None:
        amount, currency = profile.job_offer.salary, profile.job_offer.currency
    if amount is None:
        return False
    if currency is not None and currency.strip().upper() != req.currency.upper():
        return False
    return amount >= req.min_amount


def _matches(definition: VisaDefinition, profile: ApplicantProfile) -> list[str]:
    matched = []
    for req in definition.requirements:
        if req.kind == RequirementKind.EDUCATION and profile.education is not None and profile.education.level:
            matched.append("Education on file")
        elif req.kind == RequirementKind.JOB_OFFER and profile.offer_known:
            matched.append("Job offer held")
        elif req.kind == RequirementKind.SALARY and _salary_covered(req, profile):
            matched.append("Salary meets the minimum")
    return matched


def suggest_visas(
    country: str,
    purpose: VisaPurpose | str,
    profile: ApplicantProfile | Mapping,
    catalog: RequirementCatalog | None = None,
) -> list[VisaSuggestion]:
    """Rank the country's visa types that serve ``purpose`` for this profile.

    Returns an empty list when the country has no modelled visas or none
    of them is tagged with the purpose.
    """
    if not isinstance(country, str):
        raise InvalidCallContract(f"country must be a string, got {type(country).__name__}")
    wanted = parse_purpose(purpose)
    profile = coerce_profile(profile)
    if catalog is None:
        catalog = get_catalog()

    suggestions: list[VisaSuggestion] = []
    for visa_type in catalog.list_visa_types(country):
        definition = catalog.lookup(country, visa_type)
        if wanted not in definition.purposes:
            continue
        matched = _matches(definition, profile)
        result = score(definition.country, visa_type, profile, catalog)
        suggestions.append(
            VisaSuggestion(
                country=definition.country,
                visa_type=visa_type,
                description=definition.description,
                purposes=list(definition.purposes),
                match_score=BASE_MATCH_SCORE + MATCH_BONUS * len(matched),
                matched=matched,
                normalized_score=result.normalized_score,
                is_passing=result.is_passing,
                passing_score=result.passing_score,
            )
        )

    suggestions.sort(key=lambda s: (-s.match_score, -s.normalized_score))
    logger.info("%d visa suggestion(s) for %s / %s", len(suggestions), country, wanted.value)
    return suggestions
