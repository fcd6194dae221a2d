"""Rank every modelled visa for one profile."""

import logging
from collections.abc import Iterable, Mapping

from models.schemas.applicant_profile import ApplicantProfile
from models.schemas.comparison import ComparisonEntry, ComparisonResult, SkippedPair
from models.schemas.evaluation_result import EvaluationResult
from services.scoring.catalog import RequirementCatalog, get_catalog
from services.scoring.engine import coerce_profile, score
from services.scoring.errors import InvalidCallContract

logger = logging.getLogger(__name__)


def _summarize(result: EvaluationResult) -> str:
    total = len(result.breakdown)
    text = f"{len(result.met_requirements)} of {total} requirements met"
    if result.hard_fails:
        text += f"; capped by: {', '.join(result.hard_fails)}"
    return text


def _requested_countries(countries) -> list[str] | None:
    if countries is None:
        return None
    if isinstance(countries, str) or not isinstance(countries, Iterable):
        raise InvalidCallContract("countries must be an iterable of country names")
    names = list(countries)
    if not all(isinstance(c, str) for c in names):
        raise InvalidCallContract("countries must contain only strings")
    return names


def compare_across(
    profile: ApplicantProfile | Mapping,
    countries: Iterable[str] | None = None,
    catalog: RequirementCatalog | None = None,
) -> ComparisonResult:
    """Score the profile against every visa, best first.

    Ties keep catalog order. A failing pair is logged and reported in
    ``skipped`` instead of aborting the comparison.
    """
    profile = coerce_profile(profile)
    requested = _requested_countries(countries)
    if catalog is None:
        catalog = get_catalog()

    skipped: list[SkippedPair] = []
    selected = catalog.list_countries()
    if requested is not None:
        wanted = set()
        for name in requested:
            canonical = catalog.canonical_country(name)
            if canonical is None:
                skipped.append(SkippedPair(country=name, reason="No visa types modelled for this country"))
            else:
                wanted.add(canonical)
        selected = [c for c in selected if c in wanted]

    entries: list[ComparisonEntry] = []
    for country in selected:
        for visa_type in catalog.list_visa_types(country):
            try:
                result = score(country, visa_type, profile, catalog)
            except Exception as e:
                logger.warning("Skipping %s / %s: %s", country, visa_type, e)
                skipped.append(SkippedPair(country=country, visa_type=visa_type, reason=str(e)))
                continue
            entries.append(
                ComparisonEntry(
                    country=result.country,
                    visa_type=result.visa_type,
                    normalized_score=result.normalized_score,
                    is_passing=result.is_passing,
                    confidence=result.confidence,
                    passing_score=result.passing_score,
                    summary=_summarize(result),
                )
            )

    entries = sorted(entries, key=lambda e: -e.normalized_score)
    logger.info("Compared %d visa types, %d skipped", len(entries), len(skipped))
    return ComparisonResult(entries=entries, skipped=skipped)
