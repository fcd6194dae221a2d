"""Deterministic visa eligibility scoring.

score() resolves the visa definition (falling back to the default
requirement set), scores every requirement in catalog order, then:

1. normalizes raw points to 0-100 over the definition's total weight,
2. clamps to the lowest hard-fail cap that triggered,
3. clamps to GLOBAL_SCORE_CEILING,
4. compares the unrounded score with the passing score, then rounds half-up.

The result depends only on its arguments and the catalog. No I/O, no clock.
"""

import logging
import math
from collections.abc import Mapping

from pydantic import ValidationError

from models.schemas.applicant_profile import ApplicantProfile
from models.schemas.evaluation_result import EvaluationResult
from services.scoring.catalog import RequirementCatalog, get_catalog, resolve
from services.scoring.confidence import confidence
from services.scoring.dimensions import score_dimension
from services.scoring.errors import InvalidCallContract

logger = logging.getLogger(__name__)

# Documents are never independently verified, so no score above this is reported.
GLOBAL_SCORE_CEILING = 85


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def coerce_profile(profile) -> ApplicantProfile:
    if isinstance(profile, ApplicantProfile):
        return profile
    if isinstance(profile, Mapping):
        try:
            return ApplicantProfile.model_validate(dict(profile))
        except ValidationError as e:
            raise InvalidCallContract(f"profile does not validate: {e.error_count()} error(s)") from e
    raise InvalidCallContract(f"profile must be an ApplicantProfile or mapping, got {type(profile).__name__}")


def score(
    country: str,
    visa_type: str,
    profile: ApplicantProfile | Mapping,
    catalog: RequirementCatalog | None = None,
) -> EvaluationResult:
    if not isinstance(country, str):
        raise InvalidCallContract(f"country must be a string, got {type(country).__name__}")
    if not isinstance(visa_type, str):
        raise InvalidCallContract(f"visa_type must be a string, got {type(visa_type).__name__}")
    profile = coerce_profile(profile)
    if catalog is None:
        catalog = get_catalog()

    definition, used_default = resolve(catalog.lookup(country, visa_type), country, visa_type)
    log: list[str] = []
    if used_default:
        logger.info("No catalog entry for %s / %s, scoring against default requirements", country, visa_type)
        log.append(f"No catalog entry for {country} / {visa_type}; default requirements used")
    else:
        log.append(f"Scoring {definition.country} / {definition.visa_type} (catalog {catalog.version})")

    breakdown = {}
    met, failed, warnings, hard_fails, caps = [], [], [], [], []
    raw = 0.0
    for req in definition.requirements:
        dim = score_dimension(req, profile)
        b = dim.breakdown
        breakdown[b.kind] = b
        raw += b.score
        log.append(f"{b.kind.value}: {b.score:.2f}/{b.max_score:g}")
        if dim.met:
            met.append(dim.met)
        if dim.failed:
            failed.append(dim.failed)
        if dim.warning:
            warnings.append(dim.warning)
        if b.hard_fail:
            hard_fails.append(b.hard_fail)
            caps.append(b.score_cap)

    total = definition.total_weight
    normalized = raw / total * 100 if total > 0 else 0.0
    log.append(f"Raw {raw:.2f} of {total:g} -> {normalized:.2f}")

    precise = normalized
    applied_cap = None
    if caps:
        applied_cap = min(caps)
        if precise > applied_cap:
            logger.debug("Hard-fail cap %d applied to %s / %s", applied_cap, country, visa_type)
            log.append(f"Hard-fail cap {applied_cap} applied")
        precise = min(precise, applied_cap)
    if precise > GLOBAL_SCORE_CEILING:
        log.append(f"Global ceiling {GLOBAL_SCORE_CEILING} applied")
        precise = GLOBAL_SCORE_CEILING
    precise = max(0.0, precise)

    reported = round_half_up(precise)
    passing = precise >= definition.passing_score
    log.append(f"Score {reported} against passing {definition.passing_score}: {'pass' if passing else 'fail'}")

    return EvaluationResult(
        country=definition.country,
        visa_type=definition.visa_type,
        raw_score=raw,
        total_weight=total,
        precise_score=precise,
        normalized_score=reported,
        confidence=confidence(profile),
        passing_score=definition.passing_score,
        is_passing=passing,
        breakdown=breakdown,
        met_requirements=met,
        failed_requirements=failed,
        warnings=warnings,
        hard_fails=hard_fails,
        applied_cap=applied_cap,
        used_default_requirements=used_default,
        scoring_log=log,
    )
