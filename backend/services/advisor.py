"""Best-effort LLM advice for a finished evaluation.

Runs strictly after scoring. A failure here only means no advice; the
evaluation itself is returned unchanged.
"""

import logging

from pydantic import ValidationError

from config import settings
from models.schemas.advice import VisaAdvice
from models.schemas.applicant_profile import ApplicantProfile
from models.schemas.evaluation_result import EvaluationResult
from services import gemini_client
from services.prompt_builder import build_advice_prompt

logger = logging.getLogger(__name__)


def is_configured() -> bool:
    return settings.advisor_enabled and bool(settings.gemini_api_key)


async def advise(profile: ApplicantProfile, result: EvaluationResult) -> VisaAdvice | None:
    if not settings.advisor_enabled:
        return None

    data = await gemini_client.generate_json(build_advice_prompt(profile, result))
    if data is None:
        return None

    try:
        advice = VisaAdvice.model_validate(data)
    except ValidationError as e:
        logger.error("Gemini advice did not match the expected shape: %s", e)
        return None

    logger.info("Advice generated for %s / %s", result.country, result.visa_type)
    return advice
