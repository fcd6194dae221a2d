"""HTTP mapping for scoring-layer exceptions."""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from services.scoring.errors import InvalidCallContract, ScoringError

logger = logging.getLogger(__name__)


async def scoring_exception_handler(request: Request, exc: ScoringError) -> JSONResponse:
    status_code = 400 if isinstance(exc, InvalidCallContract) else 500
    if status_code == 500:
        logger.error("Scoring error in %s: %s", request.url.path, exc, exc_info=True)
    else:
        logger.warning("Rejected call to %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "type": exc.__class__.__name__},
    )
