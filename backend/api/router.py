import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_requirement_catalog
from config import settings
from models.requests import CompareRequest, EvaluateRequest, SuggestRequest
from models.responses import CompareResponse, CountryVisas, EvaluateResponse, SuggestResponse, VisaSummary
from models.schemas.applicant_profile import ApplicantProfile
from models.schemas.requirement_spec import VisaDefinition, VisaPurpose
from services import advisor, profile_normalizer
from services.scoring.catalog import RequirementCatalog
from services.scoring.catalog_data import CATALOG_VERSION
from services.scoring.comparator import compare_across
from services.scoring.engine import score
from services.scoring.suggestions import base_documents, suggest_visas

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _profile_from(body) -> ApplicantProfile:
    if body.extraction is not None:
        return profile_normalizer.normalize(body.extraction)
    return body.profile or ApplicantProfile()


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "catalog_version": CATALOG_VERSION,
        "advisor_configured": advisor.is_configured(),
    }


@router.get("/countries", response_model=list[CountryVisas])
async def countries(catalog: RequirementCatalog = Depends(get_requirement_catalog)):
    return [
        CountryVisas(country=c, visa_types=catalog.list_visa_types(c))
        for c in catalog.list_countries()
    ]


@router.get("/countries/{country}/visas", response_model=list[VisaSummary])
async def country_visas(country: str, catalog: RequirementCatalog = Depends(get_requirement_catalog)):
    visa_types = catalog.list_visa_types(country)
    if not visa_types:
        raise HTTPException(status_code=404, detail=f"No visa types modelled for '{country}'")
    summaries = []
    for visa_type in visa_types:
        definition = catalog.lookup(country, visa_type)
        summaries.append(VisaSummary(
            visa_type=visa_type,
            description=definition.description,
            passing_score=definition.passing_score,
            purposes=list(definition.purposes),
        ))
    return summaries


@router.get("/requirements/{country}/{visa_type}", response_model=VisaDefinition)
async def requirements(
    country: str,
    visa_type: str,
    catalog: RequirementCatalog = Depends(get_requirement_catalog),
):
    definition = catalog.lookup(country, visa_type)
    if definition is None:
        raise HTTPException(status_code=404, detail=f"'{visa_type}' is not modelled for '{country}'")
    return definition


@router.post("/evaluate", response_model=EvaluateResponse)
@limiter.limit(settings.rate_limit)
async def evaluate(
    request: Request,
    body: EvaluateRequest,
    catalog: RequirementCatalog = Depends(get_requirement_catalog),
):
    profile = _profile_from(body)
    result = score(body.country, body.visa_type, profile, catalog)

    advice = None
    if body.include_advice:
        advice = await advisor.advise(profile, result)
        if advice is None:
            logger.info("No advice available for %s / %s", result.country, result.visa_type)

    return EvaluateResponse(result=result, profile=profile, advice=advice)


@router.post("/compare", response_model=CompareResponse)
@limiter.limit(settings.rate_limit)
async def compare(
    request: Request,
    body: CompareRequest,
    catalog: RequirementCatalog = Depends(get_requirement_catalog),
):
    comparison = compare_across(_profile_from(body), body.countries, catalog)
    return CompareResponse(
        entries=comparison.entries,
        skipped=comparison.skipped,
        best_match=comparison.best_match,
    )


@router.get("/purposes")
async def purposes():
    return [{"purpose": p.value, "base_documents": base_documents(p)} for p in VisaPurpose]


@router.post("/suggest", response_model=SuggestResponse)
@limiter.limit(settings.rate_limit)
async def suggest(
    request: Request,
    body: SuggestRequest,
    catalog: RequirementCatalog = Depends(get_requirement_catalog),
):
    country = catalog.canonical_country(body.country)
    if country is None:
        raise HTTPException(status_code=404, detail=f"No visa types modelled for '{body.country}'")
    profile = _profile_from(body)
    return SuggestResponse(
        country=country,
        purpose=body.purpose,
        suggestions=suggest_visas(country, body.purpose, profile, catalog),
        base_documents=base_documents(body.purpose),
        profile=profile,
    )
