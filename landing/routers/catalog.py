"""Read-only views over the static city x service catalog."""

from typing import List

from fastapi import APIRouter, Query, Request

from landing.limiter import limiter
from landing.models.catalog_stats import CatalogStats, IntegrityReport
from landing.models.resolved import CheckServiceResponse, CityEntry
from landing.routers.dependencies import get_catalog

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("/categories", summary="Distinct service categories")
@limiter.limit("30/minute")
async def list_categories(request: Request) -> dict:
    return {"categories": get_catalog(request).unique_categories()}


@router.get("/cities", response_model=List[CityEntry], summary="Cities in the service area")
@limiter.limit("30/minute")
async def list_cities(request: Request) -> List[CityEntry]:
    catalog = get_catalog(request)
    cities: dict = {}
    for record in catalog:
        cities.setdefault(record.city, record.city_slug)
    return [
        CityEntry(name=name, slug=slug, services=len(catalog.services_for_city(slug)))
        for name, slug in cities.items()
    ]


@router.get("/stats", response_model=CatalogStats, summary="Catalog statistics")
@limiter.limit("30/minute")
async def catalog_stats(request: Request) -> CatalogStats:
    return get_catalog(request).stats()


@router.get("/validate", response_model=IntegrityReport, summary="Catalog integrity report")
@limiter.limit("10/minute")
async def validate_catalog(request: Request) -> IntegrityReport:
    return get_catalog(request).validate_integrity()


@router.get(
    "/check-service",
    response_model=CheckServiceResponse,
    response_model_exclude_none=True,
    summary="Check whether a city offers a service",
)
@limiter.limit("60/minute")
async def check_service(
    request: Request,
    city: str = Query(default="", description="City slug, e.g. 'sandy-ut'."),
    service: str = Query(default="", description="Service slug."),
) -> CheckServiceResponse:
    if not city or not service:
        return CheckServiceResponse(exists=False)

    catalog = get_catalog(request)
    record = catalog.find_by_url(city, service) or catalog.find_by_alias(city, service)
    if record is not None:
        return CheckServiceResponse(exists=True, slug=record.url_path, keyword=record.keyword)
    if catalog.has_city(city):
        return CheckServiceResponse(exists=False, city_exists=True)
    return CheckServiceResponse(exists=False)
