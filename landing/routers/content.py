"""Curated service content endpoints."""

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, Request

from landing.limiter import limiter
from landing.models.service_content import ServiceContentEntry, ServiceSEOData
from landing.routers.dependencies import get_content_store
from landing.services.normalizer import city_display_name

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/content", tags=["content"])


def _not_found(slug: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"No service content for '{slug}'.")


@router.get("/services", response_model=List[ServiceContentEntry], summary="List all service content")
@limiter.limit("30/minute")
async def list_services(request: Request) -> List[ServiceContentEntry]:
    return get_content_store(request).get_all()


@router.get(
    "/services/{slug}",
    response_model=ServiceContentEntry,
    summary="Get service content",
    description="Pass `?city=` (a city name or slug) to receive the copy templated for that city.",
)
@limiter.limit("30/minute")
async def get_service(
    request: Request,
    slug: str,
    city: Optional[str] = Query(default=None, description="City name or slug, e.g. 'draper-ut'."),
) -> ServiceContentEntry:
    store = get_content_store(request)
    if city:
        entry = store.get_location_specific(slug, city_display_name(city))
    else:
        entry = store.get_by_slug(slug)
    if entry is None:
        raise _not_found(slug)
    return entry


@router.get(
    "/services/{slug}/related",
    response_model=List[ServiceContentEntry],
    summary="Related service content",
)
@limiter.limit("30/minute")
async def get_related_services(request: Request, slug: str) -> List[ServiceContentEntry]:
    store = get_content_store(request)
    if store.get_by_slug(slug) is None:
        raise _not_found(slug)
    return store.get_related(slug)


@router.get("/services/{slug}/seo", response_model=ServiceSEOData, summary="SEO data for a service")
@limiter.limit("30/minute")
async def get_service_seo(
    request: Request,
    slug: str,
    city: Optional[str] = Query(default=None, description="City name or slug."),
) -> ServiceSEOData:
    store = get_content_store(request)
    seo = store.seo_data(slug, city_display_name(city) if city else None)
    if seo is None:
        raise _not_found(slug)
    return seo


@router.get(
    "/categories/{category}",
    response_model=List[ServiceContentEntry],
    summary="Service content in a category",
)
@limiter.limit("30/minute")
async def get_category(request: Request, category: str) -> List[ServiceContentEntry]:
    entries = get_content_store(request).get_by_category(category)
    if not entries:
        raise HTTPException(status_code=404, detail=f"Unknown category '{category}'.")
    return entries


@router.get("/search", response_model=List[ServiceContentEntry], summary="Search service content")
@limiter.limit("30/minute")
async def search_services(
    request: Request,
    q: str = Query(..., min_length=1, description="Case-insensitive search text."),
) -> List[ServiceContentEntry]:
    results = get_content_store(request).search(q)
    logger.info("Content search returned %d results", len(results), extra={"query": q})
    return results
