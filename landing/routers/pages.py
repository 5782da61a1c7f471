"""Landing-page endpoints: resolved content and SEO metadata for a city x service URL."""

import logging
from typing import Union

from fastapi import APIRouter, HTTPException, Request

from landing.limiter import limiter
from landing.models.resolved import (
    DidYouMeanResponse,
    NotFoundResult,
    PageMetadata,
    ResolvedPageContent,
    SuggestionLink,
)
from landing.models.service_record import ServiceRecord
from landing.routers.dependencies import get_resolver
from landing.services.normalizer import city_display_name

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pages", tags=["pages"])

_METADATA_KEYWORDS_SUFFIX = "Utah construction, Salt Lake County"


def _suggestion_link(record: ServiceRecord, score: float) -> SuggestionLink:
    return SuggestionLink(
        keyword=record.keyword,
        city=record.city,
        href=record.url_path,
        score=round(score, 3),
    )


def _did_you_mean(result: NotFoundResult) -> DidYouMeanResponse:
    city_name = city_display_name(result.city_slug)
    suggestions = [_suggestion_link(s.record, s.score) for s in result.suggestions]
    best = None
    if result.best_match is not None:
        best = next(
            (link for link, s in zip(suggestions, result.suggestions) if s.record == result.best_match),
            None,
        )
    requested = result.service_slug.replace("-", " ")
    return DidYouMeanResponse(
        city_slug=result.city_slug,
        service_slug=result.service_slug,
        city_name=city_name,
        message=f'We couldn\'t find "{requested}" in {city_name}. Did you mean one of these?',
        suggestions=suggestions,
        best_match=best,
    )


@router.get(
    "/{city_slug}/{service_slug}",
    response_model=Union[ResolvedPageContent, DidYouMeanResponse],
    summary="Resolve landing-page content",
    description=(
        "Resolves a city × service landing page from the pages database, "
        "falling back to the static SEO catalog.\n\n"
        "When nothing matches exactly but similar services exist, a "
        "\"did you mean\" payload with `found: false` is returned with status 200. "
        "With no alternatives the response is a 404."
    ),
)
@limiter.limit("60/minute")
async def get_page(request: Request, city_slug: str, service_slug: str):
    resolver = get_resolver(request)
    result = await resolver.resolve(city_slug, service_slug)

    if isinstance(result, ResolvedPageContent):
        return result

    if result.suggestions:
        logger.info(
            "Page not found, offering %d suggestions",
            len(result.suggestions),
            extra={"city_slug": city_slug, "service_slug": service_slug},
        )
        return _did_you_mean(result)

    raise HTTPException(status_code=404, detail="Service page not found.")


@router.get(
    "/{city_slug}/{service_slug}/metadata",
    response_model=PageMetadata,
    summary="SEO metadata for a landing page",
)
@limiter.limit("60/minute")
async def get_page_metadata(request: Request, city_slug: str, service_slug: str) -> PageMetadata:
    resolver = get_resolver(request)
    result = await resolver.resolve(city_slug, service_slug)

    if not isinstance(result, ResolvedPageContent):
        return PageMetadata(
            found=False,
            title="Service Not Found",
            description="The requested service page could not be found.",
        )

    canonical = f"{resolver.site_url}{result.canonical_path}"
    return PageMetadata(
        found=True,
        title=result.seo_title,
        description=result.meta_description,
        keywords=(
            f"{result.record.keyword}, {result.city_name}, {result.record.category}, "
            f"{_METADATA_KEYWORDS_SUFFIX}"
        ),
        canonical=canonical,
        open_graph={
            "title": result.seo_title,
            "description": result.meta_description,
            "url": canonical,
            "site_name": resolver.business_name,
            "type": "website",
            "locale": "en_US",
        },
    )
