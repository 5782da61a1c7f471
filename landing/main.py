import logging
import logging.config
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from landing.config import Settings
from landing.limiter import limiter
from landing.routers.catalog import router as catalog_router
from landing.routers.content import router as content_router
from landing.routers.pages import router as pages_router
from landing.services.catalog import CatalogLoadError, ServiceCatalog
from landing.services.content_store import ContentStore
from landing.services.csv_loader import load_service_records
from landing.services.page_lookup import SupabasePageLookup
from landing.services.resolver import ContentResolver

settings = Settings()

logging.config.dictConfig(
    {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
            },
        },
        "root": {"level": settings.LOG_LEVEL, "handlers": ["console"]},
    }
)

logger = logging.getLogger(__name__)


def build_content_store(settings: Settings) -> ContentStore:
    return ContentStore(
        placeholder=settings.PLACEHOLDER_REGION,
        business_name=settings.BUSINESS_NAME,
        site_url=settings.SITE_URL,
    )


def build_resolver(settings: Settings, content_store: ContentStore) -> Optional[ContentResolver]:
    """Load the catalog and wire the resolver; *None* if the catalog is unavailable."""
    try:
        records = load_service_records(settings.CATALOG_CSV_PATH)
    except CatalogLoadError as exc:
        logger.error("Catalog unavailable, page endpoints will answer 503: %s", exc)
        return None

    page_lookup = None
    if settings.page_lookup_configured:
        page_lookup = SupabasePageLookup(settings.SUPABASE_URL, settings.SUPABASE_KEY)
    else:
        logger.info("Database page lookup disabled; serving from the static catalog only")

    return ContentResolver(
        catalog=ServiceCatalog(records),
        content_store=content_store,
        page_lookup=page_lookup,
        lookup_timeout=settings.PAGE_LOOKUP_TIMEOUT_SECONDS,
        match_threshold=settings.MATCH_THRESHOLD,
        match_min_score=settings.MATCH_MIN_SCORE,
        max_suggestions=settings.MAX_SUGGESTIONS,
        region=settings.REGION_ABBREV,
        business_name=settings.BUSINESS_NAME,
        site_url=settings.SITE_URL,
    )


app = FastAPI(
    title="Landing Content API",
    description="Resolves city × service landing-page content from the pages database and the static SEO catalog.",
    version="1.0.0",
)

# Rate-limiting state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.state.content_store = build_content_store(settings)
app.state.resolver = build_resolver(settings, app.state.content_store)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception for %s", request.url)
    return JSONResponse(status_code=500, content={"detail": "An unexpected error occurred."})


app.include_router(pages_router)
app.include_router(content_router)
app.include_router(catalog_router)


@app.get("/", summary="Health check")
async def root(request: Request) -> dict:
    resolver = request.app.state.resolver
    return {
        "message": "Hello from Landing Content",
        "catalog_loaded": resolver is not None,
        "records": len(resolver.catalog) if resolver is not None else 0,
    }
