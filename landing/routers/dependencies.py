"""Accessors for the shared objects wired onto ``app.state`` at startup."""

from fastapi import HTTPException, Request

from landing.services.catalog import ServiceCatalog
from landing.services.content_store import ContentStore
from landing.services.resolver import ContentResolver


def get_resolver(request: Request) -> ContentResolver:
    resolver = getattr(request.app.state, "resolver", None)
    if resolver is None:
        raise HTTPException(status_code=503, detail="Service catalog is not available.")
    return resolver


def get_catalog(request: Request) -> ServiceCatalog:
    return get_resolver(request).catalog


def get_content_store(request: Request) -> ContentStore:
    return request.app.state.content_store
