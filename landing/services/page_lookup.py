"""Database page lookup over the Supabase (PostgREST) REST API."""

import logging
import re
from typing import Awaitable, Callable, List, Optional

import httpx

from landing.models.page_data import DatabasePage
from landing.services.normalizer import city_display_name, slugify, strip_state_suffix

logger = logging.getLogger(__name__)

# Async callable ``(city_slug, service_slug) -> DatabasePage | None``
PageLookup = Callable[[str, str], Awaitable[Optional[DatabasePage]]]

_DEFAULT_TIMEOUT = 10
_PAGES_TABLE = "pages"


class SupabasePageLookup:
    """Find a published landing page row for a city x service request.

    First the conventional ``<city>-<service>`` slug is tried; failing that,
    every published page of the city is fetched and matched on its slug with
    the city prefix removed.

    HTTP failures and malformed rows propagate as :class:`httpx.HTTPError` /
    :class:`ValueError`; the caller decides how to degrade.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = _DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.endpoint = f"{base_url.rstrip('/')}/rest/v1/{_PAGES_TABLE}"
        self.timeout = timeout
        self._headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
            "Accept": "application/json",
        }
        self._transport = transport

    async def __call__(self, city_slug: str, service_slug: str) -> Optional[DatabasePage]:
        city_prefix = strip_state_suffix(slugify(city_slug))
        service = slugify(service_slug)
        expected_slug = f"{city_prefix}-{service}"

        async with httpx.AsyncClient(
            timeout=self.timeout, headers=self._headers, transport=self._transport
        ) as client:
            rows = await self._select(client, {"slug": f"eq.{expected_slug}", "limit": "1"})
            if rows:
                logger.debug("Page lookup: slug hit %s", expected_slug)
                return DatabasePage.model_validate(rows[0])

            city_name = city_display_name(city_slug)
            rows = await self._select(client, {"city": f"eq.{city_name}"})

        prefix_re = re.compile(rf"^{re.escape(city_prefix)}-")
        for row in rows:
            page_service = prefix_re.sub("", str(row.get("slug") or ""))
            if page_service == service:
                logger.debug("Page lookup: city hit %s for %s", city_name, service)
                return DatabasePage.model_validate(row)

        logger.debug("Page lookup: no page for %s/%s", city_slug, service_slug)
        return None

    async def _select(self, client: httpx.AsyncClient, filters: dict) -> List[dict]:
        params = {"select": "*", "published": "eq.true", **filters}
        resp = await client.get(self.endpoint, params=params)
        resp.raise_for_status()
        rows = resp.json()
        if not isinstance(rows, list):
            raise ValueError(f"Unexpected pages payload: {type(rows).__name__}")
        return [row for row in rows if isinstance(row, dict)]
