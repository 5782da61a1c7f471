"""Tests for landing.services.page_lookup against a mocked Supabase REST API."""

import asyncio

import httpx
import pytest

from landing.services.page_lookup import SupabasePageLookup

_BASE = "https://project.supabase.co"

_SANDY_LAMINATE = {
    "id": 17,
    "slug": "sandy-laminate-installation",
    "city": "Sandy",
    "service": "flooring",
    "keyword": "Laminate Installation",
    "meta_title": "Laminate Installation in Sandy",
    "meta_description": "Laminate floors installed in Sandy.",
    "h1": "Laminate Installation in Sandy, Utah",
    "content": {"hero_text": "Custom Hero", "internalLinks": "<a href='/sandy-ut/'>Sandy</a>"},
    "published": True,
    "views": 3,
}


def _lookup(handler) -> SupabasePageLookup:
    return SupabasePageLookup(_BASE, "secret-key", transport=httpx.MockTransport(handler))


class TestSupabasePageLookup:
    def test_slug_hit(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if request.url.params.get("slug") == "eq.sandy-laminate-installation":
                return httpx.Response(200, json=[_SANDY_LAMINATE])
            return httpx.Response(200, json=[])

        page = asyncio.run(_lookup(handler)("sandy-ut", "laminate-installation"))

        assert page.slug == "sandy-laminate-installation"
        assert page.content.hero_text == "Custom Hero"
        assert page.content.internal_links == "<a href='/sandy-ut/'>Sandy</a>"
        assert len(seen) == 1
        request = seen[0]
        assert request.url.path == "/rest/v1/pages"
        assert request.url.params["published"] == "eq.true"
        assert request.headers["apikey"] == "secret-key"
        assert request.headers["authorization"] == "Bearer secret-key"

    def test_city_fallback_matches_service_suffix(self):
        other = dict(_SANDY_LAMINATE, slug="sandy-tile-installation", id=18)

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.params.get("city") == "eq.Sandy":
                return httpx.Response(200, json=[other, _SANDY_LAMINATE])
            return httpx.Response(200, json=[])

        page = asyncio.run(_lookup(handler)("sandy-ut", "laminate-installation"))
        assert page.id == 17

    def test_city_query_uses_display_name(self):
        cities = []

        def handler(request: httpx.Request) -> httpx.Response:
            if "city" in request.url.params:
                cities.append(request.url.params["city"])
            return httpx.Response(200, json=[])

        page = asyncio.run(_lookup(handler)("salt-lake-city-ut", "kitchen-remodeling"))
        assert page is None
        assert cities == ["eq.Salt Lake City"]

    def test_miss(self):
        page = asyncio.run(_lookup(lambda request: httpx.Response(200, json=[]))("sandy-ut", "x"))
        assert page is None

    def test_http_error_propagates(self):
        lookup = _lookup(lambda request: httpx.Response(500, json={"message": "boom"}))
        with pytest.raises(httpx.HTTPStatusError):
            asyncio.run(lookup("sandy-ut", "laminate-installation"))

    def test_unexpected_payload(self):
        lookup = _lookup(lambda request: httpx.Response(200, json={"message": "not a list"}))
        with pytest.raises(ValueError):
            asyncio.run(lookup("sandy-ut", "laminate-installation"))

    def test_malformed_row(self):
        lookup = _lookup(lambda request: httpx.Response(200, json=[{"slug": None, "city": "Sandy"}]))
        with pytest.raises(ValueError):
            asyncio.run(lookup("sandy-ut", "x"))


class TestLenientRows:
    def _page(self, row):
        lookup = _lookup(lambda request: httpx.Response(200, json=[row]))
        return asyncio.run(lookup("sandy-ut", "laminate-installation"))

    def test_invalid_faq_item_is_dropped(self):
        content = dict(
            _SANDY_LAMINATE["content"],
            faq=[{"question": "Q only"}, {"question": "Q?", "answer": "A."}],
        )
        page = self._page(dict(_SANDY_LAMINATE, content=content))
        assert page.content.hero_text == "Custom Hero"
        assert [item.question for item in page.content.faq] == ["Q?"]

    def test_null_city_is_kept_as_none(self):
        page = self._page(dict(_SANDY_LAMINATE, city=None, keyword=None))
        assert page.city is None
        assert page.keyword == ""
        assert page.meta_title == "Laminate Installation in Sandy"

    def test_bad_scalar_and_list_fields_become_none(self):
        content = dict(_SANDY_LAMINATE["content"], cta_text=["not", "text"], features="Fast")
        page = self._page(dict(_SANDY_LAMINATE, content=content, h1={"text": "H"}))
        assert page.h1 is None
        assert page.content.cta_text is None
        assert page.content.features is None
        assert page.content.hero_text == "Custom Hero"

    def test_non_object_content_is_ignored(self):
        page = self._page(dict(_SANDY_LAMINATE, content="<p>raw</p>"))
        assert page.content is None
        assert page.slug == "sandy-laminate-installation"
