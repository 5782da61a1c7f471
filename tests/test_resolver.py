"""Tests for landing.services.resolver.

The database page lookup is replaced with ``AsyncMock`` collaborators; the
catalog is the shared fixture catalog from conftest.
"""

import asyncio
from unittest.mock import AsyncMock

import httpx
import pytest

from landing.models.page_data import DatabasePage, PageContent
from landing.models.resolved import NotFoundResult, ResolvedPageContent
from landing.services.catalog import ServiceCatalog
from landing.services.page_lookup import SupabasePageLookup
from landing.services.resolver import ContentResolver


def _page(**overrides) -> DatabasePage:
    data = {
        "id": 1,
        "slug": "sandy-laminate-installation",
        "city": "Sandy",
        "service": "flooring",
        "keyword": "Laminate Installation",
        "meta_title": "DB Title",
        "meta_description": "DB description",
        "h1": "DB Heading",
        "content": {"hero_text": "Custom Hero"},
        "published": True,
    }
    data.update(overrides)
    return DatabasePage.model_validate(data)


def _resolve(resolver, city, service):
    return asyncio.run(resolver.resolve(city, service))


class TestDatabaseStage:
    def test_database_overrides_static_content(self, catalog, content_store):
        lookup = AsyncMock(return_value=_page())
        resolver = ContentResolver(catalog, content_store, page_lookup=lookup)

        result = _resolve(resolver, "sandy-ut", "laminate-installation")

        assert isinstance(result, ResolvedPageContent)
        assert result.source == "database"
        assert result.hero_text == "Custom Hero"
        assert result.seo_title == "DB Title"
        assert result.h1 == "DB Heading"
        lookup.assert_awaited_once_with("sandy-ut", "laminate-installation")

    def test_missing_db_fields_fall_back(self, catalog, content_store):
        page = _page(meta_title=None, h1="", meta_description=None, content=None)
        resolver = ContentResolver(catalog, content_store, page_lookup=AsyncMock(return_value=page))

        result = _resolve(resolver, "sandy-ut", "laminate-installation")
        record = catalog.find_by_url("sandy-ut", "laminate-installation")

        assert result.seo_title == record.seo_title
        assert result.h1 == record.h1
        assert result.meta_description == record.meta_description
        assert result.hero_text == "Professional Laminate Installation in Sandy"

    def test_page_unknown_to_catalog(self, catalog, content_store):
        page = _page(
            slug="magna-junk-removal",
            city="Magna",
            service="junk_removal",
            keyword="Junk Removal",
            meta_title=None,
            h1=None,
            meta_description=None,
            content={"internalLinks": '<a href="/magna-ut/">Magna</a>', "jsonLd": '{"@type": "Service"}'},
        )
        resolver = ContentResolver(catalog, content_store, page_lookup=AsyncMock(return_value=page))

        result = _resolve(resolver, "magna-ut", "junk-removal")

        assert result.source == "database"
        assert result.record.category == "Junk Removal"
        assert result.canonical_path == "/magna-ut/junk-removal/"
        assert result.seo_title == "Junk Removal in Magna, UT"
        assert result.h1 == "Junk Removal in Magna"
        assert result.content_slug == "junk-removal"
        assert result.meta_description.startswith("Fast, affordable junk removal in Magna.")
        assert [link.href for link in result.internal_links] == ["/magna-ut/"]
        assert result.json_ld == {"@type": "Service"}
        assert result.nearby_cities == ["Draper"]

    def test_db_rich_content_fields(self, catalog, content_store):
        content = {
            "service_description": "From the database.",
            "features": ["Fast", "Clean"],
            "faq": [{"question": "Q?", "answer": "A."}],
            "testimonials": [{"name": "Pat", "text": "Great work", "rating": 5}],
            "sections": [{"title": "Why laminate", "content": "Durable."}],
            "city_description": "Sandy sits below the Wasatch.",
            "cta_text": "Call now.",
        }
        resolver = ContentResolver(
            catalog, content_store, page_lookup=AsyncMock(return_value=_page(content=content))
        )

        result = _resolve(resolver, "sandy-ut", "laminate-installation")

        assert result.description == "From the database."
        assert result.features == ["Fast", "Clean"]
        assert [faq.question for faq in result.faqs] == ["Q?"]
        assert result.testimonials[0].name == "Pat"
        assert result.sections[0].title == "Why laminate"
        assert result.city_description == "Sandy sits below the Wasatch."
        assert result.cta_text == "Call now."

    def test_unpublished_page_is_a_miss(self, catalog, content_store):
        resolver = ContentResolver(
            catalog, content_store, page_lookup=AsyncMock(return_value=_page(published=False))
        )
        assert _resolve(resolver, "sandy-ut", "laminate-installation").source == "catalog"

    @pytest.mark.parametrize("city", ["Magna", None])
    def test_database_only_page_with_partial_content(self, catalog, content_store, city):
        row = {
            "id": 9,
            "slug": "magna-junk-removal",
            "city": city,
            "service": "junk_removal",
            "keyword": "Junk Removal",
            "meta_title": "Magna Junk Hauling",
            "content": {"hero_text": "Custom Hero", "faq": [{"question": "Q only"}]},
            "published": True,
        }
        lookup = SupabasePageLookup(
            "https://project.supabase.co",
            "secret-key",
            transport=httpx.MockTransport(lambda request: httpx.Response(200, json=[row])),
        )
        resolver = ContentResolver(catalog, content_store, page_lookup=lookup)

        result = _resolve(resolver, "magna-ut", "junk-removal")

        assert isinstance(result, ResolvedPageContent)
        assert result.source == "database"
        assert result.city_name == "Magna"
        assert result.hero_text == "Custom Hero"
        assert result.seo_title == "Magna Junk Hauling"
        assert result.faqs
        assert all(faq.question != "Q only" for faq in result.faqs)

    @pytest.mark.parametrize(
        "error",
        [
            httpx.ConnectError("unreachable"),
            ValueError("bad payload"),
            ConnectionRefusedError("db down"),
            KeyError("slug"),
        ],
    )
    def test_lookup_failure_falls_back_to_catalog(self, catalog, content_store, error):
        resolver = ContentResolver(catalog, content_store, page_lookup=AsyncMock(side_effect=error))
        result = _resolve(resolver, "sandy-ut", "laminate-installation")
        assert isinstance(result, ResolvedPageContent)
        assert result.source == "catalog"

    def test_lookup_timeout_falls_back_to_catalog(self, catalog, content_store):
        async def slow_lookup(city_slug, service_slug):
            await asyncio.sleep(5)

        resolver = ContentResolver(
            catalog, content_store, page_lookup=slow_lookup, lookup_timeout=0.01
        )
        result = _resolve(resolver, "sandy-ut", "laminate-installation")
        assert result.source == "catalog"


class TestCatalogStage:
    def test_catalog_hit_uses_mapped_content(self, resolver):
        result = _resolve(resolver, "sandy-ut", "laminate-installation")

        assert isinstance(result, ResolvedPageContent)
        assert result.source == "catalog"
        assert result.content_slug == "flooring-installation"
        assert result.price_range == "$3 - $15 per square foot installed"
        assert result.timeline == "1-5 days per room"

    def test_catalog_fields_and_defaults(self, resolver, catalog):
        result = _resolve(resolver, "sandy-ut", "laminate-installation")
        record = catalog.find_by_url("sandy-ut", "laminate-installation")

        assert result.seo_title == record.seo_title
        assert result.h1 == record.h1
        assert result.city_name == "Sandy"
        assert result.hero_text == "Professional Laminate Installation in Sandy"
        assert result.cta_text.startswith(
            "Contact us today for your free laminate installation estimate in Sandy."
        )
        assert "Sandy, UT" in result.description
        assert "Utah" not in result.description
        assert len(result.features) == 6
        assert result.faqs
        assert result.sections == []
        assert result.testimonials == []

    def test_exact_content_slug_preferred(self, resolver):
        result = _resolve(resolver, "sandy-ut", "kitchen-remodeling")
        assert result.content_slug == "kitchen-remodeling"
        assert result.price_range == "$25,000 - $75,000"
        assert [entry.slug for entry in result.related_content][:2] == [
            "bathroom-remodeling",
            "flooring-installation",
        ]

    def test_variant_maps_to_flooring_content(self, resolver):
        result = _resolve(resolver, "sandy-ut", "vinyl-plank-installation")
        assert result.content_slug == "flooring-installation"

    def test_record_without_content_entry(self, make_record, content_store):
        catalog = ServiceCatalog([make_record("sandy-ut", "pool-cleaning", "Pool Cleaning", "Outdoor")])
        result = _resolve(ContentResolver(catalog, content_store), "sandy-ut", "pool-cleaning")
        assert result.content_slug is None
        assert result.price_range is None
        assert result.description == ""
        assert result.features == []
        assert result.related_content == []

    def test_raw_slugs_are_normalized(self, resolver):
        result = _resolve(resolver, "Sandy-UT", "Laminate_Installation")
        assert isinstance(result, ResolvedPageContent)
        assert result.canonical_path == "/sandy-ut/laminate-installation/"

    def test_alias_resolves_to_catalog_record(self, resolver):
        result = _resolve(resolver, "draper-ut", "kitchen-remodel")
        assert isinstance(result, ResolvedPageContent)
        assert result.service_slug == "kitchen-remodeling"

    def test_related_content_attached(self, resolver):
        result = _resolve(resolver, "sandy-ut", "laminate-installation")
        assert [r.service_slug for r in result.related_services] == [
            "hardwood-floor-installation",
            "vinyl-plank-installation",
        ]
        assert result.nearby_cities == ["Draper", "Murray"]

    def test_json_ld_gets_page_url(self, make_record, content_store):
        record = make_record(
            "sandy-ut",
            "laminate-installation",
            "Laminate Installation",
            "Flooring",
            parsed_json_ld={"@type": "Service"},
        )
        resolver = ContentResolver(ServiceCatalog([record]), content_store, site_url="https://example.com")
        result = _resolve(resolver, "sandy-ut", "laminate-installation")
        assert result.json_ld == {
            "@type": "Service",
            "url": "https://example.com/sandy-ut/laminate-installation/",
        }
        assert record.parsed_json_ld == {"@type": "Service"}


class TestNotFound:
    def test_typo_returns_suggestions_without_redirect(self, resolver):
        result = _resolve(resolver, "sandy-ut", "kichen-remodel")

        assert isinstance(result, NotFoundResult)
        top = [s.record.service_slug for s in result.suggestions[:3]]
        assert "kitchen-remodeling" in top
        assert result.best_match.service_slug == "kitchen-remodeling"

    def test_nothing_similar(self, resolver):
        result = _resolve(resolver, "sandy-ut", "zzzzqqqq")
        assert isinstance(result, NotFoundResult)
        assert result.suggestions == []
        assert result.best_match is None

    def test_lookup_miss_then_not_found(self, catalog, content_store):
        lookup = AsyncMock(return_value=None)
        resolver = ContentResolver(catalog, content_store, page_lookup=lookup)
        result = _resolve(resolver, "sandy-ut", "kichen-remodel")
        assert isinstance(result, NotFoundResult)
        lookup.assert_awaited_once()

    def test_empty_catalog(self, content_store):
        result = _resolve(ContentResolver(ServiceCatalog([]), content_store), "sandy-ut", "kitchen")
        assert isinstance(result, NotFoundResult)
        assert result.suggestions == []
