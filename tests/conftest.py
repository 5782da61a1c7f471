"""Shared fixture catalog for the test suite."""

import pytest

from landing.models.service_record import ServiceRecord
from landing.services.catalog import ServiceCatalog
from landing.services.content_store import ContentStore
from landing.services.normalizer import city_display_name
from landing.services.resolver import ContentResolver

# (city_slug, service_slug, keyword, category) in catalog order
FIXTURE_ROWS = [
    ("sandy-ut", "laminate-installation", "Laminate Installation", "Flooring"),
    ("sandy-ut", "hardwood-floor-installation", "Hardwood Floor Installation", "Flooring"),
    ("sandy-ut", "vinyl-plank-installation", "Vinyl Plank Installation", "Flooring"),
    ("sandy-ut", "kitchen-remodeling", "Kitchen Remodeling", "Remodeling"),
    ("sandy-ut", "interior-demolition", "Interior Demolition", "Demolition"),
    ("draper-ut", "laminate-installation", "Laminate Installation", "Flooring"),
    ("draper-ut", "kitchen-remodeling", "Kitchen Remodeling", "Remodeling"),
    ("draper-ut", "junk-removal", "Junk Removal", "Junk Removal"),
    ("murray-ut", "laminate-installation", "Laminate Installation", "Flooring"),
    ("murray-ut", "hardwood-floor-installation", "Hardwood Floor Installation", "Flooring"),
    ("salt-lake-city-ut", "kitchen-remodeling", "Kitchen Remodeling", "Remodeling"),
    ("salt-lake-city-ut", "bathroom-remodeling", "Bathroom Remodeling", "Remodeling"),
]


def _make_record(city_slug, service_slug, keyword, category, **overrides) -> ServiceRecord:
    city = city_display_name(city_slug)
    data = {
        "category": category,
        "city": city,
        "city_slug": city_slug,
        "keyword": keyword,
        "service_slug": service_slug,
        "url_path": f"/{city_slug}/{service_slug}/",
        "seo_title": f"{keyword} in {city}, UT | Wild West Construction",
        "h1": f"{keyword} in {city}",
        "meta_description": f"Expert {keyword.lower()} in {city}. Free estimates.",
        "suggested_page_type": "Service Page",
    }
    data.update(overrides)
    return ServiceRecord(**data)


@pytest.fixture
def make_record():
    return _make_record


@pytest.fixture
def records():
    return [_make_record(*row) for row in FIXTURE_ROWS]


@pytest.fixture
def catalog(records):
    return ServiceCatalog(records)


@pytest.fixture
def content_store():
    return ContentStore()


@pytest.fixture
def resolver(catalog, content_store):
    return ContentResolver(catalog, content_store)
