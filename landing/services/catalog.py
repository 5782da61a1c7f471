"""Hash-indexed, read-only catalog of city x service records."""

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from landing.models.catalog_stats import CatalogStats, IntegrityReport, NamedCount
from landing.models.service_record import ServiceRecord
from landing.services.normalizer import normalize, slugify
from landing.services.slug_mapper import SERVICE_VARIATIONS

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("category", "city", "keyword", "url_path", "seo_title")


class CatalogLoadError(RuntimeError):
    """The static catalog could not be loaded at all."""


def _key(city_slug: str, service_slug: str) -> Tuple[str, str]:
    return normalize(city_slug), normalize(service_slug)


class ServiceCatalog:
    """Immutable index over a flat list of :class:`ServiceRecord`.

    Every index is built once in ``__init__``; queries never scan the full
    record list.  Building twice from the same list yields identical indices.
    Records sharing an identity keep the first occurrence.
    """

    def __init__(self, records: Iterable[ServiceRecord]) -> None:
        by_key: Dict[Tuple[str, str], ServiceRecord] = {}
        by_city: Dict[str, List[ServiceRecord]] = {}
        by_category: Dict[str, List[ServiceRecord]] = {}
        cities_by_keyword: Dict[str, List[str]] = {}
        kept: List[ServiceRecord] = []
        duplicates: List[str] = []

        for record in records:
            key = _key(record.city_slug, record.service_slug)
            if key in by_key:
                duplicates.append(record.url_path)
                logger.warning(
                    "Catalog: duplicate record %s/%s ignored", record.city_slug, record.service_slug
                )
                continue
            by_key[key] = record
            kept.append(record)
            by_city.setdefault(key[0], []).append(record)
            by_category.setdefault(normalize(record.category), []).append(record)
            cities = cities_by_keyword.setdefault(normalize(record.keyword), [])
            if record.city not in cities:
                cities.append(record.city)

        self._records: Tuple[ServiceRecord, ...] = tuple(kept)
        self._by_key = by_key
        self._by_city = {city: tuple(items) for city, items in by_city.items()}
        self._by_category = {category: tuple(items) for category, items in by_category.items()}
        self._cities_by_keyword = {kw: tuple(cities) for kw, cities in cities_by_keyword.items()}
        self._duplicates = tuple(duplicates)

        self._unique_cities = tuple(dict.fromkeys(r.city for r in self._records))
        self._unique_categories = tuple(dict.fromkeys(r.category for r in self._records))
        first_by_service: Dict[str, ServiceRecord] = {}
        for record in self._records:
            first_by_service.setdefault(normalize(record.service_slug), record)
        self._distinct_services = tuple(first_by_service.values())

        logger.info(
            "Catalog: indexed %d records across %d cities",
            len(self._records),
            len(self._unique_cities),
        )

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ServiceRecord]:
        return iter(self._records)

    @property
    def records(self) -> Tuple[ServiceRecord, ...]:
        return self._records

    # ── Exact lookups ──────────────────────────────────────────────────────────

    def find_by_url(self, city_slug: str, service_slug: str) -> Optional[ServiceRecord]:
        return self._by_key.get(_key(city_slug, service_slug))

    def find_by_alias(self, city_slug: str, service_slug: str) -> Optional[ServiceRecord]:
        """Look *service_slug* up through the fixed table of known spellings.

        ``laminate-flooring`` finds the ``laminate-installation`` record, and
        the reverse.  Only curated variations are tried; nothing fuzzy.
        """
        slug = slugify(service_slug)
        for canonical, variations in SERVICE_VARIATIONS.items():
            if slug == canonical:
                candidates = variations
            elif slug in variations:
                candidates = (canonical,) + variations
            else:
                continue
            for candidate in candidates:
                if candidate == slug:
                    continue
                record = self.find_by_url(city_slug, candidate)
                if record is not None:
                    logger.debug("Catalog: alias %s -> %s", slug, candidate)
                    return record
        return None

    def has_city(self, city_slug: str) -> bool:
        return normalize(city_slug) in self._by_city

    # ── Grouped queries ────────────────────────────────────────────────────────

    def get_by_category(self, category: str) -> List[ServiceRecord]:
        return list(self._by_category.get(normalize(category), ()))

    def get_cities_for_service(self, keyword: str) -> Tuple[str, ...]:
        """Display names of every city offering *keyword*, in catalog order."""
        return self._cities_by_keyword.get(normalize(keyword), ())

    def services_for_city(self, city_slug: str) -> List[ServiceRecord]:
        return list(self._by_city.get(normalize(city_slug), ()))

    def valid_service_slugs_for_city(self, city_slug: str) -> List[str]:
        return [record.service_slug for record in self._by_city.get(normalize(city_slug), ())]

    def unique_cities(self) -> List[str]:
        return list(self._unique_cities)

    def unique_categories(self) -> List[str]:
        return list(self._unique_categories)

    def distinct_services(self) -> List[ServiceRecord]:
        """First record of every service slug, in catalog order."""
        return list(self._distinct_services)

    def search(self, query: str) -> List[ServiceRecord]:
        """Case-insensitive substring search over keyword, title, city and category."""
        needle = (query or "").strip().lower()
        if not needle:
            return []
        return [
            record
            for record in self._records
            if needle in record.keyword.lower()
            or needle in record.seo_title.lower()
            or needle in record.city.lower()
            or needle in record.category.lower()
        ]

    # ── Reporting ──────────────────────────────────────────────────────────────

    def stats(self) -> CatalogStats:
        per_city: Dict[str, int] = {}
        per_category: Dict[str, int] = {}
        for record in self._records:
            per_city[record.city] = per_city.get(record.city, 0) + 1
            per_category[record.category] = per_category.get(record.category, 0) + 1

        def ranked(counts: Dict[str, int]) -> List[NamedCount]:
            items = [NamedCount(name=name, count=count) for name, count in counts.items()]
            return sorted(items, key=lambda item: item.count, reverse=True)

        return CatalogStats(
            total_services=len(self._records),
            total_cities=len(self._unique_cities),
            total_categories=len(self._unique_categories),
            services_per_city=ranked(per_city),
            services_per_category=ranked(per_category),
        )

    def validate_integrity(self) -> IntegrityReport:
        issues: List[str] = []
        for index, record in enumerate(self._records, start=1):
            for field in _REQUIRED_FIELDS:
                if not str(getattr(record, field) or "").strip():
                    issues.append(f"Record {index}: Missing or empty {field}")
            if record.url_path and not record.url_path.startswith("/"):
                issues.append(f"Record {index}: URL path should start with '/': {record.url_path}")
            if record.json_ld and record.parsed_json_ld is None:
                issues.append(f"Record {index}: Invalid JSON-LD for {record.city} - {record.keyword}")

        for url_path in dict.fromkeys(self._duplicates):
            count = self._duplicates.count(url_path) + 1
            issues.append(f"Duplicate URL path found: {url_path} ({count} occurrences)")

        return IntegrityReport(is_valid=not issues, issues=issues, stats=self.stats())
