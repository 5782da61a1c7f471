"""In-memory store of curated service content with location templating."""

import logging
from typing import Iterable, List, Optional

from landing.models.service_content import ServiceContentEntry, ServiceSEOData
from landing.services.content_data import SERVICE_CONTENT
from landing.services.slug_mapper import category_slugs

logger = logging.getLogger(__name__)

DEFAULT_PLACEHOLDER = "Utah"
DEFAULT_REGION = "UT"
DEFAULT_BUSINESS_NAME = "Wild West Construction"
DEFAULT_CITY = "Salt Lake City"


def substitute(text: str, token: str, replacement: str) -> str:
    """Replace every occurrence of *token* in *text*; nothing else changes."""
    if not token or not text:
        return text
    return text.replace(token, replacement)


# Never templated
_IDENTIFIER_FIELDS = ("slug", "related_slugs")


def _substitute_all(value, token: str, replacement: str):
    """Apply :func:`substitute` to every string inside dumped model data."""
    if isinstance(value, str):
        return substitute(value, token, replacement)
    if isinstance(value, list):
        return [_substitute_all(item, token, replacement) for item in value]
    if isinstance(value, dict):
        return {key: _substitute_all(item, token, replacement) for key, item in value.items()}
    return value


class ContentStore:
    """Read-only catalog of :class:`ServiceContentEntry` keyed by slug.

    Entries are validated once at construction.  Every read that applies
    location templating returns a copy; the stored entries are never touched.
    """

    def __init__(
        self,
        entries: Iterable[dict] = SERVICE_CONTENT,
        placeholder: str = DEFAULT_PLACEHOLDER,
        business_name: str = DEFAULT_BUSINESS_NAME,
        site_url: str = "",
    ) -> None:
        self.placeholder = placeholder
        self.business_name = business_name
        self.site_url = site_url.rstrip("/")

        self._entries: List[ServiceContentEntry] = []
        self._by_slug = {}
        for raw in entries:
            entry = raw if isinstance(raw, ServiceContentEntry) else ServiceContentEntry.model_validate(raw)
            if entry.slug in self._by_slug:
                logger.warning("Content store: duplicate slug %s ignored", entry.slug)
                continue
            self._entries.append(entry)
            self._by_slug[entry.slug] = entry

        dangling = sorted(
            {slug for entry in self._entries for slug in entry.related_slugs if slug not in self._by_slug}
        )
        if dangling:
            logger.debug("Content store: %d related slugs have no entry", len(dangling))

    def __len__(self) -> int:
        return len(self._entries)

    def get_by_slug(self, slug: str) -> Optional[ServiceContentEntry]:
        return self._by_slug.get(slug)

    def get_all(self) -> List[ServiceContentEntry]:
        return list(self._entries)

    def get_by_category(self, category: str) -> List[ServiceContentEntry]:
        """Entries listed under *category* in the category table, in table order."""
        return [self._by_slug[slug] for slug in category_slugs(category) if slug in self._by_slug]

    def get_location_specific(
        self, slug: str, city_name: str, region: str = DEFAULT_REGION
    ) -> Optional[ServiceContentEntry]:
        """Return a copy of *slug*'s entry templated for *city_name*.

        ``long_description`` gets ``"<City>, <REGION>"``; every other string
        except the slug identifiers gets the bare city name.  Keywords are
        extended with phrases built from the city.
        """
        entry = self.get_by_slug(slug)
        if entry is None:
            return None

        token = self.placeholder
        data = entry.model_dump()
        localized = {
            field: value if field in _IDENTIFIER_FIELDS else _substitute_all(value, token, city_name)
            for field, value in data.items()
        }
        localized["long_description"] = substitute(
            entry.long_description, token, f"{city_name}, {region}"
        )

        keywords = localized["keywords"]
        for phrase in (
            f"{city_name} {localized['title'].lower()}",
            f"{entry.slug.replace('-', ' ')} {city_name}",
            f"{city_name} contractor",
            f"{city_name} {region}",
        ):
            if phrase not in keywords:
                keywords.append(phrase)

        return ServiceContentEntry.model_validate(localized)

    def get_related(self, slug: str) -> List[ServiceContentEntry]:
        """Resolve *slug*'s related slugs, silently dropping unknown ones."""
        entry = self.get_by_slug(slug)
        if entry is None:
            return []
        related: List[ServiceContentEntry] = []
        seen = {slug}
        for related_slug in entry.related_slugs:
            if related_slug in seen:
                continue
            seen.add(related_slug)
            match = self.get_by_slug(related_slug)
            if match is not None:
                related.append(match)
        return related

    def search(self, query: str) -> List[ServiceContentEntry]:
        """Case-insensitive substring search over title, keywords and short description."""
        needle = (query or "").strip().lower()
        if not needle:
            return []
        return [
            entry
            for entry in self._entries
            if needle in entry.title.lower()
            or needle in entry.short_description.lower()
            or any(needle in keyword.lower() for keyword in entry.keywords)
        ]

    def seo_data(self, slug: str, city_name: Optional[str] = None) -> Optional[ServiceSEOData]:
        entry = self.get_location_specific(slug, city_name) if city_name else self.get_by_slug(slug)
        if entry is None:
            return None

        if city_name:
            title = f"{entry.title} in {city_name} - {self.business_name}"
            area_served = f"{city_name}, {self.placeholder}"
        else:
            title = f"{entry.title} - {self.business_name}"
            area_served = self.placeholder

        return ServiceSEOData(
            title=title,
            description=entry.meta_description,
            keywords=", ".join(entry.keywords),
            canonical_url=f"{self.site_url}/services/{entry.slug}",
            structured_data={
                "@context": "https://schema.org",
                "@type": "Service",
                "name": entry.title,
                "description": entry.short_description,
                "provider": {
                    "@type": "LocalBusiness",
                    "name": self.business_name,
                    "address": {
                        "@type": "PostalAddress",
                        "addressLocality": city_name or DEFAULT_CITY,
                        "addressRegion": DEFAULT_REGION,
                        "addressCountry": "US",
                    },
                },
                "areaServed": area_served,
                "priceRange": entry.price_range,
            },
        )
