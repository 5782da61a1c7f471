"""Content resolution: database page → static catalog → fuzzy suggestions."""

import asyncio
import logging
from typing import List, Optional, Tuple, Union

import httpx

from landing.models.page_data import DatabasePage, PageContent
from landing.models.resolved import NotFoundResult, ResolvedPageContent
from landing.models.service_content import FAQ, ServiceContentEntry
from landing.models.service_record import ServiceRecord
from landing.services.catalog import ServiceCatalog
from landing.services.content_store import ContentStore
from landing.services.csv_loader import parse_json_ld
from landing.services.links import parse_internal_links
from landing.services.matcher import find_closest_matches
from landing.services.normalizer import city_display_name, slugify
from landing.services.page_lookup import PageLookup
from landing.services.related import select_related
from landing.services.slug_mapper import find_best_match

logger = logging.getLogger(__name__)

Resolution = Union[ResolvedPageContent, NotFoundResult]

DEFAULT_LOOKUP_TIMEOUT = 3.0

# ``pages.service`` enum -> catalog category
SERVICE_CATEGORIES = {
    "flooring": "Flooring",
    "demolition": "Demolition",
    "junk_removal": "Junk Removal",
}

MAX_FEATURES = 6


def _first(*values):
    """Return the first truthy value, else the last one given."""
    for value in values:
        if value:
            return value
    return values[-1]


class ContentResolver:
    """Resolve a ``(city_slug, service_slug)`` request into page content.

    The catalog and content store are shared read-only; the page lookup is
    optional and any failure of it counts as a miss.
    """

    def __init__(
        self,
        catalog: ServiceCatalog,
        content_store: ContentStore,
        page_lookup: Optional[PageLookup] = None,
        lookup_timeout: float = DEFAULT_LOOKUP_TIMEOUT,
        match_threshold: float = 0.6,
        match_min_score: float = 0.4,
        max_suggestions: int = 5,
        region: str = "UT",
        business_name: str = "Wild West Construction",
        site_url: str = "",
    ) -> None:
        self.catalog = catalog
        self.content_store = content_store
        self.page_lookup = page_lookup
        self.lookup_timeout = lookup_timeout
        self.match_threshold = match_threshold
        self.match_min_score = match_min_score
        self.max_suggestions = max_suggestions
        self.region = region
        self.business_name = business_name
        self.site_url = site_url.rstrip("/")

    async def resolve(self, city_slug_raw: str, service_slug_raw: str) -> Resolution:
        city_slug = slugify(city_slug_raw)
        service_slug = slugify(service_slug_raw)

        # ── 1. Database page ──────────────────────────────────────────────────
        page = await self._lookup_page(city_slug, service_slug)
        if page is not None:
            logger.info("Resolver: database hit for %s/%s", city_slug, service_slug)
            record = self.catalog.find_by_url(city_slug, service_slug) or self._record_from_page(
                page, city_slug, service_slug
            )
            return self._compose(record, page, city_slug)

        # ── 2. Static catalog ─────────────────────────────────────────────────
        record = self.catalog.find_by_url(city_slug, service_slug)
        if record is None:
            record = self.catalog.find_by_alias(city_slug, service_slug)
        if record is not None:
            logger.info("Resolver: catalog hit for %s/%s", city_slug, service_slug)
            return self._compose(record, None, city_slug)

        # ── 3. Fuzzy suggestions (never a redirect) ───────────────────────────
        matches = find_closest_matches(
            city_slug,
            service_slug,
            self.catalog,
            limit=self.max_suggestions,
            threshold=self.match_threshold,
            min_score=self.match_min_score,
        )
        logger.info(
            "Resolver: not found %s/%s (%d suggestions)",
            city_slug,
            service_slug,
            len(matches.suggestions),
        )
        return NotFoundResult(
            city_slug=city_slug,
            service_slug=service_slug,
            suggestions=matches.suggestions,
            best_match=matches.best_match,
        )

    async def _lookup_page(self, city_slug: str, service_slug: str) -> Optional[DatabasePage]:
        if self.page_lookup is None:
            return None
        try:
            page = await asyncio.wait_for(
                self.page_lookup(city_slug, service_slug), timeout=self.lookup_timeout
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Resolver: page lookup timed out after %.1fs for %s/%s",
                self.lookup_timeout,
                city_slug,
                service_slug,
            )
            return None
        except httpx.HTTPError as exc:
            logger.warning("Resolver: page lookup failed for %s/%s – %s", city_slug, service_slug, exc)
            return None
        except ValueError as exc:
            logger.warning("Resolver: malformed page for %s/%s – %s", city_slug, service_slug, exc)
            return None
        except Exception:
            logger.warning(
                "Resolver: page lookup raised for %s/%s, using static content",
                city_slug,
                service_slug,
                exc_info=True,
            )
            return None

        if page is not None and not page.published:
            logger.debug("Resolver: ignoring unpublished page %s", page.slug)
            return None
        return page

    def _record_from_page(
        self, page: DatabasePage, city_slug: str, service_slug: str
    ) -> ServiceRecord:
        """Synthesize a catalog-shaped record for a page the catalog doesn't know."""
        content = page.content or PageContent()
        city = page.city or city_display_name(city_slug)
        keyword = page.keyword or service_slug.replace("-", " ").title()
        json_ld = content.json_ld
        if isinstance(json_ld, dict):
            parsed = json_ld
        else:
            parsed = parse_json_ld(json_ld or "")
        return ServiceRecord(
            category=SERVICE_CATEGORIES.get(page.service, page.service),
            city=city,
            city_slug=city_slug,
            keyword=keyword,
            service_slug=service_slug,
            url_path=f"/{city_slug}/{service_slug}/",
            seo_title=page.meta_title or "",
            h1=page.h1 or "",
            meta_description=page.meta_description or "",
            suggested_page_type="landing",
            internal_links_html=content.internal_links or "",
            json_ld=json_ld if isinstance(json_ld, str) else "",
            parsed_json_ld=parsed,
        )

    def _content_entry(
        self, record: ServiceRecord, city_name: str
    ) -> Tuple[Optional[str], Optional[ServiceContentEntry]]:
        """Curated content for *record*: its own slug first, then the remapped one."""
        candidates = (record.service_slug, find_best_match(record.service_slug))
        for slug in dict.fromkeys(c for c in candidates if c):
            entry = self.content_store.get_location_specific(slug, city_name, self.region)
            if entry is not None:
                logger.debug("Resolver: content %s for %s", slug, record.service_slug)
                return slug, entry
        return None, None

    def _json_ld(self, page: Optional[DatabasePage], record: ServiceRecord) -> Optional[dict]:
        raw = page.content.json_ld if page and page.content else None
        data = raw if isinstance(raw, dict) else parse_json_ld(raw or "")
        if data is None:
            data = record.parsed_json_ld
        if data is None:
            return None
        if self.site_url:
            data = {**data, "url": f"{self.site_url}{record.url_path}"}
        return data

    def _compose(
        self, record: ServiceRecord, page: Optional[DatabasePage], city_slug: str
    ) -> ResolvedPageContent:
        content = (page.content if page else None) or PageContent()
        city_name = record.city or city_display_name(city_slug)
        keyword = record.keyword
        content_slug, entry = self._content_entry(record, city_name)

        synthesized_meta = (
            f"Professional {keyword.lower()} services in {city_name}, {self.region}. "
            f"Free estimates from {self.business_name}."
        )
        default_cta = (
            f"Contact us today for your free {keyword.lower()} estimate in {city_name}. "
            "We'll provide a detailed quote and answer any questions you have about your project."
        )

        if content.faq:
            faqs: List[FAQ] = [FAQ(question=item.question, answer=item.answer) for item in content.faq]
        else:
            faqs = list(entry.faqs) if entry else []

        keywords = [keyword, city_name, record.category]
        if entry:
            keywords.extend(entry.keywords)

        internal_links = parse_internal_links(content.internal_links or "")
        if not internal_links:
            internal_links = parse_internal_links(record.internal_links_html)

        related = select_related(record, self.catalog)

        return ResolvedPageContent(
            source="database" if page else "catalog",
            city_slug=record.city_slug,
            service_slug=record.service_slug,
            city_name=city_name,
            record=record,
            canonical_path=record.url_path,
            seo_title=_first(
                page.meta_title if page else None,
                record.seo_title,
                f"{keyword} in {city_name}, {self.region}",
            ),
            h1=_first(page.h1 if page else None, record.h1, f"{keyword} in {city_name}"),
            meta_description=_first(
                page.meta_description if page else None,
                record.meta_description,
                entry.meta_description if entry else None,
                synthesized_meta,
            ),
            hero_text=_first(content.hero_text, f"Professional {keyword} in {city_name}"),
            description=_first(
                content.service_description,
                entry.long_description if entry else None,
                entry.short_description if entry else None,
                "",
            ),
            cta_text=_first(content.cta_text, default_cta),
            city_description=content.city_description or None,
            keywords=[kw for kw in dict.fromkeys(keywords) if kw],
            sections=content.sections or [],
            features=_first(content.features, entry.benefits[:MAX_FEATURES] if entry else None, []),
            testimonials=content.testimonials or [],
            faqs=faqs,
            process=entry.process if entry else [],
            problems_solved=entry.problems_solved if entry else [],
            why_choose_us=entry.why_choose_us if entry else [],
            service_features=entry.service_features if entry else [],
            price_range=entry.price_range if entry else None,
            timeline=entry.timeline if entry else None,
            warranty=entry.warranty if entry else None,
            materials=entry.materials if entry else [],
            certifications=entry.certifications if entry else [],
            internal_links=internal_links,
            json_ld=self._json_ld(page, record),
            content_slug=content_slug,
            related_services=related.related_services,
            nearby_cities=related.nearby_cities,
            related_content=self.content_store.get_related(content_slug) if content_slug else [],
        )
