"""Cross-linking: related services in the same city, nearby cities for the same service."""

from typing import List

from landing.models.resolved import RelatedContent
from landing.models.service_record import ServiceRecord
from landing.services.catalog import ServiceCatalog
from landing.services.normalizer import normalize

MAX_RELATED_SERVICES = 5
MAX_NEARBY_CITIES = 8


def select_related(
    record: ServiceRecord,
    catalog: ServiceCatalog,
    max_services: int = MAX_RELATED_SERVICES,
    max_cities: int = MAX_NEARBY_CITIES,
) -> RelatedContent:
    """Related services share *record*'s category and city; nearby cities offer its keyword.

    Both lists follow catalog order, exclude *record* itself and contain no
    duplicates.
    """
    city_key = normalize(record.city_slug)
    service_key = normalize(record.service_slug)

    related_services: List[ServiceRecord] = []
    seen_services = {service_key}
    for candidate in catalog.get_by_category(record.category):
        if len(related_services) >= max_services:
            break
        if normalize(candidate.city_slug) != city_key:
            continue
        candidate_key = normalize(candidate.service_slug)
        if candidate_key in seen_services:
            continue
        seen_services.add(candidate_key)
        related_services.append(candidate)

    current_city = normalize(record.city)
    nearby_cities: List[str] = []
    for city in catalog.get_cities_for_service(record.keyword):
        if len(nearby_cities) >= max_cities:
            break
        if normalize(city) == current_city or city in nearby_cities:
            continue
        nearby_cities.append(city)

    return RelatedContent(related_services=related_services, nearby_cities=nearby_cities)
