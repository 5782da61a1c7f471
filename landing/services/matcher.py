"""Fuzzy "did you mean" matching of unknown service slugs."""

import logging
from typing import List

from rapidfuzz import fuzz

from landing.models.resolved import MatchResult, MatchSuggestion
from landing.models.service_record import ServiceRecord
from landing.services.catalog import ServiceCatalog
from landing.services.normalizer import normalize

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 5
# Top score must exceed this for a single best match
DEFAULT_THRESHOLD = 0.6
# Suggestions below this are noise
DEFAULT_MIN_SCORE = 0.4


def similarity(left: str, right: str) -> float:
    """Normalized Indel similarity of two slugs, 0.0 – 1.0.

    Identical normalized strings score 1.0 and the score is symmetric.
    """
    return fuzz.ratio(normalize(left), normalize(right)) / 100.0


def find_closest_matches(
    city_slug: str,
    service_slug: str,
    catalog: ServiceCatalog,
    limit: int = DEFAULT_LIMIT,
    threshold: float = DEFAULT_THRESHOLD,
    min_score: float = DEFAULT_MIN_SCORE,
) -> MatchResult:
    """Rank catalog services by similarity to *service_slug*.

    Candidates are the services offered in *city_slug*; when the city is
    unknown, the first record of every service in the catalog.  Ties keep
    catalog order.  The catalog is never modified.
    """
    query = normalize(service_slug)
    if not query or len(catalog) == 0:
        return MatchResult()

    candidates: List[ServiceRecord] = catalog.services_for_city(city_slug)
    if not candidates:
        logger.debug("Matcher: unknown city %s, scoring full catalog", city_slug)
        candidates = catalog.distinct_services()

    scored = [
        MatchSuggestion(record=record, score=similarity(query, record.service_slug))
        for record in candidates
    ]
    scored = [suggestion for suggestion in scored if suggestion.score >= min_score]
    scored.sort(key=lambda suggestion: suggestion.score, reverse=True)
    suggestions = scored[: max(limit, 0)]

    best_match = None
    if suggestions and suggestions[0].score > threshold:
        best_match = suggestions[0].record

    logger.info(
        "Matcher: %d suggestions for %s/%s (best=%s)",
        len(suggestions),
        city_slug,
        service_slug,
        best_match.service_slug if best_match else None,
    )
    return MatchResult(suggestions=suggestions, best_match=best_match)
