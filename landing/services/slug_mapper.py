"""Mapping tables between catalog service slugs and curated content slugs."""

import logging
from typing import Dict, List, Optional, Tuple

from landing.services.normalizer import normalize, slugify

logger = logging.getLogger(__name__)

# Catalog (CSV) service slug -> curated content slug
SERVICE_SLUG_MAPPING: Dict[str, str] = {
    # Roofing
    "roofing": "roofing-residential",
    "roof-installation": "roofing-residential",
    "roof-repair": "roofing-residential",
    "roof-replacement": "roofing-residential",
    # Kitchen
    "kitchen-remodel": "kitchen-remodeling",
    "kitchen-renovation": "kitchen-remodeling",
    "kitchen-remodeling": "kitchen-remodeling",
    # Bathroom
    "bathroom-remodel": "bathroom-remodeling",
    "bathroom-renovation": "bathroom-remodeling",
    "bathroom-remodeling": "bathroom-remodeling",
    # Additions
    "home-addition": "home-additions",
    "room-addition": "home-additions",
    "second-story": "home-additions",
    # Decks
    "deck-construction": "deck-building",
    "deck-installation": "deck-building",
    "deck-building": "deck-building",
    # Siding
    "siding": "siding-installation",
    "siding-replacement": "siding-installation",
    "vinyl-siding": "siding-installation",
    # Windows
    "windows": "window-replacement",
    "window-installation": "window-replacement",
    # Flooring
    "hardwood-installation": "flooring-installation",
    "laminate-installation": "flooring-installation",
    "vinyl-plank-installation": "flooring-installation",
    "tile-installation": "flooring-installation",
    "carpet-installation": "flooring-installation",
    "floor-refinishing": "flooring-installation",
    # Plumbing
    "plumbing": "plumbing-services",
    "plumber": "plumbing-services",
    "pipe-repair": "plumbing-services",
    "water-heater": "plumbing-services",
    # Electrical
    "electrical": "electrical-services",
    "electrician": "electrical-services",
    "electrical-repair": "electrical-services",
    "panel-upgrade": "electrical-services",
    # HVAC
    "hvac": "hvac-services",
    "heating": "hvac-services",
    "cooling": "hvac-services",
    "air-conditioning": "hvac-services",
    "furnace": "hvac-services",
}

# Canonical catalog service slug -> alternative spellings seen in inbound links
SERVICE_VARIATIONS: Dict[str, Tuple[str, ...]] = {
    "junk-removal-service": ("junk-removal", "junk-removal-services", "junk-hauling-service"),
    "junk-removal": ("junk-removal-service", "junk-removal-services", "junk-hauling"),
    "hardwood-floor-installation": ("hardwood-flooring", "hardwood-floors", "hardwood-installation"),
    "vinyl-plank-installation": ("vinyl-plank", "vinyl-plank-flooring", "vinyl-flooring"),
    "laminate-installation": ("laminate-flooring", "laminate-floors", "laminate"),
    "interior-demolition": ("demolition", "demo", "interior-demo"),
    "construction-debris-removal": ("construction-cleanup", "construction-debris", "debris-removal"),
    "bathroom-remodeling": ("bathroom-remodel", "bathroom-renovation"),
    "kitchen-remodeling": ("kitchen-remodel", "kitchen-renovation"),
    "flooring-installation": ("flooring", "floor-installation"),
}

# Content category tag -> curated content slugs, in display order
CATEGORY_MAPPING: Dict[str, Tuple[str, ...]] = {
    "flooring": (
        "flooring-installation",
        "hardwood-installation",
        "laminate-installation",
        "vinyl-flooring",
    ),
    "remodeling": ("kitchen-remodeling", "bathroom-remodeling", "home-additions"),
    "exterior": (
        "roofing-residential",
        "siding-installation",
        "window-replacement",
        "deck-building",
    ),
    "systems": ("plumbing-services", "electrical-services", "hvac-services"),
    "demolition": ("interior-demolition",),
    "junk removal": ("junk-removal", "construction-debris-removal"),
}


def _reverse(mapping: Dict[str, str]) -> Dict[str, List[str]]:
    reverse: Dict[str, List[str]] = {}
    for catalog_slug, content_slug in mapping.items():
        reverse.setdefault(content_slug, []).append(catalog_slug)
    return reverse


REVERSE_SLUG_MAPPING = _reverse(SERVICE_SLUG_MAPPING)


def find_best_match(service_slug: str) -> Optional[str]:
    """Return the curated content slug that best fits a catalog *service_slug*.

    Tries, in order: a direct mapping entry, the slug already being a content
    slug, a mapping key that contains (or is contained in) the slug, and a
    content slug that contains (or is contained in) the slug.  Returns *None*
    when nothing fits.
    """
    slug = slugify(service_slug)
    if not slug:
        return None

    if slug in SERVICE_SLUG_MAPPING:
        return SERVICE_SLUG_MAPPING[slug]

    if slug in REVERSE_SLUG_MAPPING:
        return slug

    for key, content_slug in SERVICE_SLUG_MAPPING.items():
        if key in slug or slug in key:
            logger.debug("Slug mapper: partial key match %s -> %s", slug, key)
            return content_slug

    for content_slug in REVERSE_SLUG_MAPPING:
        if content_slug in slug or slug in content_slug:
            logger.debug("Slug mapper: partial content match %s -> %s", slug, content_slug)
            return content_slug

    return None


def catalog_slugs_for(content_slug: str) -> List[str]:
    """All catalog slugs that map onto *content_slug*."""
    return list(REVERSE_SLUG_MAPPING.get(content_slug, []))


def content_category(content_slug: str) -> Optional[str]:
    for category, slugs in CATEGORY_MAPPING.items():
        if content_slug in slugs:
            return category
    return None


def category_slugs(category: str) -> Tuple[str, ...]:
    return CATEGORY_MAPPING.get(normalize(category), ())
