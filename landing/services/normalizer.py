"""Slug utilities: comparable keys, URL slugs, city display names."""

import re
import unicodedata
from typing import Optional, Tuple

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")

# Suffix appended to every city slug in the service area
STATE_SUFFIX = "-ut"

CITY_NAMES = {
    "salt-lake-city-ut": "Salt Lake City",
    "west-valley-city-ut": "West Valley City",
    "west-jordan-ut": "West Jordan",
    "taylorsville-ut": "Taylorsville",
    "south-jordan-ut": "South Jordan",
    "sandy-ut": "Sandy",
    "murray-ut": "Murray",
    "draper-ut": "Draper",
    "riverton-ut": "Riverton",
    "midvale-ut": "Midvale",
    "cottonwood-heights-ut": "Cottonwood Heights",
    "herriman-ut": "Herriman",
    "holladay-ut": "Holladay",
    "millcreek-ut": "Millcreek",
    "south-salt-lake-ut": "South Salt Lake",
    "bluffdale-ut": "Bluffdale",
    "magna-ut": "Magna",
    "kearns-ut": "Kearns",
    "brighton-ut": "Brighton",
    "alta-ut": "Alta",
    "emigration-canyon-ut": "Emigration Canyon",
    "white-city-ut": "White City",
    "copperton-ut": "Copperton",
}


def normalize(value: str) -> str:
    """Return a comparable key for a free-text city or service identifier.

    Lowercases, collapses every run of non-alphanumeric characters into a
    single space and trims.  Idempotent: ``normalize(normalize(s)) ==
    normalize(s)``.
    """
    return _NON_ALNUM_RE.sub(" ", (value or "").lower()).strip()


def slugify(value: str) -> str:
    """Return the URL slug form of *value* (ASCII, lowercase, hyphenated)."""
    text = unicodedata.normalize("NFKD", value or "")
    text = text.encode("ascii", "ignore").decode("ascii")
    return normalize(text).replace(" ", "-")


def strip_state_suffix(city_slug: str) -> str:
    """``"sandy-ut"`` -> ``"sandy"``; slugs without the suffix are returned as-is."""
    if city_slug.endswith(STATE_SUFFIX):
        return city_slug[: -len(STATE_SUFFIX)]
    return city_slug


def city_display_name(city_slug: str) -> str:
    """Map a city slug to its human-readable name.

    Known service-area cities come from :data:`CITY_NAMES`; anything else is
    derived by dropping the state suffix and capitalizing each word.
    """
    slug = slugify(city_slug)
    known = CITY_NAMES.get(slug)
    if known:
        return known
    words = strip_state_suffix(slug).split("-")
    return " ".join(word.capitalize() for word in words if word)


def split_url_path(url_path: str) -> Optional[Tuple[str, str]]:
    """Split ``"/sandy-ut/laminate-installation/"`` into its two slugs.

    Returns *None* when the path does not have exactly two segments.
    """
    parts = [part for part in (url_path or "").strip().split("/") if part]
    if len(parts) != 2:
        return None
    return parts[0], parts[1]
