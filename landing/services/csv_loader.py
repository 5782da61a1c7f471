"""Loader for the city x service SEO matrix CSV."""

import csv
import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from landing.models.service_record import ServiceRecord
from landing.services.catalog import CatalogLoadError
from landing.services.normalizer import slugify, split_url_path

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("Category", "City", "Keyword", "URL Slug", "SEO Title")


def parse_json_ld(raw: str) -> Optional[dict]:
    """Parse a JSON-LD block; malformed or non-object payloads give *None*."""
    if not raw:
        return None
    try:
        parsed = json.loads(raw)
    except ValueError as exc:
        logger.warning("CSV loader: invalid JSON-LD – %s", exc)
        return None
    if not isinstance(parsed, dict):
        logger.warning("CSV loader: JSON-LD is not an object (%s)", type(parsed).__name__)
        return None
    return parsed


def _cell(row: Dict[str, Optional[str]], column: str) -> str:
    return (row.get(column) or "").strip()


def parse_service_row(row: Dict[str, Optional[str]], line: int = 0) -> Optional[ServiceRecord]:
    """Turn one CSV row into a :class:`ServiceRecord`, or *None* if unusable."""
    missing = [column for column in REQUIRED_COLUMNS if not _cell(row, column)]
    if missing:
        logger.warning("CSV loader: row %d missing %s – skipped", line, ", ".join(missing))
        return None

    url_path = _cell(row, "URL Slug")
    slugs = split_url_path(url_path)
    if slugs is None:
        logger.warning("CSV loader: row %d has malformed URL path %r – skipped", line, url_path)
        return None
    city_slug, service_slug = slugs

    json_ld = _cell(row, "JSON-LD Service")
    return ServiceRecord(
        category=_cell(row, "Category"),
        city=_cell(row, "City"),
        city_slug=slugify(city_slug),
        keyword=_cell(row, "Keyword"),
        service_slug=slugify(service_slug),
        url_path=url_path,
        seo_title=_cell(row, "SEO Title"),
        h1=_cell(row, "H1"),
        meta_description=_cell(row, "Meta Description"),
        suggested_page_type=_cell(row, "Suggested Page Type"),
        internal_links_html=_cell(row, "Internal Link Block HTML"),
        json_ld=json_ld,
        parsed_json_ld=parse_json_ld(json_ld),
    )


def parse_service_rows(rows: Iterable[Dict[str, Optional[str]]]) -> List[ServiceRecord]:
    records: List[ServiceRecord] = []
    total = 0
    # Line 1 is the header
    for line, row in enumerate(rows, start=2):
        total += 1
        record = parse_service_row(row, line)
        if record is not None:
            records.append(record)
    logger.info("CSV loader: %d valid records from %d rows", len(records), total)
    return records


def load_service_records(path: Union[str, Path]) -> List[ServiceRecord]:
    """Read the SEO matrix at *path*.

    Raises :class:`CatalogLoadError` when the file cannot be read or has no
    header row; individual bad rows are skipped with a warning.
    """
    path = Path(path)
    logger.info("CSV loader: reading %s", path)
    try:
        with path.open(newline="", encoding="utf-8-sig") as handle:
            reader = csv.DictReader(handle, skipinitialspace=True)
            if not reader.fieldnames:
                raise CatalogLoadError(f"Catalog file {path} has no header row")
            return parse_service_rows(reader)
    except (OSError, csv.Error, UnicodeDecodeError) as exc:
        raise CatalogLoadError(f"Failed to load catalog from {path}: {exc}") from exc
