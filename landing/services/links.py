"""Parse the internal-link HTML blocks carried by catalog and database pages."""

import logging
from typing import List

from bs4 import BeautifulSoup

from landing.models.resolved import InternalLink

logger = logging.getLogger(__name__)


def parse_internal_links(html: str) -> List[InternalLink]:
    """Return the anchors in *html* as label/href pairs, in document order.

    Anchors without an ``href`` or visible text are skipped, as are repeated
    hrefs.
    """
    if not html or not html.strip():
        return []

    soup = BeautifulSoup(html, "lxml")
    links: List[InternalLink] = []
    seen: set = set()
    for tag in soup.find_all("a", href=True):
        href = tag["href"].strip()
        label = tag.get_text(" ", strip=True)
        if not href or not label or href.startswith(("#", "javascript:")):
            continue
        if href in seen:
            continue
        seen.add(href)
        links.append(InternalLink(label=label, href=href))

    logger.debug("Links: parsed %d internal links", len(links))
    return links
