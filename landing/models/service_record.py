from typing import Optional

from pydantic import BaseModel, ConfigDict


class ServiceRecord(BaseModel):
    """One row of the city x service SEO matrix.

    Identity is the ``(city_slug, service_slug)`` pair.  Records are loaded
    once at startup and shared read-only between requests.
    """

    model_config = ConfigDict(frozen=True)

    category: str
    city: str  # display name, e.g. "Salt Lake City"
    city_slug: str  # e.g. "salt-lake-city-ut"
    keyword: str
    service_slug: str
    url_path: str  # e.g. "/salt-lake-city-ut/hardwood-floor-installation/"
    seo_title: str = ""
    h1: str = ""
    meta_description: str = ""
    suggested_page_type: str = ""
    internal_links_html: str = ""
    json_ld: str = ""  # raw JSON-LD block as stored in the source
    parsed_json_ld: Optional[dict] = None
