from typing import List, Literal, Optional

from pydantic import BaseModel

from landing.models.page_data import ContentSection, Testimonial
from landing.models.service_content import (
    FAQ,
    ProcessStep,
    ServiceContentEntry,
    ServiceFeature,
)
from landing.models.service_record import ServiceRecord


class MatchSuggestion(BaseModel):
    record: ServiceRecord
    score: float  # 0.0 – 1.0


class MatchResult(BaseModel):
    suggestions: List[MatchSuggestion] = []
    best_match: Optional[ServiceRecord] = None


class InternalLink(BaseModel):
    label: str
    href: str


class RelatedContent(BaseModel):
    related_services: List[ServiceRecord] = []
    nearby_cities: List[str] = []


class ResolvedPageContent(BaseModel):
    """Fully merged content for one city x service landing page."""

    found: bool = True
    source: Literal["database", "catalog"]
    city_slug: str
    service_slug: str
    city_name: str
    record: ServiceRecord
    canonical_path: str

    seo_title: str
    h1: str
    meta_description: str
    hero_text: str
    description: str
    cta_text: str
    city_description: Optional[str] = None
    keywords: List[str] = []

    sections: List[ContentSection] = []
    features: List[str] = []
    testimonials: List[Testimonial] = []
    faqs: List[FAQ] = []

    process: List[ProcessStep] = []
    problems_solved: List[str] = []
    why_choose_us: List[str] = []
    service_features: List[ServiceFeature] = []
    price_range: Optional[str] = None
    timeline: Optional[str] = None
    warranty: Optional[str] = None
    materials: List[str] = []
    certifications: List[str] = []

    internal_links: List[InternalLink] = []
    json_ld: Optional[dict] = None

    content_slug: Optional[str] = None
    related_services: List[ServiceRecord] = []
    nearby_cities: List[str] = []
    related_content: List[ServiceContentEntry] = []


class NotFoundResult(BaseModel):
    """Terminal miss: nothing matched exactly, possibly with alternatives."""

    city_slug: str
    service_slug: str
    suggestions: List[MatchSuggestion] = []
    best_match: Optional[ServiceRecord] = None


class SuggestionLink(BaseModel):
    keyword: str
    city: str
    href: str
    score: float


class DidYouMeanResponse(BaseModel):
    """Payload for a request that matched nothing exactly but has alternatives."""

    found: bool = False
    city_slug: str
    service_slug: str
    city_name: str
    message: str
    suggestions: List[SuggestionLink] = []
    best_match: Optional[SuggestionLink] = None


class PageMetadata(BaseModel):
    found: bool
    title: str
    description: str
    keywords: str = ""
    canonical: Optional[str] = None
    open_graph: dict = {}


class CityEntry(BaseModel):
    name: str
    slug: str
    services: int


class CheckServiceResponse(BaseModel):
    exists: bool
    slug: Optional[str] = None
    keyword: Optional[str] = None
    city_exists: Optional[bool] = None
