from typing import List, Literal, Optional

from pydantic import BaseModel


class ProcessStep(BaseModel):
    step: int
    title: str
    description: str
    duration: Optional[str] = None


class FAQ(BaseModel):
    question: str
    answer: str
    category: Optional[str] = None


class CallToAction(BaseModel):
    type: Literal["phone", "form", "consultation", "estimate"]
    text: str
    description: str
    urgency: Optional[str] = None


class ServiceFeature(BaseModel):
    icon: str
    title: str
    description: str


class ServiceContentEntry(BaseModel):
    """Curated long-form copy for one canonical service slug.

    Prose fields may contain the placeholder region name (``"Utah"`` by
    default), which location templating swaps for the requested city.
    """

    slug: str
    title: str
    meta_description: str
    keywords: List[str]
    long_description: str
    short_description: str
    benefits: List[str]
    process: List[ProcessStep]
    problems_solved: List[str]
    why_choose_us: List[str]
    faqs: List[FAQ]
    call_to_actions: List[CallToAction] = []
    related_slugs: List[str] = []
    service_features: List[ServiceFeature] = []
    price_range: str
    timeline: str
    warranty: str
    materials: List[str] = []
    certifications: List[str] = []


class ServiceSEOData(BaseModel):
    title: str
    description: str
    keywords: str  # comma-separated
    canonical_url: str
    structured_data: dict
