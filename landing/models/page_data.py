import logging
from typing import List, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)

logger = logging.getLogger(__name__)


class ContentSection(BaseModel):
    title: str = ""
    content: str = ""


class Testimonial(BaseModel):
    name: str = ""
    text: str = ""
    rating: int = 5


class PageFAQ(BaseModel):
    question: str
    answer: str


class PageContent(BaseModel):
    """Rich-content blob stored in the ``content`` column of a database page.

    Every field is optional; the resolver falls back to the static catalog
    for whatever is missing.  Invalid values degrade per field: a bad list
    item is dropped and a bad scalar becomes *None*, the rest of the blob
    is kept.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    hero_text: Optional[str] = None
    service_description: Optional[str] = None
    sections: Optional[List[ContentSection]] = None
    features: Optional[List[str]] = None
    testimonials: Optional[List[Testimonial]] = None
    faq: Optional[List[PageFAQ]] = None
    city_description: Optional[str] = None
    cta_text: Optional[str] = None
    internal_links: Optional[str] = Field(default=None, alias="internalLinks")
    json_ld: Optional[Union[str, dict]] = Field(default=None, alias="jsonLd")

    @field_validator("sections", "features", "testimonials", "faq", mode="wrap")
    @classmethod
    def _drop_invalid_items(
        cls, value, handler: ValidatorFunctionWrapHandler, info: ValidationInfo
    ):
        if value is None:
            return None
        if not isinstance(value, list):
            logger.warning("Page content: %s is not a list – ignored", info.field_name)
            return None
        kept = []
        for index, item in enumerate(value):
            try:
                kept.extend(handler([item]))
            except ValidationError as exc:
                logger.warning(
                    "Page content: dropping invalid %s[%d] – %d errors",
                    info.field_name,
                    index,
                    exc.error_count(),
                )
        return kept

    @field_validator(
        "hero_text",
        "service_description",
        "city_description",
        "cta_text",
        "internal_links",
        "json_ld",
        mode="wrap",
    )
    @classmethod
    def _none_if_invalid(cls, value, handler: ValidatorFunctionWrapHandler, info: ValidationInfo):
        try:
            return handler(value)
        except ValidationError:
            logger.warning("Page content: invalid %s – ignored", info.field_name)
            return None


class DatabasePage(BaseModel):
    """A published landing page row from the ``pages`` table.

    Only ``slug`` is required.  A missing ``city`` is derived from the
    request's city slug by the resolver.
    """

    model_config = ConfigDict(extra="ignore")

    id: Optional[Union[int, str]] = None
    slug: str
    city: Optional[str] = None
    service: str = ""  # enum: flooring | demolition | junk_removal
    keyword: str = ""
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    h1: Optional[str] = None
    content: Optional[PageContent] = None
    published: bool = True

    @field_validator("service", "keyword", mode="before")
    @classmethod
    def _blank_if_null(cls, value):
        return "" if value is None else value

    @field_validator("meta_title", "meta_description", "h1", "content", mode="wrap")
    @classmethod
    def _none_if_invalid(cls, value, handler: ValidatorFunctionWrapHandler, info: ValidationInfo):
        try:
            return handler(value)
        except ValidationError:
            logger.warning("Database page: invalid %s – ignored", info.field_name)
            return None
