from typing import List

from pydantic import BaseModel


class NamedCount(BaseModel):
    name: str
    count: int


class CatalogStats(BaseModel):
    total_services: int
    total_cities: int
    total_categories: int
    services_per_city: List[NamedCount]  # largest first
    services_per_category: List[NamedCount]  # largest first


class IntegrityReport(BaseModel):
    is_valid: bool
    issues: List[str]
    stats: CatalogStats
