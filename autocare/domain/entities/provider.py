from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Provider:
    id: str
    company_name: str
    city: str
    base_price: int  # paise
    rating: float | None = None
    distance: float | None = None  # km
    available: bool | None = None
    services: tuple[str, ...] = ()


@dataclass(frozen=True)
class ProviderFilters:
    search: str = ""
    price_range: str = ""  # "low", "medium", "high"
    rating: str = ""  # "4+", "4.5+", "5"
    distance: str = ""  # max km
    availability: str = ""  # "now", "today", "tomorrow"
    sort_by: str = "relevance"
