from __future__ import annotations

import math
from typing import Callable, Iterable

from autocare.application.exceptions import InvalidFilter
from autocare.domain.entities.provider import Provider, ProviderFilters

# Price bands in whole rupees.
LOW_PRICE_LIMIT = 300
HIGH_PRICE_LIMIT = 500

RATING_MINIMUMS = {"4+": 4.0, "4.5+": 4.5, "5": 5.0}
AVAILABILITY_WINDOWS = {"now", "today", "tomorrow"}


def _matches_search(provider: Provider, term: str) -> bool:
    return (
        term in provider.company_name.lower()
        or term in provider.city.lower()
        or any(term in service.lower() for service in provider.services)
    )


def _matches_price(provider: Provider, price_range: str) -> bool:
    price = provider.base_price / 100
    if price_range == "low":
        return price < LOW_PRICE_LIMIT
    if price_range == "medium":
        return LOW_PRICE_LIMIT <= price <= HIGH_PRICE_LIMIT
    if price_range == "high":
        return price > HIGH_PRICE_LIMIT
    return True


def _parse_distance(value: str) -> float:
    try:
        distance = float(value)
    except ValueError as e:
        raise InvalidFilter(f"Distance filter must be a number, got {value!r}") from e
    if not math.isfinite(distance) or distance < 0:
        raise InvalidFilter(f"Distance filter must be a non-negative finite number, got {value!r}")
    return distance


_SORT_KEYS: dict[str, tuple[Callable[[Provider], float], bool]] = {
    "price_low": (lambda p: p.base_price, False),
    "price_high": (lambda p: p.base_price, True),
    "rating": (lambda p: p.rating or 0, True),
    "distance": (lambda p: p.distance or 0, False),
    "availability": (lambda p: 1 if p.available else 0, True),
}


def filter_and_sort_providers(providers: Iterable[Provider], filters: ProviderFilters) -> list[Provider]:
    """Apply search, price, rating, distance and availability filters, then a stable sort."""
    result = list(providers)

    if filters.search:
        term = filters.search.lower()
        result = [p for p in result if _matches_search(p, term)]

    if filters.price_range:
        result = [p for p in result if _matches_price(p, filters.price_range)]

    if filters.rating:
        minimum = RATING_MINIMUMS.get(filters.rating)
        if minimum is not None:
            result = [p for p in result if (p.rating or 0) >= minimum]

    if filters.distance:
        max_distance = _parse_distance(filters.distance)
        # Providers without a known distance are not excluded.
        result = [p for p in result if not p.distance or p.distance <= max_distance]

    if filters.availability in AVAILABILITY_WINDOWS:
        result = [p for p in result if p.available is not False]

    sort_spec = _SORT_KEYS.get(filters.sort_by)
    if sort_spec:
        key, reverse = sort_spec
        # sorted() with reverse=True keeps ties in input order.
        result = sorted(result, key=key, reverse=reverse)

    return result


def active_filters_count(filters: ProviderFilters) -> int:
    values = (filters.search, filters.price_range, filters.rating, filters.distance, filters.availability)
    return sum(1 for value in values if value)
