from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PriceBreakdown:
    service_id: str
    service_name: str
    base_price: int
    discount: int
    subtotal: int
    taxes: int
    total: int
