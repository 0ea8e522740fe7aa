from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class ServiceCategory(str, Enum):
    wash = "wash"
    mechanic = "mechanic"


@dataclass(frozen=True)
class ServiceCatalogEntry:
    service_id: str
    category: ServiceCategory
    base_price: int  # paise
    tax_rate: Decimal
    discount_rate: Decimal = Decimal("0")
    display_name: str | None = None
