from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from autocare.domain.entities.service_catalog import ServiceCategory


@dataclass(frozen=True)
class PromoRule:
    code: str
    rate: Decimal
    # Empty means the code is valid for every category.
    categories: frozenset[ServiceCategory] = field(default_factory=frozenset)

    def applies_to(self, category: ServiceCategory) -> bool:
        return not self.categories or category in self.categories
