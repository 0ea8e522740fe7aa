from __future__ import annotations

import logging
import math
from decimal import Decimal

from autocare.application.exceptions import ServiceNotFound, UnknownCategory
from autocare.application.ports.promo_rules import PromoRulePort
from autocare.application.ports.service_catalog import ServiceCatalogPort
from autocare.domain.entities.price_breakdown import PriceBreakdown
from autocare.domain.entities.service_catalog import ServiceCatalogEntry, ServiceCategory


def resolve_category(category: ServiceCategory | str) -> ServiceCategory:
    if isinstance(category, ServiceCategory):
        return category
    try:
        return ServiceCategory(str(category).strip().lower())
    except ValueError as e:
        raise UnknownCategory(f"Unknown service category: {category!r}") from e


class PricingEngine:
    """
    Computes price breakdowns from the static catalog and the promo rule table.

    All amounts are integer paise. Rates are exact decimals so that the floor
    at each stage is taken on the true product, not on a float approximation.
    """

    def __init__(self, catalog: ServiceCatalogPort, promo_rules: PromoRulePort) -> None:
        self._catalog = catalog
        self._promo_rules = promo_rules
        self._logger = logging.getLogger(__name__)

    def calculate_service_price(
        self,
        service_id: str,
        category: ServiceCategory | str,
        promo_code: str | None = None,
    ) -> PriceBreakdown:
        resolved_category = resolve_category(category)
        entry = self._catalog.get_service(service_id, resolved_category)
        if entry is None:
            raise ServiceNotFound(service_id, resolved_category.value)

        rate = self.effective_discount_rate(entry, promo_code)

        discount = math.floor(entry.base_price * rate)
        subtotal = entry.base_price - discount
        taxes = math.floor(subtotal * entry.tax_rate)
        total = subtotal + taxes

        self._logger.debug(
            "Price calculated",
            extra={
                "service_id": service_id,
                "category": resolved_category.value,
                "promo_code": promo_code,
                "amount": total,
            },
        )
        return PriceBreakdown(
            service_id=service_id,
            # Kept equal to the id; catalog display names are served by list_services.
            service_name=service_id,
            base_price=entry.base_price,
            discount=discount,
            subtotal=subtotal,
            taxes=taxes,
            total=total,
        )

    def effective_discount_rate(self, entry: ServiceCatalogEntry, promo_code: str | None) -> Decimal:
        """Larger of the standing discount and the promo discount; never their sum."""
        promo_rate = Decimal("0")
        if promo_code and promo_code.strip():
            rule = self._promo_rules.get_rule(promo_code)
            if rule is not None and rule.applies_to(entry.category):
                promo_rate = rule.rate
        return max(entry.discount_rate, promo_rate)

    def list_services(self, category: ServiceCategory | str) -> list[ServiceCatalogEntry]:
        return self._catalog.list_services(resolve_category(category))
