from __future__ import annotations

import json
import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from autocare.application.exceptions import InvalidPromoRule
from autocare.application.ports.promo_rules import PromoRulePort
from autocare.domain.entities.promo_rule import PromoRule
from autocare.domain.entities.service_catalog import ServiceCategory

DEFAULT_PROMO_RULES: Mapping[str, PromoRule] = MappingProxyType(
    {
        "FIRST20": PromoRule(code="FIRST20", rate=Decimal("0.20")),
        "WASH10": PromoRule(
            code="WASH10",
            rate=Decimal("0.10"),
            categories=frozenset({ServiceCategory.wash}),
        ),
        "MECHANIC15": PromoRule(
            code="MECHANIC15",
            rate=Decimal("0.15"),
            categories=frozenset({ServiceCategory.mechanic}),
        ),
    }
)


def normalize_code(code: str) -> str:
    return code.strip().upper()


class StaticPromoRuleStore(PromoRulePort):
    def __init__(self, rules: Mapping[str, PromoRule] | None = None) -> None:
        source = DEFAULT_PROMO_RULES if rules is None else rules
        self._rules = MappingProxyType({normalize_code(code): rule for code, rule in source.items()})

    def get_rule(self, code: str) -> PromoRule | None:
        return self._rules.get(normalize_code(code))

    def list_rules(self) -> list[PromoRule]:
        return list(self._rules.values())


class JsonPromoRuleStore(StaticPromoRuleStore):
    """
    Promo rules loaded once from a JSON file:

        {"FIRST20": {"rate": "0.20"}, "WASH10": {"rate": "0.10", "categories": ["wash"]}}

    A missing or empty `categories` list makes the code valid for every category.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._logger = logging.getLogger(__name__)
        with open(self._path, "r", encoding="utf-8") as f:
            payload = json.load(f)
        if not isinstance(payload, dict):
            raise InvalidPromoRule(f"Promo rules file must hold a JSON object: {self._path}")
        rules = {normalize_code(code): _parse_rule(code, raw) for code, raw in payload.items()}
        self._logger.info("Loaded promo rules", extra={"reason": str(self._path), "amount": len(rules)})
        super().__init__(rules)


def _parse_rule(code: str, raw: Any) -> PromoRule:
    if not isinstance(raw, dict):
        raise InvalidPromoRule(f"Promo rule {code!r} must be an object")
    try:
        rate = Decimal(str(raw.get("rate")))
    except InvalidOperation as e:
        raise InvalidPromoRule(f"Promo rule {code!r} has a non-numeric rate") from e
    if not rate.is_finite() or not (Decimal("0") <= rate < Decimal("1")):
        raise InvalidPromoRule(f"Promo rule {code!r} rate must be in [0, 1), got {rate}")

    categories: set[ServiceCategory] = set()
    for name in raw.get("categories") or []:
        try:
            categories.add(ServiceCategory(str(name).strip().lower()))
        except ValueError as e:
            raise InvalidPromoRule(f"Promo rule {code!r} has unknown category {name!r}") from e

    return PromoRule(code=normalize_code(code), rate=rate, categories=frozenset(categories))
