from __future__ import annotations

from abc import ABC, abstractmethod

from autocare.domain.entities.promo_rule import PromoRule


class PromoRulePort(ABC):
    @abstractmethod
    def get_rule(self, code: str) -> PromoRule | None:
        """Get promo rule by code (case-insensitive). None if the code is unknown."""
        raise NotImplementedError

    @abstractmethod
    def list_rules(self) -> list[PromoRule]:
        raise NotImplementedError
