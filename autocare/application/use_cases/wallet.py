from __future__ import annotations

import logging
from decimal import Decimal

from autocare.application.exceptions import InvalidAmount
from autocare.application.ports.wallet_store import WalletStorePort
from autocare.application.utils.currency import to_minor_units
from autocare.domain.entities.payment import WalletBalance


class WalletUseCase:
    def __init__(self, store: WalletStorePort, max_top_up: int, currency: str = "INR") -> None:
        self._store = store
        self._max_top_up = max_top_up
        self._currency = currency
        self._logger = logging.getLogger(__name__)

    def get_balance(self, user_id: str) -> WalletBalance:
        return WalletBalance(
            user_id=user_id,
            balance=self._store.get_balance(user_id),
            currency=self._currency,
        )

    def top_up(self, user_id: str, amount: str | int | Decimal) -> WalletBalance:
        """Add a major-unit amount (e.g. "150.50" rupees) to the wallet."""
        try:
            minor = to_minor_units(amount, ceiling=self._max_top_up + 1)
        except ValueError as e:
            self._logger.warning("Top-up rejected", extra={"user_id": user_id, "reason": str(e)})
            raise InvalidAmount(str(e)) from e

        if minor <= 0:
            self._logger.warning("Top-up rejected", extra={"user_id": user_id, "reason": "non_positive"})
            raise InvalidAmount(f"Top-up amount must be positive, got {amount!r}")
        if minor > self._max_top_up:
            self._logger.warning("Top-up rejected", extra={"user_id": user_id, "reason": "above_limit"})
            raise InvalidAmount(f"Top-up amount {amount!r} exceeds limit {self._max_top_up}")

        new_balance = self._store.adjust_balance(user_id, minor)
        self._logger.info("Wallet topped up", extra={"user_id": user_id, "amount": minor})
        return WalletBalance(user_id=user_id, balance=new_balance, currency=self._currency)

    def debit(self, user_id: str, amount: int) -> WalletBalance:
        """Take `amount` paise from the wallet. Raises InsufficientWalletBalance when short."""
        if amount <= 0:
            raise InvalidAmount(f"Debit amount must be positive, got {amount}")
        new_balance = self._store.adjust_balance(user_id, -amount)
        self._logger.info("Wallet debited", extra={"user_id": user_id, "amount": amount})
        return WalletBalance(user_id=user_id, balance=new_balance, currency=self._currency)
