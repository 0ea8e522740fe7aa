from __future__ import annotations

import logging
from dataclasses import dataclass

from autocare.application.exceptions import InsufficientWalletBalance, InvalidAmount
from autocare.application.use_cases.wallet import WalletUseCase
from autocare.application.utils.currency import format_price, to_minor_units
from autocare.domain.entities.payment import PaymentMethodType, PaymentSplit

CHECKOUT_ATTEMPTS = 3


def max_wallet_usage(total: int, wallet_balance: int) -> int:
    return max(0, min(wallet_balance, total))


def pay_button_label(amount: int, wallet_amount: int, method: PaymentMethodType | None = None) -> str:
    if method == PaymentMethodType.cash:
        return "Confirm Booking"
    if wallet_amount >= amount:
        return "Pay from Wallet"
    if wallet_amount > 0:
        return f"Pay {format_price(amount - wallet_amount)} + Use Wallet"
    return f"Pay {format_price(amount)}"


@dataclass(frozen=True)
class CheckoutResult:
    split: PaymentSplit
    wallet_balance: int
    label: str


class SplitPaymentUseCase:
    """Splits a payable total between the wallet and a second payment method."""

    def __init__(self, wallet: WalletUseCase, enabled: bool = True) -> None:
        self._wallet = wallet
        self._enabled = enabled
        self._logger = logging.getLogger(__name__)

    def split(
        self,
        total: int,
        wallet_balance: int,
        enabled: bool = True,
        wallet_amount: int | None = None,
    ) -> PaymentSplit:
        if total < 0:
            raise InvalidAmount(f"Total must not be negative, got {total}")
        if not (enabled and self._enabled):
            return PaymentSplit(wallet_amount=0, card_amount=total)

        limit = max_wallet_usage(total, wallet_balance)
        if wallet_amount is None:
            wallet_share = limit
        else:
            wallet_share = min(max(wallet_amount, 0), limit)
        return PaymentSplit(wallet_amount=wallet_share, card_amount=total - wallet_share)

    def split_from_major_input(self, total: int, wallet_balance: int, text: str) -> PaymentSplit:
        """Split using the rupee amount typed at checkout; unreadable input counts as zero."""
        try:
            ceiling = max_wallet_usage(total, wallet_balance)
            requested = to_minor_units(text, ceiling=ceiling) if text and text.strip() else 0
        except ValueError:
            requested = 0
        return self.split(total, wallet_balance, enabled=True, wallet_amount=requested)

    def checkout(
        self,
        user_id: str,
        total: int,
        wallet_amount: int | None = None,
        method: PaymentMethodType | None = None,
    ) -> CheckoutResult:
        """
        Debit the wallet share of `total`. A concurrent debit that empties the
        wallet between the balance read and the debit triggers a fresh split.
        """
        for attempt in range(1, CHECKOUT_ATTEMPTS + 1):
            balance = self._wallet.get_balance(user_id).balance
            split = self.split(total, balance, enabled=True, wallet_amount=wallet_amount)
            if split.wallet_amount == 0:
                break
            try:
                balance = self._wallet.debit(user_id, split.wallet_amount).balance
                break
            except InsufficientWalletBalance:
                if attempt == CHECKOUT_ATTEMPTS:
                    raise
                self._logger.warning(
                    "Wallet changed during checkout, splitting again",
                    extra={"user_id": user_id, "amount": total, "reason": f"attempt={attempt}"},
                )

        self._logger.info(
            "Checkout split",
            extra={"user_id": user_id, "amount": total, "reason": f"wallet={split.wallet_amount}"},
        )
        return CheckoutResult(
            split=split,
            wallet_balance=balance,
            label=pay_button_label(total, split.wallet_amount, method),
        )
