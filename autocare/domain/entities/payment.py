from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PaymentMethodType(str, Enum):
    card = "card"
    upi = "upi"
    netbanking = "netbanking"
    wallet = "wallet"
    cash = "cash"


@dataclass(frozen=True)
class PaymentSplit:
    wallet_amount: int
    card_amount: int

    @property
    def total(self) -> int:
        return self.wallet_amount + self.card_amount


@dataclass(frozen=True)
class WalletBalance:
    user_id: str
    balance: int  # paise
    currency: str = "INR"
