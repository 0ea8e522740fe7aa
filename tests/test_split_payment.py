"""
Tests for wallet/card split payment.
"""

from __future__ import annotations

import pytest

from autocare.application.exceptions import InsufficientWalletBalance, InvalidAmount
from autocare.application.use_cases.split_payment import SplitPaymentUseCase, max_wallet_usage, pay_button_label
from autocare.application.use_cases.wallet import WalletUseCase
from autocare.domain.entities.payment import PaymentMethodType, PaymentSplit
from autocare.infrastructure.store.memory_wallet_store import MemoryWalletStore


def _use_case(balances: dict[str, int] | None = None, enabled: bool = True) -> SplitPaymentUseCase:
    wallet = WalletUseCase(store=MemoryWalletStore(balances), max_top_up=1_000_000)
    return SplitPaymentUseCase(wallet=wallet, enabled=enabled)


def test_max_wallet_usage():
    assert max_wallet_usage(23482, 10000) == 10000
    assert max_wallet_usage(23482, 50000) == 23482
    assert max_wallet_usage(23482, 0) == 0


def test_split_disabled_charges_everything_to_card():
    assert _use_case().split(23482, 10000, enabled=False) == PaymentSplit(wallet_amount=0, card_amount=23482)


def test_split_defaults_to_max_wallet_usage():
    uc = _use_case()

    assert uc.split(23482, 10000) == PaymentSplit(wallet_amount=10000, card_amount=13482)
    assert uc.split(23482, 50000) == PaymentSplit(wallet_amount=23482, card_amount=0)


def test_split_clamps_requested_wallet_amount():
    uc = _use_case()

    assert uc.split(23482, 10000, wallet_amount=5000).wallet_amount == 5000
    assert uc.split(23482, 10000, wallet_amount=20000).wallet_amount == 10000
    assert uc.split(23482, 10000, wallet_amount=-100).wallet_amount == 0


def test_split_totals_always_add_up():
    uc = _use_case()
    for requested in (None, 0, 1, 9999, 10000, 30000):
        split = uc.split(23482, 10000, wallet_amount=requested)
        assert split.total == 23482


def test_split_switched_off_in_settings():
    assert _use_case(enabled=False).split(23482, 10000).wallet_amount == 0


def test_split_rejects_negative_total():
    with pytest.raises(InvalidAmount):
        _use_case().split(-1, 100)


def test_split_from_major_input():
    uc = _use_case()

    assert uc.split_from_major_input(23482, 10000, "50") == PaymentSplit(wallet_amount=5000, card_amount=18482)
    assert uc.split_from_major_input(23482, 10000, "500").wallet_amount == 10000
    assert uc.split_from_major_input(23482, 10000, "abc").wallet_amount == 0
    assert uc.split_from_major_input(23482, 10000, "").wallet_amount == 0


def test_pay_button_label():
    assert pay_button_label(23482, 0) == "Pay ₹234"
    assert pay_button_label(23482, 5000) == "Pay ₹184 + Use Wallet"
    assert pay_button_label(23482, 23482) == "Pay from Wallet"


def test_checkout_debits_wallet_share():
    uc = _use_case({"user-1": 10000})

    result = uc.checkout("user-1", 23482)

    assert result.split == PaymentSplit(wallet_amount=10000, card_amount=13482)
    assert result.wallet_balance == 0
    assert result.label == "Pay ₹134 + Use Wallet"


def test_checkout_with_empty_wallet_leaves_balance_alone():
    uc = _use_case()

    result = uc.checkout("user-2", 23482)

    assert result.split.wallet_amount == 0
    assert result.wallet_balance == 0
    assert result.label == "Pay ₹234"


class DrainingWalletStore(MemoryWalletStore):
    """Reports the stored balance but lets another payment spend it first on each debit."""

    def __init__(self, balances: dict[str, int], drain_times: int) -> None:
        super().__init__(balances)
        self._drain_times = drain_times

    def adjust_balance(self, user_id: str, delta: int) -> int:
        if delta < 0 and self._drain_times > 0:
            self._drain_times -= 1
            super().adjust_balance(user_id, -1000)
        return super().adjust_balance(user_id, delta)


def _use_case_with_store(store: MemoryWalletStore) -> SplitPaymentUseCase:
    return SplitPaymentUseCase(wallet=WalletUseCase(store=store, max_top_up=1_000_000))


def test_checkout_splits_again_when_wallet_drained_concurrently():
    store = DrainingWalletStore({"user-1": 10000}, drain_times=1)

    result = _use_case_with_store(store).checkout("user-1", 23482)

    assert result.split == PaymentSplit(wallet_amount=9000, card_amount=14482)
    assert result.wallet_balance == 0


def test_checkout_gives_up_when_wallet_keeps_draining():
    store = DrainingWalletStore({"user-1": 10000}, drain_times=10)

    with pytest.raises(InsufficientWalletBalance) as exc_info:
        _use_case_with_store(store).checkout("user-1", 23482)

    assert exc_info.value.user_id == "user-1"
    assert store.get_balance("user-1") == 7000


def test_split_from_huge_major_input_is_clamped():
    uc = _use_case()

    assert uc.split_from_major_input(23482, 10000, "1e999999999").wallet_amount == 10000
    assert uc.split_from_major_input(23482, 10000, "1e5000").wallet_amount == 10000
    assert uc.split_from_major_input(23482, 10000, "-1e999999999").wallet_amount == 0


def test_cash_checkout_label():
    assert pay_button_label(23482, 0, PaymentMethodType.cash) == "Confirm Booking"
    assert pay_button_label(23482, 5000, PaymentMethodType.card) == "Pay ₹184 + Use Wallet"

    result = _use_case().checkout("user-3", 23482, method=PaymentMethodType.cash)
    assert result.label == "Confirm Booking"
