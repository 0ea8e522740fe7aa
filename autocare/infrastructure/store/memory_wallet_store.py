from __future__ import annotations

import threading

from autocare.application.exceptions import InsufficientWalletBalance
from autocare.application.ports.wallet_store import WalletStorePort


class MemoryWalletStore(WalletStorePort):
    def __init__(self, balances: dict[str, int] | None = None) -> None:
        self._balances: dict[str, int] = dict(balances or {})
        self._lock = threading.Lock()

    def get_balance(self, user_id: str) -> int:
        with self._lock:
            return self._balances.get(user_id, 0)

    def adjust_balance(self, user_id: str, delta: int) -> int:
        with self._lock:
            current = self._balances.get(user_id, 0)
            if current + delta < 0:
                raise InsufficientWalletBalance(user_id, current, -delta)
            self._balances[user_id] = current + delta
            return current + delta
