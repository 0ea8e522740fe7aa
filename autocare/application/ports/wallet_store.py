from abc import ABC, abstractmethod


class WalletStorePort(ABC):
    @abstractmethod
    def get_balance(self, user_id: str) -> int:
        """Balance in minor units. Unknown users have a zero balance."""
        raise NotImplementedError

    @abstractmethod
    def adjust_balance(self, user_id: str, delta: int) -> int:
        """
        Add `delta` (may be negative) to the balance atomically.
        Returns the new balance. Raises InsufficientWalletBalance if it would go below zero.
        """
        raise NotImplementedError
