class ServiceNotFound(LookupError):
    """Raised when a service id is not in the catalog of the requested category."""

    def __init__(self, service_id: str, category: str | None = None) -> None:
        self.service_id = service_id
        self.category = category
        where = f" in {category} catalog" if category else ""
        super().__init__(f"Service not found{where}: {service_id!r}")


class UnknownCategory(ValueError):
    """Raised when a category is not one of the supported service categories."""
    pass


class InvalidPromoRule(ValueError):
    """Raised when promo rule configuration has a bad rate or category."""
    pass


class InvalidAmount(ValueError):
    """Raised when a money amount is not a positive number or exceeds a limit."""
    pass


class InsufficientWalletBalance(RuntimeError):
    """Raised when a wallet debit exceeds the available balance."""

    def __init__(self, user_id: str, balance: int, requested: int) -> None:
        self.user_id = user_id
        self.balance = balance
        self.requested = requested
        super().__init__(f"Wallet balance {balance} is less than requested {requested} for user {user_id!r}")


class InvalidFilter(ValueError):
    """Raised when a provider filter value cannot be interpreted."""
    pass
