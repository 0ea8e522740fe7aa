from functools import lru_cache
import logging

from autocare.core.config import settings
from autocare.application.ports.promo_rules import PromoRulePort
from autocare.application.ports.service_catalog import ServiceCatalogPort
from autocare.application.ports.wallet_store import WalletStorePort
from autocare.application.use_cases.calculate_price import PricingEngine
from autocare.application.use_cases.split_payment import SplitPaymentUseCase
from autocare.application.use_cases.wallet import WalletUseCase
from autocare.infrastructure.catalog.service_catalog_store import ServiceCatalogStore
from autocare.infrastructure.promo.promo_rules_store import JsonPromoRuleStore, StaticPromoRuleStore
from autocare.infrastructure.store.memory_wallet_store import MemoryWalletStore


_wallet_store: MemoryWalletStore | None = None


@lru_cache
def get_service_catalog() -> ServiceCatalogPort:
    return ServiceCatalogStore()


@lru_cache
def get_promo_rules() -> PromoRulePort:
    if settings.PROMO_RULES_PATH:
        logger = logging.getLogger(__name__)
        logger.info("Using JsonPromoRuleStore", extra={"reason": settings.PROMO_RULES_PATH})
        return JsonPromoRuleStore(settings.PROMO_RULES_PATH)
    return StaticPromoRuleStore()


def get_wallet_store() -> WalletStorePort:
    global _wallet_store
    if _wallet_store is None:
        _wallet_store = MemoryWalletStore()
    return _wallet_store


def get_pricing_engine() -> PricingEngine:
    return PricingEngine(catalog=get_service_catalog(), promo_rules=get_promo_rules())


def get_wallet_use_case() -> WalletUseCase:
    return WalletUseCase(
        store=get_wallet_store(),
        max_top_up=settings.WALLET_MAX_TOP_UP,
        currency=settings.CURRENCY_CODE,
    )


def get_split_payment_use_case() -> SplitPaymentUseCase:
    return SplitPaymentUseCase(wallet=get_wallet_use_case(), enabled=settings.SPLIT_PAYMENT_ENABLED)
