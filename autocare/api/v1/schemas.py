from decimal import Decimal

from pydantic import BaseModel, Field

from autocare.domain.entities.payment import PaymentMethodType


class ServiceSchema(BaseModel):
    service_id: str
    display_name: str | None = None
    category: str
    base_price: int
    tax_rate: Decimal
    discount_rate: Decimal
    formatted_price: str


class QuoteRequestSchema(BaseModel):
    service_id: str = Field(min_length=1)
    category: str
    promo_code: str | None = None


class QuoteResponseSchema(BaseModel):
    service_id: str
    service_name: str
    base_price: int
    discount: int
    subtotal: int
    taxes: int
    total: int
    formatted: dict[str, str] = Field(default_factory=dict)


class WalletSchema(BaseModel):
    user_id: str
    balance: int
    currency: str
    formatted_balance: str


class TopUpRequestSchema(BaseModel):
    amount: str = Field(min_length=1)  # rupees, e.g. "150.50"


class SplitRequestSchema(BaseModel):
    total: int = Field(ge=0)
    wallet_balance: int = Field(ge=0)
    enabled: bool = True
    wallet_amount: int | None = None
    wallet_input: str | None = None  # rupees typed at checkout
    method: PaymentMethodType | None = None


class SplitResponseSchema(BaseModel):
    wallet_amount: int
    card_amount: int
    max_wallet_usage: int
    label: str


class CheckoutRequestSchema(BaseModel):
    user_id: str = Field(min_length=1)
    total: int = Field(ge=0)
    wallet_amount: int | None = None
    method: PaymentMethodType = PaymentMethodType.card


class CheckoutResponseSchema(BaseModel):
    wallet_amount: int
    card_amount: int
    method: PaymentMethodType
    wallet_balance: int
    label: str


class ProviderSchema(BaseModel):
    id: str
    company_name: str
    city: str
    base_price: int
    rating: float | None = None
    distance: float | None = None
    available: bool | None = None
    services: list[str] = Field(default_factory=list)


class ProviderFiltersSchema(BaseModel):
    search: str = ""
    price_range: str = ""
    rating: str = ""
    distance: str = ""
    availability: str = ""
    sort_by: str = "relevance"


class ProviderSearchRequestSchema(BaseModel):
    providers: list[ProviderSchema] = Field(default_factory=list)
    filters: ProviderFiltersSchema = Field(default_factory=ProviderFiltersSchema)


class ProviderSearchResponseSchema(BaseModel):
    providers: list[ProviderSchema]
    active_filters: int
