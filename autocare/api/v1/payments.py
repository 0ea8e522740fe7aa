from fastapi import APIRouter, Depends, HTTPException

from autocare.api.v1.schemas import (
    CheckoutRequestSchema, CheckoutResponseSchema,
    SplitRequestSchema, SplitResponseSchema,
    TopUpRequestSchema, WalletSchema,
)
from autocare.application.exceptions import InsufficientWalletBalance, InvalidAmount
from autocare.application.use_cases.split_payment import (
    SplitPaymentUseCase,
    max_wallet_usage,
    pay_button_label,
)
from autocare.application.use_cases.wallet import WalletUseCase
from autocare.application.utils.currency import format_price
from autocare.domain.entities.payment import PaymentMethodType, WalletBalance
from autocare.wiring.dependencies import get_split_payment_use_case, get_wallet_use_case

router = APIRouter()


def _wallet_schema(wallet: WalletBalance) -> WalletSchema:
    return WalletSchema(
        user_id=wallet.user_id,
        balance=wallet.balance,
        currency=wallet.currency,
        formatted_balance=format_price(wallet.balance),
    )


@router.get("/wallets/{user_id}", response_model=WalletSchema)
def get_wallet(
    user_id: str,
    uc: WalletUseCase = Depends(get_wallet_use_case),
):
    return _wallet_schema(uc.get_balance(user_id))


@router.post("/wallets/{user_id}/top-up", response_model=WalletSchema)
def top_up(
    user_id: str,
    req: TopUpRequestSchema,
    uc: WalletUseCase = Depends(get_wallet_use_case),
):
    try:
        wallet = uc.top_up(user_id, req.amount)
    except InvalidAmount as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _wallet_schema(wallet)


@router.post("/payments/split", response_model=SplitResponseSchema)
def split(
    req: SplitRequestSchema,
    uc: SplitPaymentUseCase = Depends(get_split_payment_use_case),
):
    try:
        if req.wallet_input is not None:
            result = uc.split_from_major_input(req.total, req.wallet_balance, req.wallet_input)
        else:
            result = uc.split(req.total, req.wallet_balance, req.enabled, req.wallet_amount)
    except InvalidAmount as e:
        raise HTTPException(status_code=400, detail=str(e))

    return SplitResponseSchema(
        wallet_amount=result.wallet_amount,
        card_amount=result.card_amount,
        max_wallet_usage=max_wallet_usage(req.total, req.wallet_balance),
        label=pay_button_label(req.total, result.wallet_amount, req.method),
    )


@router.post("/payments/checkout", response_model=CheckoutResponseSchema)
def checkout(
    req: CheckoutRequestSchema,
    uc: SplitPaymentUseCase = Depends(get_split_payment_use_case),
):
    try:
        result = uc.checkout(req.user_id, req.total, req.wallet_amount, req.method)
    except InvalidAmount as e:
        raise HTTPException(status_code=400, detail=str(e))
    except InsufficientWalletBalance as e:
        raise HTTPException(status_code=409, detail=str(e))

    method = req.method
    if result.split.card_amount == 0 and result.split.wallet_amount > 0:
        method = PaymentMethodType.wallet

    return CheckoutResponseSchema(
        wallet_amount=result.split.wallet_amount,
        card_amount=result.split.card_amount,
        method=method,
        wallet_balance=result.wallet_balance,
        label=result.label,
    )
