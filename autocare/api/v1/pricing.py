from fastapi import APIRouter, Depends, HTTPException

from autocare.api.v1.schemas import QuoteRequestSchema, QuoteResponseSchema, ServiceSchema
from autocare.application.exceptions import ServiceNotFound, UnknownCategory
from autocare.application.use_cases.calculate_price import PricingEngine
from autocare.application.utils.currency import format_price
from autocare.wiring.dependencies import get_pricing_engine

router = APIRouter()


@router.get("/services/{category}", response_model=list[ServiceSchema])
def list_services(
    category: str,
    engine: PricingEngine = Depends(get_pricing_engine),
):
    try:
        entries = engine.list_services(category)
    except UnknownCategory as e:
        raise HTTPException(status_code=422, detail=str(e))

    return [
        ServiceSchema(
            service_id=entry.service_id,
            display_name=entry.display_name,
            category=entry.category.value,
            base_price=entry.base_price,
            tax_rate=entry.tax_rate,
            discount_rate=entry.discount_rate,
            formatted_price=format_price(entry.base_price),
        )
        for entry in entries
    ]


@router.post("/pricing/quote", response_model=QuoteResponseSchema)
def quote(
    req: QuoteRequestSchema,
    engine: PricingEngine = Depends(get_pricing_engine),
):
    try:
        breakdown = engine.calculate_service_price(req.service_id, req.category, req.promo_code)
    except UnknownCategory as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ServiceNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))

    return QuoteResponseSchema(
        service_id=breakdown.service_id,
        service_name=breakdown.service_name,
        base_price=breakdown.base_price,
        discount=breakdown.discount,
        subtotal=breakdown.subtotal,
        taxes=breakdown.taxes,
        total=breakdown.total,
        formatted={
            "base_price": format_price(breakdown.base_price),
            "discount": format_price(breakdown.discount),
            "subtotal": format_price(breakdown.subtotal),
            "taxes": format_price(breakdown.taxes),
            "total": format_price(breakdown.total),
        },
    )
