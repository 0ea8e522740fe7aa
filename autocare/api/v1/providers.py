from fastapi import APIRouter, HTTPException

from autocare.api.v1.schemas import (
    ProviderSchema,
    ProviderSearchRequestSchema,
    ProviderSearchResponseSchema,
)
from autocare.application.exceptions import InvalidFilter
from autocare.application.use_cases.provider_filters import active_filters_count, filter_and_sort_providers
from autocare.domain.entities.provider import Provider, ProviderFilters

router = APIRouter()


@router.post("/providers/search", response_model=ProviderSearchResponseSchema)
def search_providers(req: ProviderSearchRequestSchema):
    providers = [
        Provider(**p.model_dump(exclude={"services"}), services=tuple(p.services))
        for p in req.providers
    ]
    filters = ProviderFilters(**req.filters.model_dump())
    try:
        matched = filter_and_sort_providers(providers, filters)
    except InvalidFilter as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ProviderSearchResponseSchema(
        providers=[
            ProviderSchema(
                id=p.id,
                company_name=p.company_name,
                city=p.city,
                base_price=p.base_price,
                rating=p.rating,
                distance=p.distance,
                available=p.available,
                services=list(p.services),
            )
            for p in matched
        ],
        active_filters=active_filters_count(filters),
    )
