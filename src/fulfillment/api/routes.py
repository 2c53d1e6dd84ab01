"""FastAPI routes for shipping quotes and locality autocomplete."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from fulfillment.api.schemas import ShippingQuoteRequest, ShippingQuoteResponse, SuburbSuggestionSchema
from fulfillment.quotes.models import QuoteOptions
from fulfillment.quotes.service import get_quotes_for_cart, search_suburbs

shipping_router = APIRouter(prefix="/shipping", tags=["shipping"])

_ERROR_STATUS = {
    "VALIDATION_ERROR": 400,
    "INVALID_API_KEY": 502,
    "RATE_LIMIT_EXCEEDED": 429,
}


@shipping_router.post("/quote", response_model=ShippingQuoteResponse)
async def quote_shipping(body: ShippingQuoteRequest):
    """Quote a standalone address/items pair.

    The storefront's quick estimator prefers fallback rates to an error, so
    carrier failures degrade to the rate table here.
    """
    result = get_quotes_for_cart(
        body.delivery_address.to_address(),
        [item.to_item() for item in body.items],
        body.total_value,
        QuoteOptions(fallback_on_error=True),
    )
    response = ShippingQuoteResponse.from_result(result)
    if result.success:
        return response
    return JSONResponse(status_code=_ERROR_STATUS.get(result.error_code, 502), content=response.model_dump())


@shipping_router.get("/suburbs", response_model=list[SuburbSuggestionSchema])
async def suburb_search(q: str = "", state: str | None = None) -> list[SuburbSuggestionSchema]:
    return [SuburbSuggestionSchema.from_suggestion(s) for s in search_suburbs(q, state)]
