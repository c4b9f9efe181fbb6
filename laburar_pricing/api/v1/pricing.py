"""POST /v1/pricing/breakdown - Fee and tax breakdown for a service price"""

import logging
import time

from fastapi import APIRouter, Depends, HTTPException, Request

from laburar_pricing.api.dependencies import get_fee_rates, get_request_id
from laburar_pricing.api.v1.schemas import (
    BreakdownRequest,
    BreakdownResponse,
    to_breakdown_schema,
    to_display_lines,
)
from laburar_pricing.domain.exceptions import InvalidArgumentError
from laburar_pricing.domain.formatting import format_ars_price
from laburar_pricing.domain.models import FeeRates
from laburar_pricing.domain.pricing import compute_breakdown
from laburar_pricing.infrastructure.observability.logging import log_quote
from laburar_pricing.infrastructure.observability.metrics import record_invalid_amount, record_quote

router = APIRouter()


@router.post("/pricing/breakdown", response_model=BreakdownResponse)
def create_breakdown(
    request_body: BreakdownRequest,
    request: Request,
    rates: FeeRates = Depends(get_fee_rates),
):
    """
    Compute platform commission, taxes and MercadoPago fees for a price.

    Amounts are returned unrounded; `display` carries the rounded AR$ text.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        breakdown = compute_breakdown(request_body.base_price, rates)
        response = BreakdownResponse(
            breakdown=to_breakdown_schema(breakdown),
            display=to_display_lines(breakdown, rates),
            total_formatted=format_ars_price(breakdown.total),
        )
    except InvalidArgumentError as e:
        record_invalid_amount("breakdown")
        logging.warning(f"Invalid price: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    duration_ms = (time.time() - start_time) * 1000
    record_quote("breakdown", breakdown.total)
    log_quote(request_id, "breakdown", breakdown.base_price, breakdown.total, duration_ms)

    return response
