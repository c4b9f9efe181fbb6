"""POST /v1/checkout/quote - Everything the checkout page shows for a price"""

import logging
import time
from typing import Tuple

from fastapi import APIRouter, Depends, HTTPException, Request

from laburar_pricing.api.dependencies import get_fee_rates, get_installment_table, get_request_id
from laburar_pricing.api.v1.schemas import (
    BreakdownRequest,
    CheckoutQuoteResponse,
    to_breakdown_schema,
    to_display_lines,
    to_installment_schema,
    to_payment_method_schema,
    to_promoted_schema,
)
from laburar_pricing.config import settings
from laburar_pricing.domain.exceptions import InvalidArgumentError
from laburar_pricing.domain.formatting import format_ars_price
from laburar_pricing.domain.installments import compute_installment_options, promoted_installments
from laburar_pricing.domain.models import FeeRates, InstallmentTier
from laburar_pricing.domain.payment_methods import list_payment_methods
from laburar_pricing.domain.pricing import compute_breakdown
from laburar_pricing.infrastructure.observability.logging import log_quote
from laburar_pricing.infrastructure.observability.metrics import record_invalid_amount, record_quote

router = APIRouter()


@router.post("/checkout/quote", response_model=CheckoutQuoteResponse)
def create_checkout_quote(
    request_body: BreakdownRequest,
    request: Request,
    rates: FeeRates = Depends(get_fee_rates),
    table: Tuple[InstallmentTier, ...] = Depends(get_installment_table),
):
    """
    Build the checkout view model for a service package.

    Flow:
    1. Compute fee/tax breakdown from the package price
    2. Split the breakdown total into installment options
    3. Pick the service card teaser from the package price
    4. Attach the accepted payment methods
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        breakdown = compute_breakdown(request_body.base_price, rates)
        options = compute_installment_options(breakdown.total, table)
        promoted = (
            promoted_installments(breakdown.base_price)
            if settings.promoted_installments_enabled
            else None
        )
        response = CheckoutQuoteResponse(
            breakdown=to_breakdown_schema(breakdown),
            display=to_display_lines(breakdown, rates),
            total_formatted=format_ars_price(breakdown.total),
            installments=[to_installment_schema(option) for option in options],
            promoted=to_promoted_schema(promoted) if promoted else None,
            payment_methods=[to_payment_method_schema(method) for method in list_payment_methods()],
        )
    except InvalidArgumentError as e:
        record_invalid_amount("checkout")
        logging.warning(f"Invalid price: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    duration_ms = (time.time() - start_time) * 1000
    record_quote("checkout", breakdown.total)
    log_quote(request_id, "checkout", breakdown.base_price, breakdown.total, duration_ms)

    return response
