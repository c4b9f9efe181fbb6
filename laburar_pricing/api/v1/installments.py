"""GET /v1/installments - Installment options for a checkout total"""

import logging
import time
from typing import Tuple

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from laburar_pricing.api.dependencies import get_installment_table, get_request_id
from laburar_pricing.api.v1.schemas import InstallmentsResponse, to_installment_schema
from laburar_pricing.domain.exceptions import InvalidArgumentError
from laburar_pricing.domain.installments import compute_installment_options
from laburar_pricing.domain.models import InstallmentTier
from laburar_pricing.infrastructure.observability.logging import log_quote
from laburar_pricing.infrastructure.observability.metrics import record_invalid_amount, record_quote

router = APIRouter()


@router.get("/installments", response_model=InstallmentsResponse)
def get_installments(
    request: Request,
    total: float = Query(..., description="Checkout total in ARS"),
    table: Tuple[InstallmentTier, ...] = Depends(get_installment_table),
):
    """
    List installment options for a total, ascending by number of payments.

    Returns:
        One option per configured tier with per-payment and total amounts
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        options = compute_installment_options(total, table)
        response = InstallmentsResponse(
            total=total,
            options=[to_installment_schema(option) for option in options],
        )
    except InvalidArgumentError as e:
        record_invalid_amount("installments")
        logging.warning(f"Invalid total: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    duration_ms = (time.time() - start_time) * 1000
    highest_total = max((option.total_amount for option in options), default=total)
    record_quote("installments", highest_total)
    log_quote(request_id, "installments", total, highest_total, duration_ms)

    return response
