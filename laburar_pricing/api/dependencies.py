"""Dependency injection for FastAPI endpoints"""

from typing import Tuple

from fastapi import Request

from laburar_pricing.config import settings
from laburar_pricing.domain.installments import build_installment_table
from laburar_pricing.domain.models import FeeRates, InstallmentTier


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_fee_rates() -> FeeRates:
    """Provide fee rates from configuration"""
    return FeeRates(
        platform_fee_rate=settings.platform_fee_rate,
        vat_rate=settings.vat_rate,
        gross_receipts_rate=settings.gross_receipts_rate,
        processor_fee_rate=settings.processor_fee_rate,
        processor_vat_rate=settings.processor_vat_rate,
    )


def get_installment_table() -> Tuple[InstallmentTier, ...]:
    """Provide installment table from configuration"""
    return build_installment_table(settings.installment_table)
