"""Pydantic schemas for API request/response validation"""

from typing import List, Optional

from pydantic import BaseModel, Field

from laburar_pricing.domain.formatting import format_ars_price, installment_badge
from laburar_pricing.domain.models import (
    FeeRates,
    InstallmentOption,
    PaymentMethod,
    PricingBreakdown,
    PromotedInstallments,
)
from laburar_pricing.domain.pricing import breakdown_lines


class BreakdownRequest(BaseModel):
    """Request body for POST /v1/pricing/breakdown and /v1/checkout/quote"""

    base_price: float = Field(..., description="Service price in ARS before fees and taxes")


class BreakdownSchema(BaseModel):
    """Unrounded fee and tax components"""

    base_price: float
    platform_fee: float
    vat: float
    gross_receipts_tax: float
    processor_fee: float
    processor_vat: float
    total: float


class DisplayLine(BaseModel):
    """One row of the price detail panel"""

    label: str
    amount: float
    formatted: str


class BreakdownResponse(BaseModel):
    """Response for POST /v1/pricing/breakdown"""

    breakdown: BreakdownSchema
    display: List[DisplayLine]
    total_formatted: str


class InstallmentOptionSchema(BaseModel):
    """Single installment option"""

    count: int
    interest_rate_percent: float
    per_installment_amount: float
    total_amount: float
    is_interest_free: bool
    interest_amount: float
    badge: str
    per_installment_formatted: str
    total_formatted: str


class InstallmentsResponse(BaseModel):
    """Response for GET /v1/installments"""

    total: float
    options: List[InstallmentOptionSchema]


class PromotedInstallmentsSchema(BaseModel):
    """Interest-free teaser for service cards"""

    count: int
    amount: int
    label: str


class PaymentMethodSchema(BaseModel):
    id: str
    label: str
    supports_installments: bool


class PaymentMethodsResponse(BaseModel):
    """Response for GET /v1/payment-methods"""

    payment_methods: List[PaymentMethodSchema]


class CheckoutQuoteResponse(BaseModel):
    """Response for POST /v1/checkout/quote"""

    breakdown: BreakdownSchema
    display: List[DisplayLine]
    total_formatted: str
    installments: List[InstallmentOptionSchema]
    promoted: Optional[PromotedInstallmentsSchema] = None
    payment_methods: List[PaymentMethodSchema]


def to_breakdown_schema(breakdown: PricingBreakdown) -> BreakdownSchema:
    return BreakdownSchema(
        base_price=breakdown.base_price,
        platform_fee=breakdown.platform_fee,
        vat=breakdown.vat,
        gross_receipts_tax=breakdown.gross_receipts_tax,
        processor_fee=breakdown.processor_fee,
        processor_vat=breakdown.processor_vat,
        total=breakdown.total,
    )


def to_display_lines(breakdown: PricingBreakdown, rates: FeeRates) -> List[DisplayLine]:
    return [
        DisplayLine(label=label, amount=amount, formatted=format_ars_price(amount))
        for label, amount in breakdown_lines(breakdown, rates)
    ]


def to_installment_schema(option: InstallmentOption) -> InstallmentOptionSchema:
    return InstallmentOptionSchema(
        count=option.count,
        interest_rate_percent=option.interest_rate_percent,
        per_installment_amount=option.per_installment_amount,
        total_amount=option.total_amount,
        is_interest_free=option.is_interest_free,
        interest_amount=option.interest_amount,
        badge=installment_badge(option),
        per_installment_formatted=format_ars_price(option.per_installment_amount),
        total_formatted=format_ars_price(option.total_amount),
    )


def to_promoted_schema(promoted: PromotedInstallments) -> PromotedInstallmentsSchema:
    return PromotedInstallmentsSchema(
        count=promoted.count,
        amount=promoted.amount,
        label=f"{promoted.count} cuotas sin interés",
    )


def to_payment_method_schema(method: PaymentMethod) -> PaymentMethodSchema:
    return PaymentMethodSchema(
        id=method.id,
        label=method.label,
        supports_installments=method.supports_installments,
    )
