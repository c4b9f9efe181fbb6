"""Checkout pricing - platform commission, Argentine taxes and MercadoPago fees"""

from typing import List, Tuple

from laburar_pricing.domain.models import DEFAULT_FEE_RATES, FeeRates, PricingBreakdown
from laburar_pricing.utils.amounts import Number, ensure_amount, ensure_computable


def compute_breakdown(base_price: Number, rates: FeeRates = DEFAULT_FEE_RATES) -> PricingBreakdown:
    """
    Compute the full fee and tax breakdown for a service price.

    Order of application:
    1. Platform commission on the base price
    2. IVA on the platform commission
    3. Ingresos Brutos on the base price (flat rate, no jurisdiction lookup)
    4. MercadoPago fee on base price + platform commission
    5. IVA on the MercadoPago fee
    6. Total = base price + all of the above

    Nothing is rounded here; rounding happens when amounts are displayed.

    Raises:
        InvalidArgumentError: If base_price is negative, NaN or infinite,
            or so large that the total overflows

    Example:
        50000 -> platform 2500, IVA 525, IIBB 1000,
        MP fee 2619.975, MP IVA 550.19475, total 57195.16975
    """
    base_price = ensure_amount(base_price, "base_price")

    platform_fee = base_price * rates.platform_fee_rate
    vat = platform_fee * rates.vat_rate
    gross_receipts_tax = base_price * rates.gross_receipts_rate
    processor_fee = (base_price + platform_fee) * rates.processor_fee_rate
    processor_vat = processor_fee * rates.effective_processor_vat_rate

    total = base_price + platform_fee + vat + gross_receipts_tax + processor_fee + processor_vat
    ensure_computable(total, "base_price", base_price)

    return PricingBreakdown(
        base_price=base_price,
        platform_fee=platform_fee,
        vat=vat,
        gross_receipts_tax=gross_receipts_tax,
        processor_fee=processor_fee,
        processor_vat=processor_vat,
        total=total,
    )


def breakdown_lines(
    breakdown: PricingBreakdown,
    rates: FeeRates = DEFAULT_FEE_RATES,
) -> List[Tuple[str, float]]:
    """
    Labelled lines for the "Detalle del precio" panel.

    MercadoPago fees are not itemized, they are only reflected in the total.
    Ingresos Brutos is omitted when zero.
    """
    lines = [
        ("Precio del servicio", breakdown.base_price),
        ("Comisión LaburAR", breakdown.platform_fee),
        (f"IVA ({rates.vat_rate * 100:g}%)", breakdown.vat),
    ]
    if breakdown.gross_receipts_tax > 0:
        lines.append(("Ing. Brutos (aprox.)", breakdown.gross_receipts_tax))
    lines.append(("Total", breakdown.total))
    return lines
