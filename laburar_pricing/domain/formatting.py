"""Display formatting for Argentine peso amounts"""

from decimal import ROUND_HALF_UP, Decimal

from laburar_pricing.domain.models import InstallmentOption
from laburar_pricing.utils.amounts import Number, ensure_finite

CURRENCY_PREFIX = "AR$ "


def format_ars_amount(amount: Number) -> str:
    """
    Round to whole pesos and group thousands with '.'.

    Rounds half away from zero. No decimal part is shown.

    Example:
        57195.16975 -> "57.195"
        1234567.5   -> "1.234.568"
    """
    amount = ensure_finite(amount, "amount")

    # str() first so 0.5-style values round on their shortest decimal form
    pesos = int(Decimal(str(amount)).to_integral_value(rounding=ROUND_HALF_UP))
    return f"{pesos:,}".replace(",", ".")


def format_ars_price(amount: Number) -> str:
    return CURRENCY_PREFIX + format_ars_amount(amount)


def price_label(price: Number) -> str:
    """Card price text; services without a positive price ask to inquire"""
    price = ensure_finite(price, "price")
    if price <= 0:
        return "Consultar precio"
    return format_ars_price(price)


def installment_badge(option: InstallmentOption) -> str:
    if option.is_interest_free:
        return "Sin interés"
    return f"{option.interest_rate_percent:.2f}% TEA"
