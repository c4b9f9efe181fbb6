"""Installment options offered at checkout"""

from decimal import ROUND_HALF_UP, Decimal
from typing import List, Mapping, Optional, Sequence, Tuple

from laburar_pricing.domain.exceptions import InvalidArgumentError
from laburar_pricing.domain.models import InstallmentOption, InstallmentTier, PromotedInstallments
from laburar_pricing.utils.amounts import Number, ensure_amount, ensure_computable

# Sample MercadoPago response: up to 12 cuotas sin interés, 18 with 12.5% interest.
# Real rates come from the card issuer at runtime.
DEFAULT_INSTALLMENT_TABLE: Tuple[InstallmentTier, ...] = (
    InstallmentTier(count=1, interest_rate_percent=0),
    InstallmentTier(count=3, interest_rate_percent=0),
    InstallmentTier(count=6, interest_rate_percent=0),
    InstallmentTier(count=12, interest_rate_percent=0),
    InstallmentTier(count=18, interest_rate_percent=12.5),
)

# (minimum price, installments) for the service card teaser, highest first
PROMOTION_THRESHOLDS: Tuple[Tuple[int, int], ...] = (
    (10_000, 12),
    (5_000, 6),
    (1_000, 3),
)


def build_installment_table(rates_by_count: Mapping[int, float]) -> Tuple[InstallmentTier, ...]:
    """
    Build an installment table from a {count: interest_rate_percent} mapping.

    Mapping order is kept as display order.

    Raises:
        InvalidArgumentError: On an empty mapping or an invalid count/rate
    """
    if not rates_by_count:
        raise InvalidArgumentError("installment table must have at least one entry")

    return tuple(
        InstallmentTier(count=count, interest_rate_percent=rate)
        for count, rate in rates_by_count.items()
    )


def compute_installment_options(
    total: Number,
    table: Sequence[InstallmentTier] = DEFAULT_INSTALLMENT_TABLE,
) -> List[InstallmentOption]:
    """
    Split a checkout total into the installment options of the table.

    Requirements:
    - One option per table row, in table order
    - Interest-free rows keep the total unchanged
    - Rows with interest scale the total by (1 + rate/100)

    Raises:
        InvalidArgumentError: If total is negative, NaN or infinite,
            or so large that an interest-bearing total overflows

    Example:
        57195.17 -> 12x 4766.26 (total 57195.17), 18x 3574.70 (total 64344.57)
    """
    total = ensure_amount(total, "total")

    options = []
    for tier in table:
        if tier.interest_rate_percent == 0:
            total_amount = total
        else:
            total_amount = total * (1 + tier.interest_rate_percent / 100)
            ensure_computable(total_amount, "total", total)

        options.append(
            InstallmentOption(
                count=tier.count,
                interest_rate_percent=tier.interest_rate_percent,
                per_installment_amount=total_amount / tier.count,
                total_amount=total_amount,
                base_total=total,
            )
        )

    return options


def promoted_installments(price: Number) -> Optional[PromotedInstallments]:
    """
    Pick the interest-free installment teaser for a service card.

    Below AR$ 1.000 no installments are advertised. Per-installment amount is
    rounded half-up to whole pesos.
    """
    price = ensure_amount(price, "price")

    for minimum, count in PROMOTION_THRESHOLDS:
        if price >= minimum:
            amount = Decimal(str(price / count)).to_integral_value(rounding=ROUND_HALF_UP)
            return PromotedInstallments(count=count, amount=int(amount))

    return None
