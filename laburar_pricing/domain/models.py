"""Domain models - pure Python dataclasses representing pricing entities"""

from dataclasses import dataclass, field
from typing import Optional

from laburar_pricing.domain.exceptions import InvalidArgumentError
from laburar_pricing.utils.amounts import ensure_amount


@dataclass(frozen=True)
class FeeRates:
    """Fee and tax rates applied at checkout, as fractions (0.21 == 21%)"""

    platform_fee_rate: float
    vat_rate: float
    gross_receipts_rate: float
    processor_fee_rate: float
    processor_vat_rate: Optional[float] = None  # None: same as vat_rate

    def __post_init__(self) -> None:
        for name in ("platform_fee_rate", "vat_rate", "gross_receipts_rate", "processor_fee_rate"):
            object.__setattr__(self, name, ensure_amount(getattr(self, name), name))
        if self.processor_vat_rate is not None:
            object.__setattr__(
                self,
                "processor_vat_rate",
                ensure_amount(self.processor_vat_rate, "processor_vat_rate"),
            )

    @property
    def effective_processor_vat_rate(self) -> float:
        """VAT charged on the processor fee"""
        if self.processor_vat_rate is None:
            return self.vat_rate
        return self.processor_vat_rate


# LaburAR commission 5%, IVA 21%, Ingresos Brutos 2% (flat average), MercadoPago 4.99%
DEFAULT_FEE_RATES = FeeRates(
    platform_fee_rate=0.05,
    vat_rate=0.21,
    gross_receipts_rate=0.02,
    processor_fee_rate=0.0499,
)


@dataclass
class PricingBreakdown:
    """Full fee/tax breakdown for a base price, unrounded"""

    base_price: float
    platform_fee: float
    vat: float
    gross_receipts_tax: float
    processor_fee: float
    processor_vat: float
    total: float


@dataclass(frozen=True)
class InstallmentTier:
    """One row of the installment table: number of payments and its interest"""

    count: int
    interest_rate_percent: float = 0.0

    def __post_init__(self) -> None:
        if isinstance(self.count, bool) or not isinstance(self.count, int) or self.count <= 0:
            raise InvalidArgumentError(f"count must be a positive integer, got {self.count!r}")
        object.__setattr__(
            self,
            "interest_rate_percent",
            ensure_amount(self.interest_rate_percent, "interest_rate_percent"),
        )


@dataclass
class InstallmentOption:
    """Single installment choice offered at checkout"""

    count: int
    interest_rate_percent: float
    per_installment_amount: float
    total_amount: float
    base_total: float = field(default=0.0, repr=False)

    @property
    def is_interest_free(self) -> bool:
        return self.interest_rate_percent == 0

    @property
    def interest_amount(self) -> float:
        """Extra paid over the base total because of interest"""
        if self.is_interest_free:
            return 0.0
        return self.total_amount - self.base_total


@dataclass
class PromotedInstallments:
    """Interest-free teaser shown on service cards ("3 cuotas sin interés")"""

    count: int
    amount: int


@dataclass(frozen=True)
class PaymentMethod:
    """Payment method accepted through MercadoPago Argentina"""

    id: str
    label: str
    supports_installments: bool = False
