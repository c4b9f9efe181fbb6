"""Unit tests for checkout fee and tax breakdown"""

import math

import pytest

from laburar_pricing.domain.exceptions import InvalidArgumentError
from laburar_pricing.domain.models import DEFAULT_FEE_RATES, FeeRates
from laburar_pricing.domain.pricing import breakdown_lines, compute_breakdown


def test_compute_breakdown_reference_price(rates: FeeRates):
    """Test AR$ 50.000 package against hand-computed components"""
    breakdown = compute_breakdown(50000, rates)

    assert breakdown.base_price == 50000
    assert breakdown.platform_fee == pytest.approx(2500)
    assert breakdown.vat == pytest.approx(525)
    assert breakdown.gross_receipts_tax == pytest.approx(1000)
    assert breakdown.processor_fee == pytest.approx(2619.975)  # (50000 + 2500) * 4.99%
    assert breakdown.processor_vat == pytest.approx(550.19475)  # 21% of MP fee
    assert breakdown.total == pytest.approx(57195.16975, abs=0.01)


def test_compute_breakdown_default_rates():
    """Test default rates match checkout configuration"""
    assert compute_breakdown(50000).total == pytest.approx(57195.16975, abs=0.01)


RATE_SETS = [
    DEFAULT_FEE_RATES,
    FeeRates(platform_fee_rate=0.15, vat_rate=0.105, gross_receipts_rate=0.035, processor_fee_rate=0.0629),
    FeeRates(platform_fee_rate=0.05, vat_rate=0.21, gross_receipts_rate=0, processor_fee_rate=0.0499, processor_vat_rate=0.27),
    FeeRates(platform_fee_rate=0, vat_rate=0, gross_receipts_rate=0, processor_fee_rate=0),
]


@pytest.mark.parametrize("rates", RATE_SETS)
@pytest.mark.parametrize("base_price", [0, 1, 999.99, 50000, 1_234_567.89, 1e12])
def test_compute_breakdown_total_is_sum_of_components(base_price: float, rates: FeeRates):
    """Test total equals base price plus every fee and tax for any rate set"""
    b = compute_breakdown(base_price, rates)

    assert b.total == (
        b.base_price + b.platform_fee + b.vat + b.gross_receipts_tax + b.processor_fee + b.processor_vat
    )


def test_compute_breakdown_zero_price(rates: FeeRates):
    """Test free service yields an all-zero breakdown"""
    b = compute_breakdown(0, rates)

    assert b.base_price == b.platform_fee == b.vat == b.gross_receipts_tax == 0
    assert b.processor_fee == b.processor_vat == b.total == 0


def test_compute_breakdown_monotonic(rates: FeeRates):
    """Test every component grows with the base price"""
    prices = [0, 10, 1000, 50000, 50000.01, 2_000_000]
    fields = ["base_price", "platform_fee", "vat", "gross_receipts_tax", "processor_fee", "processor_vat", "total"]

    for lower, higher in zip(prices, prices[1:]):
        low = compute_breakdown(lower, rates)
        high = compute_breakdown(higher, rates)
        for name in fields:
            assert getattr(low, name) <= getattr(high, name), name


def test_compute_breakdown_is_unrounded(rates: FeeRates):
    """Test centavos and below are kept for the caller to round"""
    breakdown = compute_breakdown(50000, rates)
    assert breakdown.processor_vat != round(breakdown.processor_vat)


def test_compute_breakdown_separate_processor_vat():
    """Test processor VAT override applies only to the MercadoPago fee"""
    rates = FeeRates(
        platform_fee_rate=0.05,
        vat_rate=0.21,
        gross_receipts_rate=0.02,
        processor_fee_rate=0.0499,
        processor_vat_rate=0,
    )
    breakdown = compute_breakdown(50000, rates)

    assert breakdown.vat == pytest.approx(525)
    assert breakdown.processor_vat == 0
    assert breakdown.total == pytest.approx(50000 + 2500 + 525 + 1000 + 2619.975)


def test_compute_breakdown_accepts_numeric_strings(rates: FeeRates):
    """Test catalog prices stored as strings are accepted"""
    assert compute_breakdown("50000", rates).total == compute_breakdown(50000, rates).total


@pytest.mark.parametrize("base_price", [-1, -0.01, math.nan, math.inf, -math.inf, "abc", None, True])
def test_compute_breakdown_rejects_invalid_price(base_price, rates: FeeRates):
    """Test negative, non-finite and non-numeric prices raise"""
    with pytest.raises(InvalidArgumentError):
        compute_breakdown(base_price, rates)


def test_invalid_argument_is_value_error():
    """Test callers catching ValueError also catch invalid prices"""
    with pytest.raises(ValueError):
        compute_breakdown(-1)


def test_breakdown_lines_labels(rates: FeeRates):
    """Test price detail panel rows and order"""
    lines = breakdown_lines(compute_breakdown(50000, rates), rates)

    assert [label for label, _ in lines] == [
        "Precio del servicio",
        "Comisión LaburAR",
        "IVA (21%)",
        "Ing. Brutos (aprox.)",
        "Total",
    ]
    assert lines[-1][1] == pytest.approx(57195.16975)


def test_breakdown_lines_omit_zero_gross_receipts():
    """Test Ingresos Brutos row disappears when its rate is zero"""
    rates = FeeRates(platform_fee_rate=0.1, vat_rate=0.105, gross_receipts_rate=0, processor_fee_rate=0.0499)
    lines = breakdown_lines(compute_breakdown(1000, rates), rates)

    labels = [label for label, _ in lines]
    assert "Ing. Brutos (aprox.)" not in labels
    assert "IVA (10.5%)" in labels


def test_breakdown_lines_default_rates():
    lines = breakdown_lines(compute_breakdown(50000))
    assert lines[2][0] == f"IVA ({DEFAULT_FEE_RATES.vat_rate * 100:g}%)"


def test_compute_breakdown_rejects_overflowing_price(rates: FeeRates):
    """Test a finite price whose total overflows is rejected, never returned as inf"""
    with pytest.raises(InvalidArgumentError, match="too large"):
        compute_breakdown(1.7e308, rates)


def test_compute_breakdown_largest_representable_total(rates: FeeRates):
    """Test very large prices still produce a finite breakdown"""
    breakdown = compute_breakdown(1e300, rates)
    assert math.isfinite(breakdown.total)
