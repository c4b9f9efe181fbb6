"""Prometheus metrics for quote volume, rejected input and request latency"""

from prometheus_client import Counter, Histogram

# Quote metrics
quote_counter = Counter(
    "laburar_pricing_quotes_total",
    "Pricing computations served",
    ["operation"],  # breakdown | installments | checkout
)

invalid_amount_counter = Counter(
    "laburar_pricing_invalid_amount_total",
    "Requests rejected for a negative or non-finite amount",
    ["operation"],
)

quote_total_histogram = Histogram(
    "laburar_pricing_quote_total_ars",
    "Computed totals in ARS",
    buckets=[1_000, 5_000, 10_000, 50_000, 100_000, 500_000, 1_000_000, 5_000_000],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_quote(operation: str, total: float) -> None:
    """Record a served quote and the size of its total"""
    quote_counter.labels(operation=operation).inc()
    quote_total_histogram.observe(total)


def record_invalid_amount(operation: str) -> None:
    invalid_amount_counter.labels(operation=operation).inc()
