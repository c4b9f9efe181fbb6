"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient

from laburar_pricing.api.main import create_app
from laburar_pricing.domain.models import FeeRates


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def rates() -> FeeRates:
    """Checkout rates: 5% commission, 21% IVA, 2% IIBB, 4.99% MercadoPago"""
    return FeeRates(
        platform_fee_rate=0.05,
        vat_rate=0.21,
        gross_receipts_rate=0.02,
        processor_fee_rate=0.0499,
    )
