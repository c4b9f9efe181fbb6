"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from laburar_pricing import __version__
from laburar_pricing.api.middleware import MetricsMiddleware, RequestIDMiddleware
from laburar_pricing.api.v1 import checkout, installments, payment_methods, pricing
from laburar_pricing.config import settings
from laburar_pricing.infrastructure.observability.logging import setup_logging

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="LaburAR Pricing",
        description="Checkout fee breakdowns and installment plans in ARS",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(pricing.router, prefix="/v1", tags=["pricing"])
    app.include_router(installments.router, prefix="/v1", tags=["installments"])
    app.include_router(checkout.router, prefix="/v1", tags=["checkout"])
    app.include_router(payment_methods.router, prefix="/v1", tags=["payment-methods"])

    return app


app = create_app()
