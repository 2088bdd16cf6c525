"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from claimcraft_engine.api.middleware import RequestIDMiddleware, MetricsMiddleware
from claimcraft_engine.api.v1 import claims, deadlines, fees
from claimcraft_engine.infrastructure.observability.logging import setup_logging
from claimcraft_engine.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="ClaimCraft Engine",
        description="Interest, compensation, court fee, viability and CPR deadline calculations",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(claims.router, prefix="/v1", tags=["claims"])
    app.include_router(fees.router, prefix="/v1", tags=["fees"])
    app.include_router(deadlines.router, prefix="/v1", tags=["deadlines"])

    return app


app = create_app()
