"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from limit_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from limit_gateway.api.v1 import limits
from limit_gateway.infrastructure.observability.logging import setup_logging
from limit_gateway.config import settings

setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Spending Limit Gateway",
        description="Daily spending limit status and transaction checks",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Last added = first executed, so request IDs exist before metrics run
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(limits.router, prefix="/v1", tags=["limits"])

    return app


app = create_app()
