"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from fd_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from fd_gateway.api.v1 import maturity, recommendations
from fd_gateway.infrastructure.observability.logging import setup_logging
from fd_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="FD Gateway",
        description="Fixed deposit maturity calculator and tenure recommendations",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(maturity.router, prefix="/v1", tags=["maturity"])
    app.include_router(recommendations.router, prefix="/v1", tags=["recommendations"])

    return app


app = create_app()
