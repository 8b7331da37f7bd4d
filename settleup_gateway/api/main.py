"""FastAPI application factory"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from settleup_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from settleup_gateway.api.v1 import simplify, groups, participants
from settleup_gateway.infrastructure.observability.logging import setup_logging
from settleup_gateway.infrastructure.database.models import Base
from settleup_gateway.infrastructure.database.session import engine
from settleup_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create missing tables before serving requests"""
    Base.metadata.create_all(bind=engine)
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="SettleUp Gateway",
        description="Group debt simplification and net settlement service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
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
    app.include_router(simplify.router, prefix="/v1", tags=["simplify"])
    app.include_router(groups.router, prefix="/v1", tags=["groups"])
    app.include_router(participants.router, prefix="/v1", tags=["participants"])

    return app


app = create_app()
