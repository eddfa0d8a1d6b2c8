"""Contacts API application."""

import time
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
import structlog

from .routes import router as api_router
from ..common.config import ApiConfig
from ..common.logging import configure_logging
from ..common.metrics import MetricsCollector, get_metrics_collector
from ..search_index.base import ContactIndex
from ..search_index.factory import create_contact_index

logger = structlog.get_logger("contacts_api")

SERVICE_NAME = "contacts-api"


def create_app(
    contact_index: Optional[ContactIndex] = None,
    config: Optional[ApiConfig] = None,
    metrics_collector: Optional[MetricsCollector] = None,
) -> FastAPI:
    """Build the FastAPI application.

    Without ``contact_index`` the lifespan opens an OpenSearch client from
    ``config`` (or the environment) and closes it on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app_config = config or ApiConfig()
        configure_logging(SERVICE_NAME, app_config.contacts_log_level, app_config.contacts_log_format)
        logger.info("Starting contacts API")

        owns_index = getattr(app.state, "contact_index", None) is None
        if owns_index:
            app.state.contact_index = create_contact_index(app_config, metrics=app.state.metrics_collector)

        logger.info("Contacts API started successfully")

        yield

        logger.info("Shutting down contacts API")
        if owns_index:
            app.state.contact_index.close()
            app.state.contact_index = None
        logger.info("Contacts API shutdown complete")

    app = FastAPI(
        title="Contacts API",
        description="Contact indexing and search",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.contact_index = contact_index
    app.state.metrics_collector = metrics_collector or get_metrics_collector(SERVICE_NAME)

    app.include_router(api_router, prefix="/api/v1")

    @app.middleware("http")
    async def metrics_middleware(request: Request, call_next):
        """Collect metrics for HTTP requests."""
        start_time = time.time()
        response = await call_next(request)
        app.state.metrics_collector.record_http_request(
            method=request.method,
            endpoint=request.url.path,
            status=response.status_code,
            duration=time.time() - start_time,
        )
        return response

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        contact_index = app.state.contact_index
        if contact_index is not None and contact_index.health_check():
            return {"status": "healthy", "service": SERVICE_NAME}
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "service": SERVICE_NAME},
        )

    @app.get("/metrics")
    def metrics():
        """Prometheus metrics endpoint."""
        return Response(content=app.state.metrics_collector.get_metrics(), media_type="text/plain")

    return app


app = create_app()


if __name__ == "__main__":
    api_config = ApiConfig()
    uvicorn.run(
        "contacts.api.main:app",
        host=api_config.contacts_api_host,
        port=api_config.contacts_api_port,
        log_level=api_config.contacts_log_level.lower(),
    )
