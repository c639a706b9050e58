"""
Hello Service - Main FastAPI Application.

Serves a plain-text health check for Kubernetes probes and a JSON greeting
on the root path.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from .config import get_settings
from .logging_config import get_logger, setup_logging
from .metrics import metrics_endpoint, track_request_metrics
from .metrics_middleware import PrometheusMiddleware
from .middleware import RequestLoggingMiddleware
from .models import GREETING_MESSAGE, MessageResponse

settings = get_settings()

setup_logging(
    log_level=settings.LOG_LEVEL,
    service_name=settings.SERVICE_NAME,
    use_json=settings.LOG_JSON,
)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    The listening confirmation is logged by the server once its socket is
    bound; this hook only reports configuration and shutdown.
    """
    logger.debug(
        "Configuration loaded",
        extra={
            "extra_fields": {
                "host": settings.HOST,
                "port": settings.PORT,
                "log_level": settings.LOG_LEVEL,
                "debug_mode": settings.DEBUG,
            }
        },
    )

    yield

    logger.info(f"Shutting down {settings.SERVICE_NAME}")


app = FastAPI(
    title="Hello Service",
    description="Health check and greeting endpoints",
    version="1.0.0",
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    lifespan=lifespan,
)

# Add middleware (order matters - first added is last executed)
if settings.ENABLE_REQUEST_TRACING:
    app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(PrometheusMiddleware, track_func=track_request_metrics)


@app.get(
    "/health",
    response_class=PlainTextResponse,
    tags=["Health"],
    summary="Health check",
    description="Liveness and readiness probe - returns 200 while the process is serving",
)
async def health_check() -> str:
    return "OK"


@app.get(
    "/",
    response_model=MessageResponse,
    tags=["Greeting"],
    summary="Greeting",
)
async def root() -> MessageResponse:
    """Return the fixed greeting."""
    return MessageResponse(message=GREETING_MESSAGE)


@app.get("/metrics", include_in_schema=False)
async def metrics():
    """Prometheus metrics endpoint."""
    return await metrics_endpoint()


if __name__ == "__main__":
    import sys

    from app.__main__ import main

    sys.exit(main())
