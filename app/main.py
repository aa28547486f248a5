"""FastAPI app entry: config, logging, health, and graceful shutdown."""

from contextlib import asynccontextmanager
from typing import Any

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.config.chunking.static import get_active_chunking_config, get_active_profile_name
from app.config.logging import configure_logging, get_logger
from app.config.settings import get_settings
from app.controllers.routes.chunk import router as chunk_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: config and logging. Shutdown: log only; the service holds no resources."""
    settings = get_settings()
    configure_logging()
    logger.info("Application starting", extra={"app_name": settings.app_name, "environment": settings.environment})
    try:
        config = get_active_chunking_config()
        logger.info(
            "Active chunking profile loaded",
            extra={"profile": get_active_profile_name(), "strategy": config.strategy},
        )
    except Exception as e:
        logger.error("Failed to load active chunking profile", extra={"error": str(e)})
        # /ready reports the failure
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="Chunking Service",
    description="Split text into bounded, word-aligned chunks for embedding",
    version="1.0.0",
    lifespan=lifespan,
)
app.include_router(chunk_router)


@app.get("/health")
async def health() -> dict[str, Any]:
    """Liveness: service is up. Does not check configuration."""
    return {"status": "ok"}


@app.get("/ready")
async def ready() -> JSONResponse:
    """Readiness: the active chunking profile loads and validates."""
    try:
        config = get_active_chunking_config()
    except Exception as e:
        logger.warning("Readiness check failed", extra={"error": type(e).__name__})
        return JSONResponse(
            content={"status": "degraded", "chunking": {"ok": False, "error": str(e)}},
            status_code=503,
        )
    body = {
        "status": "ok",
        "chunking": {"ok": True, "profile": get_active_profile_name(), "strategy": config.strategy},
    }
    return JSONResponse(content=body, status_code=200)


@app.exception_handler(Exception)
async def global_exception_handler(_request: Request, exc: Exception):
    """Centralized error handling: never leak stack traces or internal details to the client."""
    logger.exception("Unhandled error", extra={"error": type(exc).__name__})
    return JSONResponse(
        content={"detail": "An internal error occurred."},
        status_code=500,
    )


def run() -> None:
    """Serve the app with uvicorn on the host and port from settings."""
    settings = get_settings()
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)
