"""Main FastAPI application entry point."""

import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from modules.metadata_extractor.router import router as metadata_router
from shared.exceptions import FetchError, ValidationError
from shared.logging import configure_logging
from .config import settings


configure_logging(settings)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    yield
    logger.info("Shutting down application")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Developer utilities - webpage metadata, Open Graph and Schema.org extraction",
    version=settings.app_version,
    docs_url=f"{settings.api_prefix}/docs",
    redoc_url=f"{settings.api_prefix}/redoc",
    openapi_url=f"{settings.api_prefix}/openapi.json",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Middleware for request logging
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all incoming requests."""
    start_time = time.time()

    logger.debug(f"{request.method} {request.url.path}")

    response = await call_next(request)

    duration = time.time() - start_time
    logger.debug(f"{request.method} {request.url.path} - {response.status_code} ({duration:.3f}s)")

    return response


# Health check endpoint
@app.get(f"{settings.api_prefix}/health")
async def health_check() -> Dict[str, Any]:
    """Basic health check endpoint."""
    return {
        "status": "OK",
        "app": settings.app_name,
        "version": settings.app_version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# Root API endpoint
@app.get(settings.api_prefix)
async def api_root() -> Dict[str, Any]:
    """API root endpoint with basic information."""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "docs": f"{settings.api_prefix}/docs",
        "health": f"{settings.api_prefix}/health",
    }


app.include_router(metadata_router)


# Error handlers
@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    """Handle missing or invalid input."""
    logger.warning(f"Validation error: {exc.message}")
    return JSONResponse(
        status_code=400,
        content={"error": exc.message},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Handle request bodies that are not a JSON object with a url."""
    errors = exc.errors()
    logger.warning(f"Invalid request body: {errors}")
    message = "URL is required"
    if any(tuple(error.get("loc", ()))[-1:] == ("url",) for error in errors):
        message = "URL must be a string"
    return JSONResponse(
        status_code=400,
        content={"error": message},
    )


@app.exception_handler(FetchError)
async def fetch_error_handler(request: Request, exc: FetchError):
    """Handle documents that could not be retrieved."""
    return JSONResponse(
        status_code=500,
        content={"error": exc.message},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors, including unknown routes, as JSON."""
    message = "Not Found" if exc.status_code == 404 else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": message, "status": exc.status_code},
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={"message": "Internal Server Error", "status": 500},
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
