"""FastAPI application entry point.

This module initializes the FastAPI application with middleware,
routers, error handlers and core endpoints.
"""

import logging
from datetime import datetime

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.queue_monitor import __version__
from src.queue_monitor.api.v1.router import router as v1_router
from src.queue_monitor.config import settings
from src.queue_monitor.exceptions import DataSourceError, ValidationError
from src.queue_monitor.models.common import ErrorResponse, HealthResponse

# Configure logging
logging.basicConfig(
    level=logging.INFO if not settings.debug else logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Read-only monitoring API over background job execution records",
    version=__version__,
    debug=settings.debug,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# Configure CORS middleware for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(v1_router)


@app.on_event("startup")
async def startup_event():
    """Application startup event handler."""
    logger.info(f"Starting {settings.app_name} v{__version__}")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"Database path: {settings.database_path}")
    logger.info(
        f"Metrics enabled: {settings.show_metrics} "
        f"(time frame {settings.metrics_time_frame} days)"
    )


@app.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    tags=["health"],
    summary="Health check endpoint",
    description="Returns service health status",
)
async def health_check() -> HealthResponse:
    """Health check endpoint.

    Returns:
        Health status with the running version and timestamp

    Example:
        >>> GET /health
        >>> {
        >>>     "status": "healthy",
        >>>     "version": "1.0.0",
        >>>     "timestamp": "2026-10-19T10:00:00"
        >>> }
    """
    return HealthResponse(status="healthy", version=__version__, timestamp=datetime.utcnow())


@app.get(
    "/",
    status_code=status.HTTP_200_OK,
    tags=["root"],
    summary="Root endpoint",
    description="Returns welcome message with API information",
)
async def root():
    """Root endpoint.

    Provides basic API information and links to documentation.

    Returns:
        Welcome message with API details
    """
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
        "api": "/api/v1/info",
        "monitor": "/api/v1/monitor",
    }


# Error handlers
@app.exception_handler(ValidationError)
async def validation_exception_handler(request: Request, exc: ValidationError):
    """Reject malformed filter or pagination input.

    Args:
        request: The request that caused the error
        exc: The validation error naming the offending field

    Returns:
        JSON error response with status 422
    """
    logger.warning(f"Rejected request {request.url.path}: {exc}")
    body = ErrorResponse(
        error="ValidationError",
        message=exc.message,
        path=request.url.path,
        detail={"field": exc.field},
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=body.model_dump(mode="json"),
    )


@app.exception_handler(DataSourceError)
async def data_source_exception_handler(request: Request, exc: DataSourceError):
    """Report job record storage failures.

    Args:
        request: The request that caused the error
        exc: The storage failure

    Returns:
        JSON error response with status 503
    """
    logger.error(f"Data source failure on {request.url.path}: {exc}", exc_info=exc)
    body = ErrorResponse(
        error="DataSourceError",
        message=str(exc),
        path=request.url.path,
        detail={"operation": exc.operation} if settings.debug else None,
    )
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=body.model_dump(mode="json"),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler for unhandled errors.

    Args:
        request: The request that caused the error
        exc: The exception that was raised

    Returns:
        JSON error response
    """
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "InternalServerError",
            "message": "An unexpected error occurred",
            "detail": str(exc) if settings.debug else None,
            "timestamp": datetime.utcnow().isoformat(),
        },
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.queue_monitor.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
    )
