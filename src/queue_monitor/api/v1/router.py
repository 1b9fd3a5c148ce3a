"""API v1 router with core endpoints.

This module provides version 1 of the API with system information
and the queue monitor endpoints.
"""

import logging
from datetime import datetime

from fastapi import APIRouter, status

from src.queue_monitor.api.v1 import monitor
from src.queue_monitor.config import settings
from src.queue_monitor.database.session import check_database_connection
from src.queue_monitor.models.common import InfoResponse

logger = logging.getLogger(__name__)

# Create v1 router
router = APIRouter(
    prefix="/api/v1",
    tags=["v1"],
)

# Include sub-routers
router.include_router(monitor.router)


@router.get(
    "/info",
    response_model=InfoResponse,
    status_code=status.HTTP_200_OK,
    summary="Get system information",
    description="Returns system information including version and database status",
)
async def get_info() -> InfoResponse:
    """Get system information endpoint.

    Returns application name, version, database connectivity and the
    monitor's metrics configuration.

    Returns:
        System information including database connection status

    Example:
        >>> GET /api/v1/info
        >>> {
        >>>     "app_name": "Queue Monitor API",
        >>>     "version": "1.0.0",
        >>>     "status": "running",
        >>>     "database_connected": true,
        >>>     "metrics_enabled": true,
        >>>     "metrics_time_frame": 2,
        >>>     "timestamp": "2026-10-19T10:00:00"
        >>> }
    """
    db_connected = check_database_connection()

    return InfoResponse(
        app_name=settings.app_name,
        version=settings.version,
        status="running",
        database_connected=db_connected,
        metrics_enabled=settings.show_metrics,
        metrics_time_frame=settings.metrics_time_frame,
        timestamp=datetime.utcnow(),
    )
