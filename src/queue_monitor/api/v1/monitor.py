"""Queue monitor API endpoints.

Provides read-only REST endpoints over job execution records: the combined
dashboard, filtered record pages, distinct queue names and trailing-window
metrics.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from src.queue_monitor.config import Settings, get_settings
from src.queue_monitor.database.session import get_db
from src.queue_monitor.models.monitor import (
    DashboardResponse,
    MetricsResponse,
    MonitorPageResponse,
    QueueListResponse,
)
from src.queue_monitor.services.monitor_service import QueueMonitorService, parse_filters

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/monitor",
    tags=["monitor"],
)


@router.get(
    "",
    response_model=DashboardResponse,
    status_code=status.HTTP_200_OK,
    summary="Get queue monitor dashboard",
    description="Returns a page of job records, queue names, applied filters and metrics",
)
def show_dashboard(
    type: Optional[str] = Query(None, description="Run state: all, running, failed, succeeded"),
    queue: Optional[str] = Query(None, description="Queue name or 'all'"),
    page: int = Query(1, ge=1, description="Page number"),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> DashboardResponse:
    """Get the queue monitor dashboard.

    Args:
        type: Optional run-state filter
        queue: Optional queue filter
        page: Page number (1-based)

    Returns:
        Dashboard payload; metrics is null when disabled by configuration
    """
    criteria = parse_filters(type, queue)
    return QueueMonitorService(db, settings).show(criteria, page=page)


@router.get(
    "/jobs",
    response_model=MonitorPageResponse,
    status_code=status.HTTP_200_OK,
    summary="List job records",
    description="Returns job execution records filtered by run state and queue, most recent first",
)
def list_jobs(
    type: Optional[str] = Query(None, description="Run state: all, running, failed, succeeded"),
    queue: Optional[str] = Query(None, description="Queue name or 'all'"),
    page: int = Query(1, ge=1, description="Page number"),
    page_size: Optional[int] = Query(None, ge=1, le=500, description="Records per page"),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> MonitorPageResponse:
    """List job records.

    Args:
        type: Optional run-state filter
        queue: Optional queue filter
        page: Page number (1-based)
        page_size: Records per page, defaults to the configured page size

    Returns:
        Paginated job records
    """
    criteria = parse_filters(type, queue)
    return QueueMonitorService(db, settings).list_page(criteria, page, page_size)


@router.get(
    "/queues",
    response_model=QueueListResponse,
    status_code=status.HTTP_200_OK,
    summary="List queue names",
    description="Returns every queue name that appears in at least one job record",
)
def list_queues(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> QueueListResponse:
    """List distinct queue names."""
    queues = QueueMonitorService(db, settings).list_queues()
    return QueueListResponse(queues=queues, total=len(queues))


@router.get(
    "/metrics",
    response_model=MetricsResponse,
    status_code=status.HTTP_200_OK,
    summary="Get job metrics",
    description="Compares the trailing window with the preceding window of equal length",
)
def get_metrics(
    window_days: Optional[int] = Query(None, ge=1, description="Window length in days"),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> MetricsResponse:
    """Get trailing-window job metrics.

    Args:
        window_days: Window length, defaults to the configured time frame

    Returns:
        Metrics; insufficient_data is true when either window is empty
    """
    return QueueMonitorService(db, settings).metrics(window_days=window_days)
