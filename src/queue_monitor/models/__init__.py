"""Pydantic request and response models."""

from src.queue_monitor.models.common import ErrorResponse, HealthResponse, InfoResponse
from src.queue_monitor.models.monitor import (
    DashboardResponse,
    FiltersResponse,
    MetricResponse,
    MetricsResponse,
    MonitorPageResponse,
    MonitorRecordResponse,
    QueueListResponse,
)

__all__ = [
    # Common models
    "HealthResponse",
    "InfoResponse",
    "ErrorResponse",
    # Monitor models
    "DashboardResponse",
    "FiltersResponse",
    "MetricResponse",
    "MetricsResponse",
    "MonitorPageResponse",
    "MonitorRecordResponse",
    "QueueListResponse",
]
