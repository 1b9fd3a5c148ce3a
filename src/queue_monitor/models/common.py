"""Service-level response models for the queue monitor.

Health, info and error payloads shared by the application entry point
and the v1 router.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness payload; does not touch the job record store."""

    status: str = Field(default="healthy", description="Service health status")
    version: str = Field(..., description="Running queue monitor version")
    timestamp: datetime = Field(default_factory=datetime.utcnow)


class InfoResponse(BaseModel):
    """Queue monitor configuration and store reachability.

    Attributes:
        app_name: Application name
        version: Application version
        database_connected: Whether the job record store answered a ping
        metrics_enabled: Whether the metrics section is shown
        metrics_time_frame: Metrics window length in days
    """

    app_name: str
    version: str
    status: str = "running"
    database_connected: bool
    metrics_enabled: bool
    metrics_time_frame: int
    timestamp: datetime = Field(default_factory=datetime.utcnow)


class ErrorResponse(BaseModel):
    """Body returned for rejected requests and storage failures.

    Attributes:
        error: Exception class name (ValidationError, DataSourceError)
        message: Human-readable error message
        path: Request path that failed
        detail: Offending field or failed operation, when exposed
    """

    error: str
    message: str
    path: Optional[str] = None
    detail: Optional[Dict[str, Any]] = None
    timestamp: datetime = Field(default_factory=datetime.utcnow)
