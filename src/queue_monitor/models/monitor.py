"""Pydantic models for queue monitor API responses.

Defines response models for job record listings, queue names,
trailing-window metrics and the combined dashboard.
"""

from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, Field

from src.queue_monitor.core.metrics import Metric, Metrics


class MonitorRecordResponse(BaseModel):
    """Response model for one job execution record.

    Attributes:
        id: Record ID
        job_id: Broker job identifier
        name: Job display name
        queue: Queue the job ran on
        started_at: Execution start time
        finished_at: Execution finish time (None while running)
        time_elapsed: Execution duration in seconds
        failed: Whether the finished job failed
        run_state: Derived state (running, succeeded, failed)
        attempt: Attempt number
        progress: Reported progress percentage
        exception_message: Exception message if failed
    """

    id: int
    job_id: Optional[str] = None
    name: Optional[str] = None
    queue: str
    started_at: datetime
    finished_at: Optional[datetime] = None
    time_elapsed: Optional[float] = None
    failed: bool = False
    run_state: str
    attempt: int = 1
    progress: Optional[int] = None
    exception_message: Optional[str] = None

    class Config:
        """Pydantic model configuration."""

        from_attributes = True


class FiltersResponse(BaseModel):
    """Filters applied to a listing, echoed back to the client."""

    type: str = Field(default="all", description="Run-state filter")
    queue: str = Field(default="all", description="Queue filter")


class MonitorPageResponse(BaseModel):
    """Response model for a page of job records.

    Attributes:
        jobs: Records on this page
        total: Total records matching the filters
        page: Current page number
        page_size: Number of records per page
        last_page: Last available page number
        filters: Applied filters
    """

    jobs: List[MonitorRecordResponse]
    total: int
    page: int = 1
    page_size: int
    last_page: int = 1
    filters: FiltersResponse


class QueueListResponse(BaseModel):
    """Distinct queue names across all records."""

    queues: List[str]
    total: int


class MetricResponse(BaseModel):
    """Response model for one period-over-period metric.

    Attributes:
        label: Display label
        current_value: Value for the current window
        previous_value: Value for the previous window
        format: Display format token (integer, seconds, seconds_2dp)
        change_kind: "numeric" or "no_prior_data"
        percentage_change: Signed percentage, None when there is no prior data
    """

    label: str
    current_value: Union[int, float]
    previous_value: Union[int, float]
    format: str
    change_kind: str
    percentage_change: Optional[float] = None

    @classmethod
    def from_metric(cls, metric: Metric) -> "MetricResponse":
        change = metric.percentage_change
        return cls(
            label=metric.label,
            current_value=metric.current_value,
            previous_value=metric.previous_value,
            format=metric.format.value,
            change_kind=change.kind.value,
            percentage_change=change.value,
        )


class MetricsResponse(BaseModel):
    """Response model for trailing-window metrics.

    Attributes:
        enabled: Whether metrics are enabled by configuration
        window_days: Window length in days
        insufficient_data: True when either window has no records yet
        metrics: Metrics in fixed order (empty when disabled or insufficient)
    """

    enabled: bool = True
    window_days: int
    insufficient_data: bool = False
    metrics: List[MetricResponse] = Field(default_factory=list)

    @classmethod
    def from_metrics(cls, metrics: Metrics) -> "MetricsResponse":
        return cls(
            window_days=metrics.window_days,
            insufficient_data=metrics.insufficient_data,
            metrics=[MetricResponse.from_metric(metric) for metric in metrics],
        )


class DashboardResponse(BaseModel):
    """Everything the monitor page needs in one payload.

    Attributes:
        jobs: Page of records
        total: Total records matching the filters
        page: Current page number
        page_size: Records per page
        last_page: Last available page number
        filters: Applied filters
        queues: Distinct queue names
        metrics_enabled: Whether metrics are enabled by configuration
        metrics: Metrics section, None when disabled
    """

    jobs: List[MonitorRecordResponse]
    total: int
    page: int
    page_size: int
    last_page: int
    filters: FiltersResponse
    queues: List[str]
    metrics_enabled: bool
    metrics: Optional[MetricsResponse] = None
