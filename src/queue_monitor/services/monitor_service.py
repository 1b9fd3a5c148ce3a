"""Service layer composing the queue monitor dashboard.

Validates request inputs, reads monitor configuration and hands the
record page, queue list and metrics to the presentation layer.
"""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from src.queue_monitor.config import Settings
from src.queue_monitor.core.filters import ALL_QUEUES, FilterCriteria, RunState
from src.queue_monitor.models.monitor import (
    DashboardResponse,
    FiltersResponse,
    MetricsResponse,
    MonitorPageResponse,
    MonitorRecordResponse,
)
from src.queue_monitor.repositories.monitor import MonitorRepository
from src.queue_monitor.services.metrics_service import MetricsService
from src.queue_monitor.services.record_service import RecordPage, RecordQueryService

logger = logging.getLogger(__name__)


def parse_filters(run_state: Optional[str], queue: Optional[str]) -> FilterCriteria:
    """Build filter criteria from raw request values.

    Args:
        run_state: One of all, running, failed, succeeded (default all)
        queue: Queue name or "all" (default all)

    Returns:
        FilterCriteria

    Raises:
        ValidationError: If run_state is not an enumerated value
    """
    return FilterCriteria(
        run_state=RunState.parse(run_state, field="type"),
        queue=queue or ALL_QUEUES,
    )


class QueueMonitorService:
    """Service backing the queue monitor endpoints.

    Attributes:
        settings: Monitor configuration
        repository: Job record data access
        record_service: Filtered record listing
        metrics_service: Trailing-window metrics
    """

    def __init__(self, db: Session, settings: Settings):
        self.settings = settings
        self.repository = MonitorRepository(db)
        self.record_service = RecordQueryService(self.repository)
        self.metrics_service = MetricsService(self.repository)

    def list_page(
        self,
        criteria: FilterCriteria,
        page: int,
        page_size: Optional[int] = None,
    ) -> MonitorPageResponse:
        """List one page of records, using the configured page size by default."""
        record_page = self.record_service.list_records(
            criteria, page, page_size or self.settings.per_page
        )
        return MonitorPageResponse(
            jobs=self._to_responses(record_page),
            total=record_page.total,
            page=record_page.page,
            page_size=record_page.page_size,
            last_page=record_page.last_page,
            filters=FiltersResponse(**criteria.as_dict()),
        )

    def list_queues(self) -> list[str]:
        return self.record_service.list_distinct_queues()

    def metrics(
        self,
        window_days: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> MetricsResponse:
        """Compute metrics, or report them disabled by configuration.

        Args:
            window_days: Window length, defaults to metrics_time_frame
            now: Reference time, defaults to the current UTC time

        Returns:
            MetricsResponse
        """
        window_days = window_days or self.settings.metrics_time_frame
        if not self.settings.show_metrics:
            return MetricsResponse(enabled=False, window_days=window_days)

        metrics = self.metrics_service.compute_metrics(window_days, now or datetime.utcnow())
        return MetricsResponse.from_metrics(metrics)

    def show(
        self,
        criteria: FilterCriteria,
        page: int = 1,
        now: Optional[datetime] = None,
    ) -> DashboardResponse:
        """Build the full monitor dashboard.

        The queue list and the record page are separate repository reads.
        A storage failure in either one fails the whole dashboard; clients
        that only need queue names should call list_queues, which does not
        touch the record listing.

        Args:
            criteria: Record filters
            page: 1-based page number
            now: Reference time for metrics

        Returns:
            DashboardResponse; metrics is None when disabled

        Raises:
            ValidationError: If page is not positive
            DataSourceError: If storage fails
        """
        queues = self.record_service.list_distinct_queues()
        record_page = self.record_service.list_records(criteria, page, self.settings.per_page)

        metrics = None
        if self.settings.show_metrics:
            metrics = self.metrics(now=now)

        return DashboardResponse(
            jobs=self._to_responses(record_page),
            total=record_page.total,
            page=record_page.page,
            page_size=record_page.page_size,
            last_page=record_page.last_page,
            filters=FiltersResponse(**criteria.as_dict()),
            queues=queues,
            metrics_enabled=self.settings.show_metrics,
            metrics=metrics,
        )

    @staticmethod
    def _to_responses(record_page: RecordPage) -> list[MonitorRecordResponse]:
        return [MonitorRecordResponse.model_validate(record) for record in record_page.items]
