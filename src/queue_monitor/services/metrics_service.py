"""Service layer for period-over-period job metrics.

Compares the trailing window [now - N days, now) with the window of equal
length immediately before it, [now - 2N days, now - N days).
"""

import logging
from datetime import datetime

from src.queue_monitor.core.filters import WindowAggregateQuery
from src.queue_monitor.core.metrics import AggregateStatistics, Metric, MetricFormat, Metrics
from src.queue_monitor.exceptions import ValidationError
from src.queue_monitor.repositories.monitor import MonitorRepository

logger = logging.getLogger(__name__)


class MetricsService:
    """Service for computing trailing-window job metrics.

    Stateless: results depend only on stored records and the `now`
    passed in.

    Attributes:
        repository: Job record data access
    """

    def __init__(self, repository: MonitorRepository):
        self.repository = repository

    def compute_metrics(self, window_days: int, now: datetime) -> Metrics:
        """Compute job count and execution time metrics for two windows.

        Args:
            window_days: Window length in days
            now: Reference time closing the current window (naive UTC)

        Returns:
            Metrics with three items in fixed order, or empty Metrics when
            either window has no records

        Raises:
            ValidationError: If window_days is not positive
            DataSourceError: If either window aggregate fails
        """
        if window_days < 1:
            raise ValidationError("window_days", "must be a positive integer")

        current_window = WindowAggregateQuery.trailing(now, window_days)
        previous_window = WindowAggregateQuery.trailing(now, window_days, offset=1)

        current_row = self.repository.aggregate_window(current_window)
        previous_row = self.repository.aggregate_window(previous_window)

        metrics = Metrics(window_days=window_days)
        if current_row is None or previous_row is None:
            logger.info(f"Not enough job records for {window_days}-day metrics")
            return metrics

        current = AggregateStatistics.from_aggregate(current_row)
        previous = AggregateStatistics.from_aggregate(previous_row)
        logger.debug(f"Metrics windows: current={current}, previous={previous}")

        return (
            metrics.push(
                Metric("Total Jobs Executed", current.count, previous.count, MetricFormat.INTEGER)
            )
            .push(
                Metric(
                    "Total Execution Time",
                    current.total_elapsed,
                    previous.total_elapsed,
                    MetricFormat.SECONDS,
                )
            )
            .push(
                Metric(
                    "Average Execution Time",
                    current.average_elapsed,
                    previous.average_elapsed,
                    MetricFormat.SECONDS_2DP,
                )
            )
        )
