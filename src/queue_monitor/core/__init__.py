"""Backend-independent query and metric types."""

from src.queue_monitor.core.filters import (
    ALL_QUEUES,
    FilterCriteria,
    RunState,
    WindowAggregate,
    WindowAggregateQuery,
)
from src.queue_monitor.core.metrics import (
    AggregateStatistics,
    ChangeKind,
    Metric,
    MetricFormat,
    Metrics,
    PercentageChange,
)

__all__ = [
    "ALL_QUEUES",
    "FilterCriteria",
    "RunState",
    "WindowAggregate",
    "WindowAggregateQuery",
    "AggregateStatistics",
    "ChangeKind",
    "Metric",
    "MetricFormat",
    "Metrics",
    "PercentageChange",
]
