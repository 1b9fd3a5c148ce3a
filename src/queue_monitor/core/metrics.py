"""Metric dataclasses for period-over-period job statistics."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional

from src.queue_monitor.core.filters import WindowAggregate


class MetricFormat(Enum):
    """Display format tokens. Rendering is up to the presentation layer."""

    INTEGER = "integer"  # %d
    SECONDS = "seconds"  # %ds
    SECONDS_2DP = "seconds_2dp"  # %0.2fs


class ChangeKind(Enum):
    """Whether a percentage change could be computed."""

    NUMERIC = "numeric"
    NO_PRIOR_DATA = "no_prior_data"


@dataclass(frozen=True)
class PercentageChange:
    """
    Percentage change between two window values.

    Attributes:
        kind: NUMERIC when a ratio exists, NO_PRIOR_DATA when the previous value is 0
        value: Signed percentage (50.0 means +50%), None for NO_PRIOR_DATA
    """

    kind: ChangeKind
    value: Optional[float] = None

    @classmethod
    def between(cls, current: float, previous: float) -> "PercentageChange":
        if previous == 0:
            return cls(kind=ChangeKind.NO_PRIOR_DATA)
        return cls(kind=ChangeKind.NUMERIC, value=(current - previous) / previous * 100)

    @property
    def is_defined(self) -> bool:
        return self.kind is ChangeKind.NUMERIC


@dataclass(frozen=True)
class AggregateStatistics:
    """
    Statistics for one window.

    Attributes:
        count: Jobs started in the window
        total_elapsed: Total execution time in seconds
        average_elapsed: Mean execution time in seconds (0 when count is 0)
    """

    count: int = 0
    total_elapsed: float = 0.0
    average_elapsed: float = 0.0

    @classmethod
    def from_aggregate(cls, row: WindowAggregate) -> "AggregateStatistics":
        if row.count == 0:
            return cls()
        return cls(
            count=row.count,
            total_elapsed=row.total_elapsed or 0.0,
            average_elapsed=row.average_elapsed or 0.0,
        )


@dataclass(frozen=True)
class Metric:
    """
    One labelled statistic compared across the current and previous window.

    Attributes:
        label: Display label
        current_value: Statistic for the current window
        previous_value: Statistic for the previous window
        format: Display format token
    """

    label: str
    current_value: float
    previous_value: float
    format: MetricFormat

    @property
    def percentage_change(self) -> PercentageChange:
        return PercentageChange.between(self.current_value, self.previous_value)

    @property
    def has_changed(self) -> bool:
        return self.current_value != self.previous_value

    @property
    def has_increased(self) -> bool:
        return self.current_value > self.previous_value


@dataclass
class Metrics:
    """Ordered metric collection. Empty means there is not enough data yet."""

    window_days: int
    items: list[Metric] = field(default_factory=list)

    def push(self, metric: Metric) -> "Metrics":
        self.items.append(metric)
        return self

    @property
    def insufficient_data(self) -> bool:
        return not self.items

    def __iter__(self) -> Iterator[Metric]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
