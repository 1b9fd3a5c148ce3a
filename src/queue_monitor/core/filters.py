"""Filter and aggregate query dataclasses.

Typed descriptions of what the monitor asks of job record storage. The
repository translates them into SQL; nothing here depends on a backend.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional

from src.queue_monitor.exceptions import ValidationError

ALL_QUEUES = "all"


class RunState(Enum):
    """Run-state filter values accepted by the record listing."""

    ALL = "all"
    RUNNING = "running"
    FAILED = "failed"
    SUCCEEDED = "succeeded"

    @classmethod
    def parse(cls, value: Optional[str], field: str = "type") -> "RunState":
        """Parse a request value, defaulting to ALL when absent.

        Raises:
            ValidationError: If value is not one of the enumerated states
        """
        if value is None or value == "":
            return cls.ALL
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(state.value for state in cls)
            raise ValidationError(field, f"must be one of: {allowed}") from None


@dataclass(frozen=True)
class FilterCriteria:
    """
    Record listing filters, applied conjunctively.

    Attributes:
        run_state: Derived run state to keep (ALL disables the filter)
        queue: Exact queue name to keep, or "all"
    """

    run_state: RunState = RunState.ALL
    queue: str = ALL_QUEUES

    @property
    def filters_queue(self) -> bool:
        return self.queue != ALL_QUEUES

    def as_dict(self) -> dict[str, str]:
        """Filters echoed back to the presentation layer."""
        return {"type": self.run_state.value, "queue": self.queue}


@dataclass(frozen=True)
class WindowAggregateQuery:
    """
    Count/sum/average of elapsed time over records started in [start, end).

    Attributes:
        start: Inclusive lower bound on started_at
        end: Exclusive upper bound on started_at
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(f"window end {self.end} precedes start {self.start}")

    @classmethod
    def trailing(cls, now: datetime, days: int, offset: int = 0) -> "WindowAggregateQuery":
        """Window of `days` days ending `offset` windows before `now`.

        offset=0 is [now - days, now); offset=1 is [now - 2*days, now - days).
        """
        end = now - timedelta(days=days * offset)
        return cls(start=end - timedelta(days=days), end=end)


@dataclass(frozen=True)
class WindowAggregate:
    """
    Raw aggregate row returned by storage for one window.

    Attributes:
        count: Records started in the window
        total_elapsed: Sum of elapsed seconds (running records count as 0)
        average_elapsed: Mean elapsed seconds, None when storage reports none
    """

    count: int
    total_elapsed: float
    average_elapsed: Optional[float]
