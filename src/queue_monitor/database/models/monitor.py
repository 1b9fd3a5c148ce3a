"""Queue job execution database model.

Tracks one row per background job run, including the queue it ran on,
start/finish timestamps, elapsed time and failure status.
"""

from sqlalchemy import Boolean, Column, DateTime, Float, Integer, String, Text

from src.queue_monitor.core.filters import RunState
from src.queue_monitor.database.session import Base


class Monitor(Base):
    """Job execution record model.

    Rows are written by the job instrumentation and transition exactly
    once from running to finished. The monitor itself only reads them.

    Attributes:
        id: Unique identifier (auto-incrementing integer)
        job_id: Broker-assigned job identifier
        name: Job class or display name
        queue: Queue the job ran on
        started_at: Timestamp when job execution started (naive UTC)
        finished_at: Timestamp when job execution finished (NULL if running)
        time_elapsed: Execution duration in seconds (NULL while running)
        failed: Whether the finished job failed
        attempt: Attempt number for retried jobs
        progress: Reported progress percentage (0-100)
        exception_message: Exception message if the job failed
        data: Free-form JSON payload reported by the job
    """

    __tablename__ = "queue_monitor"

    # Columns
    id = Column(Integer, primary_key=True, autoincrement=True)
    job_id = Column(String, nullable=True, index=True)
    name = Column(String, nullable=True)
    queue = Column(String, nullable=False, index=True)
    started_at = Column(DateTime, nullable=False, index=True)
    finished_at = Column(DateTime, nullable=True)
    time_elapsed = Column(Float, nullable=True)
    failed = Column(Boolean, nullable=False, default=False)
    attempt = Column(Integer, nullable=False, default=1)
    progress = Column(Integer, nullable=True)
    exception_message = Column(Text, nullable=True)
    data = Column(Text, nullable=True)

    def is_finished(self) -> bool:
        return self.finished_at is not None

    def has_failed(self) -> bool:
        return self.is_finished() and bool(self.failed)

    def has_succeeded(self) -> bool:
        return self.is_finished() and not self.failed

    @property
    def run_state(self) -> str:
        """Derived run state: running, succeeded or failed."""
        if not self.is_finished():
            return RunState.RUNNING.value
        state = RunState.FAILED if self.failed else RunState.SUCCEEDED
        return state.value

    def __repr__(self) -> str:
        """String representation for debugging.

        Returns:
            Formatted string with job execution details
        """
        return (
            f"<Monitor(id={self.id}, queue={self.queue}, "
            f"state={self.run_state}, started={self.started_at})>"
        )
