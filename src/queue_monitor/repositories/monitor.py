"""Repository for queue job execution records.

Provides the database access layer for the monitor: filtered and paginated
record listing, distinct queue names, and time-window aggregates.
"""

import logging
from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from src.queue_monitor.core.filters import (
    FilterCriteria,
    RunState,
    WindowAggregate,
    WindowAggregateQuery,
)
from src.queue_monitor.database.models.monitor import Monitor
from src.queue_monitor.exceptions import DataSourceError

logger = logging.getLogger(__name__)


def apply_filters(query: Query, criteria: FilterCriteria) -> Query:
    """Apply run-state and queue filters to a Monitor query.

    Args:
        query: Query selecting from Monitor
        criteria: Filters to apply

    Returns:
        Filtered query
    """
    if criteria.run_state is RunState.RUNNING:
        query = query.filter(Monitor.finished_at.is_(None))
    elif criteria.run_state is RunState.FAILED:
        query = query.filter(Monitor.failed.is_(True), Monitor.finished_at.isnot(None))
    elif criteria.run_state is RunState.SUCCEEDED:
        query = query.filter(Monitor.failed.is_(False), Monitor.finished_at.isnot(None))

    if criteria.filters_queue:
        query = query.filter(Monitor.queue == criteria.queue)

    return query


class MonitorRepository:
    """Repository for job execution records.

    Read operations wrap storage failures in DataSourceError. The write
    operations belong to the job instrumentation and are kept here so
    that records have a single owner of their schema.
    """

    def __init__(self, db: Session):
        """Initialize repository with database session.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    def create_record(
        self,
        queue: str,
        started_at: datetime,
        job_id: Optional[str] = None,
        name: Optional[str] = None,
        attempt: int = 1,
    ) -> Monitor:
        """Create a running job execution record.

        Args:
            queue: Queue the job runs on
            started_at: Execution start time
            job_id: Broker job identifier
            name: Job display name
            attempt: Attempt number

        Returns:
            Created Monitor instance

        Raises:
            ValueError: If queue is empty
        """
        if not queue:
            raise ValueError("queue must be a non-empty string")

        record = Monitor(
            job_id=job_id,
            name=name,
            queue=queue,
            started_at=started_at,
            attempt=attempt,
            failed=False,
        )
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        logger.info(f"Created monitor record for job {name or job_id} on {queue} (id={record.id})")
        return record

    def finish_record(
        self,
        record_id: int,
        finished_at: datetime,
        failed: bool = False,
        exception_message: Optional[str] = None,
    ) -> Optional[Monitor]:
        """Mark a running record as finished.

        Args:
            record_id: Monitor record ID
            finished_at: Execution finish time
            failed: Whether the job failed
            exception_message: Exception message if the job failed

        Returns:
            Updated Monitor instance or None if not found

        Raises:
            ValueError: If the record is already finished
        """
        record = self.db.query(Monitor).filter(Monitor.id == record_id).first()
        if not record:
            logger.warning(f"Monitor record {record_id} not found")
            return None
        if record.is_finished():
            raise ValueError(f"Monitor record {record_id} is already finished")

        record.finished_at = finished_at
        record.failed = failed
        record.exception_message = exception_message
        record.time_elapsed = (finished_at - record.started_at).total_seconds()

        self.db.commit()
        self.db.refresh(record)
        logger.info(f"Finished monitor record {record_id} (failed={failed})")
        return record

    def list_records(
        self,
        criteria: FilterCriteria,
        limit: int,
        offset: int = 0,
    ) -> Tuple[List[Monitor], int]:
        """List records matching filters, most recent first.

        Ordering is started_at descending with id descending as the
        tie-breaker, so pages never overlap or skip rows.

        Args:
            criteria: Run-state and queue filters
            limit: Maximum number of records to return
            offset: Number of records to skip

        Returns:
            Tuple of (page of Monitor instances, total matching count)

        Raises:
            DataSourceError: If the query fails
        """
        try:
            query = apply_filters(self.db.query(Monitor), criteria)
            total = query.count()
            records = (
                query.order_by(Monitor.started_at.desc(), Monitor.id.desc())
                .limit(limit)
                .offset(offset)
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to list monitor records: {e}")
            raise DataSourceError("Failed to list job records", operation="list_records") from e

        return records, total

    def list_distinct_queues(self) -> List[str]:
        """List every queue name that appears in at least one record.

        Returns:
            Alphabetically sorted unique queue names

        Raises:
            DataSourceError: If the query fails
        """
        try:
            rows = (
                self.db.query(Monitor.queue)
                .group_by(Monitor.queue)
                .order_by(Monitor.queue)
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to list queues: {e}")
            raise DataSourceError("Failed to list queues", operation="list_distinct_queues") from e

        return [row[0] for row in rows]

    def aggregate_window(self, window: WindowAggregateQuery) -> Optional[WindowAggregate]:
        """Aggregate elapsed time over records started within a window.

        Records without an elapsed time (still running) are counted and
        contribute zero seconds.

        Args:
            window: Half-open [start, end) range on started_at

        Returns:
            WindowAggregate, or None when no record started in the window

        Raises:
            DataSourceError: If the query fails or returns a malformed row
        """
        elapsed = func.coalesce(Monitor.time_elapsed, 0.0)
        try:
            row = (
                self.db.query(
                    func.count(Monitor.id),
                    func.sum(elapsed),
                    func.avg(elapsed),
                )
                .filter(Monitor.started_at >= window.start, Monitor.started_at < window.end)
                .one()
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to aggregate window {window.start} - {window.end}: {e}")
            raise DataSourceError("Failed to aggregate job records", operation="aggregate_window") from e

        count, total, average = row
        if count is None:
            raise DataSourceError("Aggregate query returned no count", operation="aggregate_window")
        if count == 0:
            return None

        return WindowAggregate(
            count=int(count),
            total_elapsed=float(total or 0.0),
            average_elapsed=float(average) if average is not None else None,
        )
