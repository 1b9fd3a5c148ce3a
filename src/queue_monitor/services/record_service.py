"""Service layer for listing job execution records."""

import logging
import math
from dataclasses import dataclass
from typing import List

from src.queue_monitor.core.filters import FilterCriteria
from src.queue_monitor.database.models.monitor import Monitor
from src.queue_monitor.exceptions import ValidationError
from src.queue_monitor.repositories.monitor import MonitorRepository

logger = logging.getLogger(__name__)


@dataclass
class RecordPage:
    """One page of job records.

    Attributes:
        items: Records on this page, most recent first
        total: Total records matching the filters
        page: 1-based page number
        page_size: Maximum records per page
    """

    items: List[Monitor]
    total: int
    page: int
    page_size: int

    @property
    def last_page(self) -> int:
        return max(1, math.ceil(self.total / self.page_size))

    @property
    def has_more_pages(self) -> bool:
        return self.page < self.last_page


class RecordQueryService:
    """Filtered, paginated access to job execution records.

    Attributes:
        repository: Job record data access
    """

    def __init__(self, repository: MonitorRepository):
        self.repository = repository

    def list_records(self, criteria: FilterCriteria, page: int, page_size: int) -> RecordPage:
        """List one page of records matching the filters.

        Args:
            criteria: Run-state and queue filters
            page: 1-based page number
            page_size: Records per page

        Returns:
            RecordPage with items and total count

        Raises:
            ValidationError: If page or page_size is not positive
            DataSourceError: If storage fails
        """
        if page < 1:
            raise ValidationError("page", "must be a positive integer")
        if page_size < 1:
            raise ValidationError("page_size", "must be a positive integer")

        items, total = self.repository.list_records(
            criteria,
            limit=page_size,
            offset=(page - 1) * page_size,
        )
        logger.debug(
            f"Listed {len(items)} of {total} records "
            f"(filters={criteria.as_dict()}, page={page})"
        )
        return RecordPage(items=items, total=total, page=page, page_size=page_size)

    def list_distinct_queues(self) -> List[str]:
        """List every queue name seen in any record."""
        return self.repository.list_distinct_queues()
