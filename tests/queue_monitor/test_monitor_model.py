"""Tests for the Monitor database model.

Tests derived run state and column defaults.
"""

from datetime import datetime, timedelta

import pytest

from src.queue_monitor.core.filters import RunState
from src.queue_monitor.database.models import Monitor


class TestMonitorModel:
    """Test cases for the Monitor model."""

    def test_defaults_applied_on_insert(self, test_db):
        record = Monitor(queue="default", started_at=datetime(2026, 10, 1, 9, 0))
        test_db.add(record)
        test_db.commit()
        test_db.refresh(record)

        assert record.id is not None
        assert record.failed is False
        assert record.attempt == 1
        assert record.finished_at is None
        assert record.time_elapsed is None

    def test_running_state(self):
        record = Monitor(queue="default", started_at=datetime(2026, 10, 1, 9, 0), failed=False)

        assert not record.is_finished()
        assert not record.has_failed()
        assert not record.has_succeeded()
        assert record.run_state == "running"

    def test_succeeded_state(self):
        started = datetime(2026, 10, 1, 9, 0)
        record = Monitor(
            queue="default",
            started_at=started,
            finished_at=started + timedelta(seconds=3),
            time_elapsed=3.0,
            failed=False,
        )

        assert record.has_succeeded()
        assert record.run_state == "succeeded"

    def test_failed_state(self):
        started = datetime(2026, 10, 1, 9, 0)
        record = Monitor(
            queue="default",
            started_at=started,
            finished_at=started + timedelta(seconds=3),
            failed=True,
        )

        assert record.has_failed()
        assert not record.has_succeeded()
        assert record.run_state == "failed"

    def test_failed_flag_ignored_while_running(self):
        record = Monitor(queue="default", started_at=datetime(2026, 10, 1, 9, 0), failed=True)

        assert record.run_state == "running"
        assert not record.has_failed()

    def test_repr(self):
        record = Monitor(id=7, queue="emails", started_at=datetime(2026, 10, 1, 9, 0))
        assert "emails" in repr(record)
        assert "running" in repr(record)

    @pytest.mark.parametrize(
        "finished,failed,expected",
        [
            (False, False, RunState.RUNNING),
            (True, False, RunState.SUCCEEDED),
            (True, True, RunState.FAILED),
        ],
    )
    def test_run_state_is_a_filter_value(self, finished, failed, expected):
        started = datetime(2026, 10, 1, 9, 0)
        record = Monitor(
            queue="default",
            started_at=started,
            finished_at=started + timedelta(seconds=1) if finished else None,
            failed=failed,
        )

        assert RunState(record.run_state) is expected
