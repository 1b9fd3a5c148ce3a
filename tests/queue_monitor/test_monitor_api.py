"""Tests for queue monitor API endpoints.

Tests the dashboard, record listing, queue listing and metrics endpoints,
including validation and storage error responses.
"""

from datetime import datetime, timedelta
from unittest.mock import patch

from fastapi import status

from src.queue_monitor.exceptions import DataSourceError


class TestDashboard:
    """Test cases for GET /api/v1/monitor."""

    def test_dashboard_defaults(self, client, mixed_records):
        response = client.get("/api/v1/monitor")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["total"] == 7
        assert data["page"] == 1
        assert data["page_size"] == 5
        assert data["last_page"] == 2
        assert len(data["jobs"]) == 5
        assert data["filters"] == {"type": "all", "queue": "all"}
        assert data["queues"] == ["default", "emails", "reports"]
        assert data["metrics_enabled"] is True
        assert data["metrics"] is not None

    def test_dashboard_filters_echoed(self, client, mixed_records):
        response = client.get("/api/v1/monitor", params={"type": "running", "queue": "emails"})

        data = response.json()
        assert data["filters"] == {"type": "running", "queue": "emails"}
        assert data["total"] == 1
        assert data["jobs"][0]["run_state"] == "running"
        assert data["jobs"][0]["finished_at"] is None
        # Queue list is not narrowed by filters
        assert len(data["queues"]) == 3

    def test_invalid_type_names_field(self, client):
        response = client.get("/api/v1/monitor", params={"type": "queued"})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        data = response.json()
        assert data["error"] == "ValidationError"
        assert data["detail"] == {"field": "type"}
        assert data["path"] == "/api/v1/monitor"

    def test_invalid_page_rejected(self, client):
        response = client.get("/api/v1/monitor", params={"page": 0})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_metrics_disabled(self, client, test_settings, mixed_records):
        test_settings.show_metrics = False

        data = client.get("/api/v1/monitor").json()

        assert data["metrics_enabled"] is False
        assert data["metrics"] is None

    def test_data_source_error_returns_503(self, client):
        with patch(
            "src.queue_monitor.repositories.monitor.MonitorRepository.list_records",
            side_effect=DataSourceError("Failed to list job records", operation="list_records"),
        ):
            response = client.get("/api/v1/monitor")

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        data = response.json()
        assert data["error"] == "DataSourceError"
        assert data["path"] == "/api/v1/monitor"


class TestListJobs:
    """Test cases for GET /api/v1/monitor/jobs."""

    def test_list_failed_jobs(self, client, mixed_records):
        response = client.get("/api/v1/monitor/jobs", params={"type": "failed"})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["total"] == 2
        assert {job["run_state"] for job in data["jobs"]} == {"failed"}

    def test_custom_page_size(self, client, mixed_records):
        data = client.get("/api/v1/monitor/jobs", params={"page_size": 3, "page": 3}).json()

        assert data["page_size"] == 3
        assert len(data["jobs"]) == 1
        assert data["last_page"] == 3

    def test_jobs_most_recent_first(self, client, mixed_records):
        data = client.get("/api/v1/monitor/jobs", params={"page_size": 100}).json()

        started = [job["started_at"] for job in data["jobs"]]
        assert started == sorted(started, reverse=True)

    def test_unknown_queue_is_empty(self, client, mixed_records):
        data = client.get("/api/v1/monitor/jobs", params={"queue": "missing"}).json()

        assert data["total"] == 0
        assert data["jobs"] == []


class TestListQueues:
    """Test cases for GET /api/v1/monitor/queues."""

    def test_list_queues(self, client, mixed_records):
        response = client.get("/api/v1/monitor/queues")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"queues": ["default", "emails", "reports"], "total": 3}


class TestMetrics:
    """Test cases for GET /api/v1/monitor/metrics."""

    def test_insufficient_data(self, client):
        data = client.get("/api/v1/monitor/metrics").json()

        assert data["enabled"] is True
        assert data["window_days"] == 2
        assert data["insufficient_data"] is True
        assert data["metrics"] == []

    def test_metrics_payload(self, client, make_record):
        now = datetime.utcnow()
        make_record(started_at=now - timedelta(days=1), elapsed=8.0)
        make_record(started_at=now - timedelta(days=1, hours=2), elapsed=4.0)
        make_record(started_at=now - timedelta(days=3), elapsed=6.0)

        data = client.get("/api/v1/monitor/metrics").json()

        assert data["insufficient_data"] is False
        jobs, total, average = data["metrics"]
        assert jobs["label"] == "Total Jobs Executed"
        assert jobs["format"] == "integer"
        assert jobs["current_value"] == 2
        assert isinstance(jobs["current_value"], int)
        assert isinstance(jobs["previous_value"], int)
        assert jobs["previous_value"] == 1
        assert jobs["change_kind"] == "numeric"
        assert jobs["percentage_change"] == 100.0
        assert total["current_value"] == 12.0
        assert isinstance(total["current_value"], float)
        assert total["format"] == "seconds"
        assert average["format"] == "seconds_2dp"
        assert average["percentage_change"] == 0.0

    def test_window_days_override(self, client, make_record):
        now = datetime.utcnow()
        make_record(started_at=now - timedelta(days=5), elapsed=1.0)
        make_record(started_at=now - timedelta(days=12), elapsed=1.0)

        data = client.get("/api/v1/monitor/metrics", params={"window_days": 7}).json()

        assert data["window_days"] == 7
        assert data["insufficient_data"] is False

    def test_invalid_window_rejected(self, client):
        response = client.get("/api/v1/monitor/metrics", params={"window_days": 0})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_disabled_by_config(self, client, test_settings):
        test_settings.show_metrics = False

        data = client.get("/api/v1/monitor/metrics").json()

        assert data["enabled"] is False
        assert data["metrics"] == []
