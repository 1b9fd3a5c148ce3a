"""Data access layer repositories."""

from src.queue_monitor.repositories.monitor import MonitorRepository

__all__ = [
    "MonitorRepository",
]
