"""
Exception classes for the queue monitor.

This module defines the exception hierarchy raised by the record query
and metrics services, separating bad caller input from storage failures.
"""

from typing import Optional


class QueueMonitorError(Exception):
    """Base exception for all queue monitor errors."""

    pass


class ValidationError(QueueMonitorError):
    """Malformed filter or pagination input.

    Attributes:
        field: Name of the offending request field
        message: Human-readable explanation
    """

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class DataSourceError(QueueMonitorError):
    """Job record storage is unreachable or returned malformed results.

    Attributes:
        operation: Repository operation that failed
    """

    def __init__(self, message: str, operation: Optional[str] = None):
        self.operation = operation
        super().__init__(message)
