"""Database models for the queue monitor.

Models:
    Monitor: One execution record per background job run
"""

from .monitor import Monitor

__all__ = [
    "Monitor",
]
