"""Configuration management for the queue monitor server.

This module handles configuration loading from environment variables,
providing sensible defaults for development and production.
"""

import logging
import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application configuration settings.

    Attributes:
        app_name: Application name
        version: Application version
        debug: Debug mode flag
        database_path: SQLite database file location
        per_page: Number of job records shown per page
        show_metrics: Whether the metrics section is computed
        metrics_time_frame: Trailing metrics window length in days
        cors_origins: List of allowed CORS origins
        host: Server host address
        port: Server port number
    """

    app_name: str = "Queue Monitor API"
    version: str = "1.0.0"
    debug: bool = False

    # Database configuration
    database_path: str = "~/.queue_monitor/monitor.db"

    # Monitor UI configuration
    per_page: int = Field(default=35, ge=1)
    show_metrics: bool = True
    metrics_time_frame: int = Field(default=2, ge=1)

    # CORS configuration - allow local development origins
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://localhost:8080",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:8080",
    ]

    # Server configuration
    host: str = "0.0.0.0"
    port: int = 8000

    class Config:
        """Pydantic configuration."""
        env_prefix = "QUEUE_MONITOR_"
        case_sensitive = False

    @property
    def database_url(self) -> str:
        """Get SQLAlchemy database URL.

        Returns:
            Database URL string for SQLAlchemy
        """
        expanded_path = os.path.expanduser(self.database_path)
        return f"sqlite:///{expanded_path}"

    def get_database_path(self) -> Path:
        """Get expanded database path as Path object.

        Returns:
            Resolved database file path
        """
        return Path(os.path.expanduser(self.database_path))


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """FastAPI dependency returning the global settings instance."""
    return settings
