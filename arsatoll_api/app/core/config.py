"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so that
the API starts without any configuration at all.  Tests and embedding
applications may also build a ``Settings`` instance explicitly and
hand it to ``create_app``.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Arsatoll API")
    api_version: str = os.getenv("API_VERSION", "0.0.1")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  Empty means console logging only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Path for the SQLite database.  If a relative path is provided, it
    # will be resolved relative to the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "arsatoll.db")

    # Prefix under which the REST resources are mounted.
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    # Application name used in the ``X-<app>-alert`` response headers.
    app_name: str = os.getenv("APP_NAME", "arsatollserviceApp")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
