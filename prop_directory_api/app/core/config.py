"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with sample data and the stock admin account out of
the box.  Override them via environment variables in any deployment
that is reachable by other people.
"""

import os
from dataclasses import dataclass

from fastapi import Request


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Prop Firm Directory API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Credentials of the single admin account accepted by
    # ``POST /api/auth/admin/login``.  The password is hashed when the
    # store is built and never kept in plain text afterwards.
    admin_username: str = os.getenv("ADMIN_USERNAME", "admin")
    admin_password: str = os.getenv("ADMIN_PASSWORD", "admin123")

    # Populate the store with a handful of firms, resources and reviews
    # at startup.  Tests switch this off to start from an empty store.
    seed_sample_data: bool = _env_flag("SEED_SAMPLE_DATA", "true")

    # Upper bound on the number of firms returned by the compare endpoint.
    compare_limit: int = int(os.getenv("COMPARE_LIMIT", "5"))

    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))


def get_settings(request: Request) -> Settings:
    """FastAPI dependency returning the settings the app was built with."""
    return request.app.state.settings


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
