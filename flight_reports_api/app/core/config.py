"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all, serving the bundled
sample catalog from ``data/flights.json``.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List


# Repository root; relative data paths are resolved against it.
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Flight Reports API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file.  Empty means console logging only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Read-only flight catalog document.
    flights_path: str = os.getenv("FLIGHTS_PATH", "data/flights.json")
    # Report collection document, rewritten after every mutation.
    reports_path: str = os.getenv("REPORTS_PATH", "data/reports.json")

    # When true a missing or unreadable catalog aborts startup.  When
    # false the service falls back to three built-in sample flights.
    strict_catalog: bool = _env_flag("STRICT_CATALOG")

    # Comma‑separated list of browser origins allowed by CORS.
    cors_origins: str = os.getenv("CORS_ORIGINS", "http://localhost:5173")

    def resolve_path(self, value: str) -> Path:
        """Return ``value`` as an absolute path.

        Absolute paths are returned unchanged; relative ones are
        resolved against the repository root.
        """
        path = Path(value)
        if path.is_absolute():
            return path
        return (PROJECT_ROOT / path).resolve()

    @property
    def allowed_origins(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
