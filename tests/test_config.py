"""Tests for settings helpers and logging setup."""

import logging

from flight_reports_api.app.core.config import PROJECT_ROOT, Settings
from flight_reports_api.app.core.logging_config import setup_logging


def test_resolve_path(tmp_path):
    cfg = Settings()
    assert cfg.resolve_path(str(tmp_path / "x.json")) == tmp_path / "x.json"
    assert cfg.resolve_path("data/flights.json") == (PROJECT_ROOT / "data" / "flights.json").resolve()


def test_allowed_origins_are_split():
    cfg = Settings(cors_origins=" http://localhost:5173 , https://reports.example ,")
    assert cfg.allowed_origins == ["http://localhost:5173", "https://reports.example"]


def test_defaults():
    cfg = Settings()
    assert cfg.flights_path == "data/flights.json"
    assert cfg.reports_path == "data/reports.json"
    assert cfg.strict_catalog is False


def test_setup_logging_configures_once(monkeypatch, tmp_path):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    logfile = tmp_path / "service.log"
    setup_logging("debug", str(logfile))
    try:
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2
        setup_logging("error")
        assert len(root.handlers) == 2
        assert root.level == logging.DEBUG
    finally:
        for handler in root.handlers:
            handler.close()
