"""Unit tests for per-category logging levels."""

import logging

from tour_admin.config import get_settings
from tour_admin.infrastructure.logging.log_config import setup_logging


def test_category_levels_follow_settings(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL_HTTP", "ERROR")
    monkeypatch.setenv("LOG_LEVEL_WORKFLOW", "debug")
    monkeypatch.setenv("LOG_LEVEL_ADMIN_API", "not-a-level")
    get_settings.cache_clear()
    try:
        setup_logging()

        assert logging.getLogger("httpx").level == logging.ERROR
        assert logging.getLogger("httpcore").level == logging.ERROR
        assert logging.getLogger("tour_admin.workflow").level == logging.DEBUG
        assert logging.getLogger("tour_admin.infrastructure.admin_api").level == logging.INFO
    finally:
        get_settings.cache_clear()


def test_setup_logging_reports_applied_levels(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL_OPENROUTER", "warning")
    get_settings.cache_clear()
    try:
        applied = setup_logging()

        assert applied["openrouter"] == logging.WARNING
        assert applied["http"] == logging.WARNING
        assert set(applied) == {"http", "uvicorn", "admin_api", "workflow", "openrouter"}
    finally:
        get_settings.cache_clear()
