"""Logging setup for the console process.

Each category below has a ``log_level_<category>`` setting, so chatty
libraries (httpx, uvicorn access logs) can be turned down without hiding
the CRUD workflow trace.
"""

import logging
import sys

from tour_admin.config import Settings, get_settings

LOG_CATEGORIES: dict[str, tuple[str, ...]] = {
    "http": ("httpx", "httpcore"),
    "uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "admin_api": ("tour_admin.infrastructure.admin_api", "tour_admin.infrastructure.session"),
    "workflow": ("tour_admin.workflow", "tour_admin.application.services"),
    "openrouter": ("tour_admin.infrastructure.openrouter",),
}

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def level_from_name(name: str, default: int = logging.INFO) -> int:
    """``"debug"`` -> ``logging.DEBUG``; unknown names fall back to ``default``."""
    return logging.getLevelNamesMapping().get(name.strip().upper(), default)


def setup_logging(settings: Settings | None = None) -> dict[str, int]:
    """Apply the root and per-category levels; returns the category levels used."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(level_from_name(settings.log_level))
    # uvicorn installs its own handlers; plain scripts and tests get one here
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)

    applied: dict[str, int] = {}
    for category, logger_names in LOG_CATEGORIES.items():
        level = level_from_name(getattr(settings, f"log_level_{category}"))
        applied[category] = level
        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Log levels: root=%s %s",
        settings.log_level,
        " ".join(f"{c}={logging.getLevelName(lvl)}" for c, lvl in applied.items()),
    )
    return applied
