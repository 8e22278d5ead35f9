"""Console settings: environment variables, ``.env`` files and runtime overrides."""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]

# Edited at runtime by operators; only the keys below are honoured
RUNTIME_OVERRIDES_FILE = Path("data/settings.json")
RUNTIME_OVERRIDABLE = ("tag_suggestion_model",)


def _read_runtime_overrides() -> dict[str, Any]:
    if not RUNTIME_OVERRIDES_FILE.is_file():
        return {}
    try:
        data = json.loads(RUNTIME_OVERRIDES_FILE.read_text("utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable %s: %s", RUNTIME_OVERRIDES_FILE, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: expected a JSON object", RUNTIME_OVERRIDES_FILE)
        return {}
    return data


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Tour Admin Console"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:5173"]

    # Travel platform admin backend
    admin_api_base_url: str = "http://localhost:3000"
    admin_api_token: str = ""
    admin_api_timeout: float = 30.0

    # List pages
    search_debounce_seconds: float = 0.5

    # CSV export target directory
    export_dir: str = "exports"

    # Tag suggestions via OpenRouter
    openrouter_api_key: str = ""
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    openrouter_app_name: str = "Tour Admin Console"
    tag_suggestion_model: str = "google/gemini-3-flash-preview"

    # Log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"
    log_level_http: str = "WARNING"          # httpx / httpcore
    log_level_uvicorn: str = "INFO"
    log_level_admin_api: str = "INFO"        # backend client and session
    log_level_workflow: str = "INFO"         # list / form / export trace
    log_level_openrouter: str = "INFO"

    model_config = {
        "env_file": (_BACKEND_DIR / ".env", ".env"),
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        overrides = _read_runtime_overrides()
        for key in RUNTIME_OVERRIDABLE:
            value = overrides.get(key)
            if isinstance(value, str) and value.strip():
                object.__setattr__(self, key, value.strip())


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings, read once."""
    return Settings()
