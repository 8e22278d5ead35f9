"""Colored workflow trace for the list pages.

A load → edit → save → reload cycle shows up in the terminal as one
colored line per step:

    LOAD      blue      list (re)loads
    SAVE      green     create / update
    DELETE    yellow    single and bulk deletes
    MODERATE  magenta   tour approve / reject
    EXPORT    cyan      CSV export
    SUGGEST   cyan      tag suggestions
    ERROR     red       any failed step
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Any, NamedTuple

_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_RED = "\033[91m"
_GREEN = "\033[92m"
_YELLOW = "\033[93m"
_BLUE = "\033[94m"
_MAGENTA = "\033[95m"
_CYAN = "\033[96m"
_GRAY = "\033[90m"


class Stage(NamedTuple):
    label: str
    color: str
    icon: str


class WorkflowStage:
    LOAD = Stage("LOAD", _BLUE, "🔄")
    SAVE = Stage("SAVE", _GREEN, "💾")
    DELETE = Stage("DELETE", _YELLOW, "🗑️")
    BULK = Stage("BULK", _YELLOW, "📦")
    MODERATE = Stage("MODERATE", _MAGENTA, "⚖️")
    EXPORT = Stage("EXPORT", _CYAN, "📄")
    SUGGEST = Stage("SUGGEST", _CYAN, "🏷️")
    ERROR = Stage("ERROR", _RED, "❌")


def _paint(color: str, text: str, bold: bool = False) -> str:
    return f"{color}{_BOLD if bold else ''}{text}{_RESET}"


def _with_details(line: str, details: dict[str, Any], color: str = _GRAY) -> str:
    if not details:
        return line
    return line + " " + _paint(color, "(" + " | ".join(f"{k}={v}" for k, v in details.items()) + ")")


class WorkflowLogger:
    """Per-component workflow logger under ``tour_admin.workflow.<component>``.

    Usage:
        wlog = WorkflowLogger("ListController")
        wlog.step_start(WorkflowStage.LOAD, "Loading locations", search="cafe")
        wlog.step_complete(WorkflowStage.LOAD, "12 locations loaded")
    """

    def __init__(self, component: str):
        self.component = component
        self._logger = logging.getLogger(f"tour_admin.workflow.{component}")

    def step_start(self, stage: Stage, message: str, **details: Any) -> None:
        head = _paint(stage.color, f"{stage.icon} [{stage.label}]", bold=True)
        self._logger.info(_with_details(f"{head} {_paint(stage.color, message)}", details))

    def step_complete(self, stage: Stage, message: str, **details: Any) -> None:
        head = _paint(stage.color, f"{stage.icon} [{stage.label}]")
        self._logger.info(_with_details(f"{head} {_paint(_GREEN, '✓ ' + message)}", details))

    def step_error(self, stage: Stage, message: str, error: BaseException | None = None) -> None:
        line = f"{_paint(_RED, f'❌ [{stage.label}]', bold=True)} {_paint(_RED, message)}"
        if error is not None:
            line += " " + _paint(_DIM, f"→ {type(error).__name__}: {error}")
        self._logger.error(line)

    def detail(self, message: str, **details: Any) -> None:
        """Debug-level sub-step, indented under the step it belongs to."""
        self._logger.debug(_with_details("   " + _paint(_GRAY, f"├─ {message}"), details, _DIM))

    @asynccontextmanager
    async def timed_step(self, stage: Stage, message: str, **details: Any):
        """Log start, then completion or failure with the elapsed time.

        Usage:
            async with wlog.timed_step(WorkflowStage.SAVE, "Creating location"):
                await client.create(draft)
        """
        self.step_start(stage, message, **details)
        started = time.perf_counter()
        try:
            yield
        except Exception as exc:
            self.step_error(stage, f"{message} failed after {time.perf_counter() - started:.2f}s", error=exc)
            raise
        self.step_complete(stage, f"{message} in {time.perf_counter() - started:.2f}s")
