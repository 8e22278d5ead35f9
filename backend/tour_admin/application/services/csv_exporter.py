"""CSV export of the records currently shown on a list page.

Headers are the first record's keys. Lists are joined with "; ", nested
objects are JSON encoded, ``None`` is empty and every cell is quoted.
"""

import csv
import io
import json
import logging
from collections.abc import Callable, Mapping, Sequence
from datetime import date
from pathlib import Path
from typing import Any

from tour_admin.domain.exceptions import NoDataToExportError
from tour_admin.infrastructure.logging.colored_logger import WorkflowLogger, WorkflowStage

logger = logging.getLogger(__name__)
wlog = WorkflowLogger("CsvExporter")


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return "; ".join(
            json.dumps(item, ensure_ascii=False) if isinstance(item, (dict, list)) else str(item)
            for item in value
        )
    if isinstance(value, dict):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def render_csv(rows: Sequence[Mapping[str, Any]]) -> str:
    if not rows:
        return ""
    headers = list(rows[0].keys())
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(headers)
    for row in rows:
        writer.writerow([_cell(row.get(header)) for header in headers])
    return buffer.getvalue()


def export_filename(resource: str, day: date) -> str:
    return f"{resource}_{day.isoformat()}.csv"


class CsvExporter:
    """Writes ``<resource>_<YYYY-MM-DD>.csv`` files into ``export_dir``."""

    def __init__(self, export_dir: str | Path, today: Callable[[], date] = date.today):
        self._export_dir = Path(export_dir)
        self._today = today

    def build(self, rows: Sequence[Mapping[str, Any]], resource: str) -> tuple[str, str]:
        """Return ``(filename, content)``; an empty list raises NoDataToExportError."""
        if not rows:
            raise NoDataToExportError(resource)
        return export_filename(resource, self._today()), render_csv(rows)

    def export(self, rows: Sequence[Mapping[str, Any]], resource: str) -> Path:
        filename, content = self.build(rows, resource)
        self._export_dir.mkdir(parents=True, exist_ok=True)
        path = self._export_dir / filename
        path.write_text(content, encoding="utf-8")
        wlog.step_complete(WorkflowStage.EXPORT, f"Exported {len(rows)} {resource}", file=str(path))
        return path
