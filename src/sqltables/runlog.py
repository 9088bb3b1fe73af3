"""Run log: one JSON line per extraction, in daily files per project.

Files live under ~/.sqltables/logs/<project-slug>/<YYYY-MM-DD>.jsonl, the
slug being the working directory's path segments joined by `-`.
"""

from __future__ import annotations

import contextlib
import json
import os
from datetime import UTC, date, datetime, timedelta
from pathlib import Path

from sqltables.config import APP_DIR, DEFAULT_RETENTION_DAYS
from sqltables.diagnostics import ExtractionResult

_LOG_ROOT = APP_DIR / "logs"
_DATE_FORMAT = "%Y-%m-%d"


def _project_slug() -> str:
    return "-".join(part for part in os.getcwd().split(os.sep) if part)


def _project_logs() -> Path:
    return _LOG_ROOT / _project_slug()


def _file_date(log_file: Path) -> date | None:
    """Date encoded in a log file name; None for files the log did not write."""
    try:
        return datetime.strptime(log_file.stem, _DATE_FORMAT).date()
    except ValueError:
        return None


def log_extraction(
    result: ExtractionResult,
    *,
    source: str,
    duration_ms: float | None = None,
) -> Path:
    """Append one entry for an extraction run. Returns the file written to."""
    now = datetime.now(UTC)
    entry = {
        "ts": now.isoformat(),
        "source": source,
        "dialect": result.dialect,
        "sql": result.sql,
        "tables": result.tables,
        "statements": result.statements,
        "failed": result.failed,
        "diagnostics": result.codes(),
        "duration_ms": duration_ms,
    }

    log_file = _project_logs() / f"{now.strftime(_DATE_FORMAT)}.jsonl"
    log_file.parent.mkdir(parents=True, exist_ok=True)
    with open(log_file, "a") as f:
        f.write(json.dumps(entry) + "\n")
    return log_file


def cleanup_old_logs(*, retention_days: int = DEFAULT_RETENTION_DAYS) -> int:
    """Delete this project's log files older than retention_days. Returns the count."""
    project_logs = _project_logs()
    if not project_logs.is_dir():
        return 0

    cutoff = datetime.now(UTC).date() - timedelta(days=retention_days)
    expired = [
        log_file
        for log_file in project_logs.glob("*.jsonl")
        if (day := _file_date(log_file)) is not None and day < cutoff
    ]
    for log_file in expired:
        log_file.unlink()

    # Drop the project directory once nothing is left in it.
    with contextlib.suppress(OSError):
        project_logs.rmdir()

    return len(expired)
