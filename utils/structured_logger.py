# utils/structured_logger.py

import json
import shutil
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from core.paths import STRUCT_LOG_FILE

MAX_BYTES = 5 * 1024 * 1024  # 5 MB before rotation
ARCHIVE_DIR_NAME = "archive"

_lock = threading.Lock()


def _rotate_if_needed(log_file: Path):
    if log_file.exists() and log_file.stat().st_size >= MAX_BYTES:
        archive_dir = log_file.parent / ARCHIVE_DIR_NAME
        archive_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
        archived = archive_dir / f"{log_file.stem}_{timestamp}{log_file.suffix}"
        shutil.move(str(log_file), str(archived))


def log_event(
    run_id: str,
    step: str,
    input_data=None,
    output_data=None,
    outcome: str = "ok",
    extra: dict | None = None,
    log_file: Optional[Path] = None,
):
    """
    Appends a structured event as a single line JSON (NDJSON). Thread-safe.
    """
    log_file = Path(log_file or STRUCT_LOG_FILE)
    entry = {
        "run_id": run_id,
        "step": step,
        "input": input_data,
        "output": output_data,
        "outcome": outcome,
        "extra": extra or {},
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    line = json.dumps(entry, ensure_ascii=False)
    with _lock:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _rotate_if_needed(log_file)
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(line + "\n")


def read_events(run_id: str = None, limit: int = 100, log_file: Optional[Path] = None):
    """
    Reads the last `limit` events, optionally filtered by run_id.
    """
    log_file = Path(log_file or STRUCT_LOG_FILE)
    if not log_file.exists():
        return []

    results = []
    with open(log_file, "r", encoding="utf-8") as f:
        for line in f:
            try:
                obj = json.loads(line)
            except json.JSONDecodeError:
                continue
            if run_id is None or obj.get("run_id") == run_id:
                results.append(obj)
    return results[-limit:]
