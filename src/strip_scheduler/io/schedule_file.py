"""Schedule output: the per-task text file and the JSON report."""

from __future__ import annotations

import json
from pathlib import Path

from strip_scheduler.errors import ScheduleIOError
from strip_scheduler.models import Placement, ScheduleResult


def format_placement(p: Placement) -> str:
    return f"{{task №{p.task_id}, StartEM: {p.start} EMCount: {p.width}, Time: {p.duration}, L: {p.level}}}"


def format_schedule(result: ScheduleResult) -> list[str]:
    return [format_placement(p) for p in result.placements]


def write_schedule(result: ScheduleResult, path: str | Path = "schedule.txt") -> Path:
    """
    Write one line per task, level by level in placement order.

    Overwrites the file on every run.
    """
    output_path = Path(path)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            for line in format_schedule(result):
                f.write(line + "\n")
    except OSError as e:
        raise ScheduleIOError(output_path, e.strerror or str(e)) from e
    return output_path


def write_report(result: ScheduleResult, path: str | Path = "schedule.json") -> Path:
    """
    Write the full result as JSON.

    Creates parent folders if needed, writes JSON with indent=2 and
    sort_keys=True, and overwrites the file on every run.
    """
    output_path = Path(path).resolve()
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(result.model_dump(), f, indent=2, sort_keys=True)
    except OSError as e:
        raise ScheduleIOError(output_path, e.strerror or str(e)) from e
    return output_path
