"""Line-oriented task files: one "<width> <duration>" record per line."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from strip_scheduler.errors import ScheduleIOError
from strip_scheduler.ingestion import build_tasks, parse_task_lines
from strip_scheduler.models import Task


def read_task_pairs(path: str | Path) -> list[tuple[int, int]]:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ScheduleIOError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise ScheduleIOError(path, f"not a text file ({e.reason})") from e
    return parse_task_lines(text.splitlines())


def read_task_file(path: str | Path, strip_width: int) -> list[Task]:
    """
    Load a task file and return its tasks sorted for packing.

    The whole file is parsed and validated before anything is returned;
    a single bad line rejects the file.
    """
    return build_tasks(read_task_pairs(path), strip_width)


def write_task_file(path: str | Path, pairs: Iterable[tuple[int, int]]) -> Path:
    path = Path(path)
    lines = [f"{width} {duration}\n" for width, duration in pairs]
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.writelines(lines)
    except OSError as e:
        raise ScheduleIOError(path, e.strerror or str(e)) from e
    return path
