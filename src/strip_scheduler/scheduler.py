"""Mode dispatch: pick a packer, time it, and attach metrics."""

from __future__ import annotations

import logging
import time
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

from strip_scheduler.io.schedule_file import write_schedule
from strip_scheduler.io.task_file import read_task_file
from strip_scheduler.metrics import build_result
from strip_scheduler.models import Level, ScheduleResult, Task
from strip_scheduler.packing.first_fit import pack_ffdh
from strip_scheduler.packing.next_fit import pack_nfdh

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    NFDH = "NFDH"
    FFDH = "FFDH"
    GENERATE = "GENERATE"
    INVALID = "INVALID"


PACKERS: dict[Mode, Callable[[list[Task], int], list[Level]]] = {
    Mode.NFDH: pack_nfdh,
    Mode.FFDH: pack_ffdh,
}


def parse_mode(text: str) -> Mode:
    """Case-insensitive; anything unrecognised maps to Mode.INVALID."""
    key = (text or "").strip().upper()
    try:
        return Mode(key)
    except ValueError:
        return Mode.INVALID


def schedule_tasks(tasks: list[Task], strip_width: int, mode: Mode) -> ScheduleResult:
    """
    Pack already-ingested tasks with the packer for `mode`.

    Wall time spent packing is measured here and handed to build_result.
    """
    if mode not in PACKERS:
        raise ValueError(f"{mode.value} is not a packing mode. Valid: {sorted(m.value for m in PACKERS)}")

    started = time.perf_counter()
    levels = PACKERS[mode](tasks, strip_width)
    elapsed_ms = (time.perf_counter() - started) * 1000.0

    result = build_result(mode.value, strip_width, tasks, levels, elapsed_ms=elapsed_ms)
    logger.info(
        f"{mode.value}: tasks={result.task_count}, levels={len(result.levels)}, "
        f"makespan={result.makespan}, efficiency={result.efficiency:.4f}"
    )
    return result


def schedule_file(
    tasks_path: str | Path,
    strip_width: int,
    mode: Mode,
    schedule_path: Optional[str | Path] = None,
) -> ScheduleResult:
    """Read a task file, pack it, and write the schedule file when a path is given."""
    tasks = read_task_file(tasks_path, strip_width)
    result = schedule_tasks(tasks, strip_width, mode)
    if schedule_path is not None:
        write_schedule(result, schedule_path)
    return result
