# src/strip_scheduler/packing/first_fit.py

from __future__ import annotations

import logging
from typing import Optional

from strip_scheduler.ingestion import check_fits_strip
from strip_scheduler.models import Level, Task
from strip_scheduler.packing.levels import fits, open_level, place

logger = logging.getLogger(__name__)


def first_closed_level(levels: list[Level], task: Task, strip_width: int) -> Optional[Level]:
    """
    Return the earliest level, other than the newest one, with room for `task`.
    """
    for level in levels[:-1]:
        if fits(level, task, strip_width):
            return level
    return None


def pack_ffdh(tasks: list[Task], strip_width: int) -> list[Level]:
    """
    First-Fit Decreasing-Height.
    - Expects tasks already sorted by non-increasing duration
    - Tries earlier levels in creation order first, then the current level
    - Opens a new level only when neither has room
    - Deterministic: the same input always gives the same placements
    """
    check_fits_strip(tasks, strip_width)

    levels: list[Level] = []
    if not tasks:
        return levels

    current = open_level(levels, tasks[0])

    for task in tasks[1:]:
        # Earlier levels are checked before the current one
        earlier = first_closed_level(levels, task, strip_width)
        if earlier is not None:
            place(earlier, task)
            logger.debug(f"FFDH: task {task.id} reused level {earlier.index}")
            continue

        if fits(current, task, strip_width):
            place(current, task)
            continue

        current = open_level(levels, task)
        logger.debug(f"FFDH: task {task.id} opened level {current.index} (height={current.height})")

    logger.debug(f"FFDH: packed {len(tasks)} tasks into {len(levels)} levels")
    return levels
