# src/strip_scheduler/packing/next_fit.py

from __future__ import annotations

import logging

from strip_scheduler.ingestion import check_fits_strip
from strip_scheduler.models import Level, Task
from strip_scheduler.packing.levels import fits, open_level, place

logger = logging.getLogger(__name__)


def pack_nfdh(tasks: list[Task], strip_width: int) -> list[Level]:
    """
    Next-Fit Decreasing-Height.
    - Expects tasks already sorted by non-increasing duration
    - Only the most recent level is ever considered
    - A task that does not fit closes the level and opens a new one above it
    """
    check_fits_strip(tasks, strip_width)

    levels: list[Level] = []
    if not tasks:
        return levels

    current = open_level(levels, tasks[0])

    for task in tasks[1:]:
        if fits(current, task, strip_width):
            place(current, task)
            continue

        current = open_level(levels, task)
        logger.debug(f"NFDH: task {task.id} opened level {current.index} (height={current.height})")

    logger.debug(f"NFDH: packed {len(tasks)} tasks into {len(levels)} levels")
    return levels
