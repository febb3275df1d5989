"""Level building shared by the decreasing-height packers."""

from __future__ import annotations

from strip_scheduler.models import Level, Placement, Task


def fits(level: Level, task: Task, strip_width: int) -> bool:
    return level.free_width(strip_width) >= task.width


def place(level: Level, task: Task) -> Placement:
    """
    Put the task at the right edge of what the level already holds.

    The caller must have checked fits(); no capacity check happens here.
    """
    placement = Placement(
        task_id=task.id,
        level=level.index,
        start=level.occupied_width,
        width=task.width,
        duration=task.duration,
        start_time=level.base,
    )
    level.placements.append(placement)
    level.occupied_width += task.width
    return placement


def open_level(levels: list[Level], task: Task) -> Level:
    """Stack a new level on top of the last one, sized by `task`, and place it there."""
    base = levels[-1].top if levels else 0
    level = Level(index=len(levels), height=task.duration, base=base)
    levels.append(level)
    place(level, task)
    return level
