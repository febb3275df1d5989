from __future__ import annotations

from typing import Optional

from strip_scheduler.models import Level, Placement, ScheduleResult, Task


def makespan(levels: list[Level]) -> int:
    """Top of the last level, i.e. the sum of all level heights."""
    return levels[-1].top if levels else 0


def total_work(tasks: list[Task], strip_width: int) -> float:
    """Schedule length of a perfect packing with no idle units."""
    return sum(t.area for t in tasks) / strip_width


def efficiency(ts: float, w: float) -> float:
    # 0.0 means a perfect packing
    return 0.0 if w == 0 else (ts - w) / w


def compute_metrics(levels: list[Level], tasks: list[Task], strip_width: int) -> tuple[int, float, float]:
    ts = makespan(levels)
    w = total_work(tasks, strip_width)
    return ts, w, efficiency(ts, w)


def placement_records(levels: list[Level]) -> list[Placement]:
    """Every placement, level by level in creation order, then in placement order."""
    return [p for level in levels for p in level.placements]


def build_result(
    algorithm: str,
    strip_width: int,
    tasks: list[Task],
    levels: list[Level],
    elapsed_ms: Optional[float] = None,
) -> ScheduleResult:
    ts, w, e = compute_metrics(levels, tasks, strip_width)
    return ScheduleResult(
        algorithm=algorithm,
        strip_width=strip_width,
        task_count=len(tasks),
        levels=levels,
        placements=placement_records(levels),
        makespan=ts,
        total_work=w,
        efficiency=e,
        elapsed_ms=elapsed_ms,
    )
