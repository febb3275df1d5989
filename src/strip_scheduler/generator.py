"""Random task instances for experiments."""

from __future__ import annotations

import random
from pathlib import Path
from typing import Optional

from strip_scheduler.errors import InvalidParameterError
from strip_scheduler.io.task_file import write_task_file


def _draw(rng: random.Random, upper: int) -> int:
    # Half-open [1, upper); a degenerate range always gives 1
    return rng.randrange(1, upper) if upper > 1 else 1


def generate_tasks(
    count: int,
    max_width: int,
    max_duration: int,
    rng: Optional[random.Random] = None,
) -> list[tuple[int, int]]:
    """
    Draw `count` (width, duration) pairs.

    Args:
        count: Number of tasks (0 or more)
        max_width: Exclusive upper bound for widths
        max_duration: Exclusive upper bound for durations
        rng: Source of randomness; a fresh unseeded Random when omitted

    Returns:
        List of (width, duration) pairs in generation order
    """
    if count < 0:
        raise InvalidParameterError(f"task count must be >= 0, got {count}")
    if max_width < 1 or max_duration < 1:
        raise InvalidParameterError(
            f"max_width and max_duration must be >= 1, got {max_width} and {max_duration}"
        )

    rng = rng or random.Random()
    return [(_draw(rng, max_width), _draw(rng, max_duration)) for _ in range(count)]


def generated_filename(count: int) -> str:
    return f"tasks{count}.txt"


def generate_task_file(
    count: int,
    max_width: int,
    max_duration: int,
    directory: str | Path = ".",
    rng: Optional[random.Random] = None,
) -> Path:
    pairs = generate_tasks(count, max_width, max_duration, rng)
    return write_task_file(Path(directory) / generated_filename(count), pairs)
