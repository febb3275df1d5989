"""Task ingestion: parse records, assign ids, reject bad tasks, sort by duration."""

from __future__ import annotations

from typing import Iterable

from strip_scheduler.errors import InvalidParameterError, MalformedInputError, OversizedTaskError
from strip_scheduler.models import Task


def validate_strip_width(strip_width) -> int:
    if isinstance(strip_width, bool) or not isinstance(strip_width, int) or strip_width <= 0:
        raise InvalidParameterError(f"strip width must be a positive integer, got {strip_width!r}")
    return strip_width


def parse_task_line(line: str, line_number: int | None = None) -> tuple[int, int]:
    """
    Parse one "<width> <duration>" record.

    Fields may be separated by any run of whitespace. Both must be positive
    integers and nothing else may follow them.
    """
    fields = line.split()
    if len(fields) != 2:
        raise MalformedInputError(
            f"expected '<width> <duration>', got {len(fields)} field(s)",
            line_number=line_number,
            line=line,
        )

    # plain ASCII digits only: no sign, underscores or other scripts
    if not all(f.isascii() and f.isdigit() for f in fields):
        raise MalformedInputError(
            f"width and duration must be unsigned integers, got {line.strip()!r}",
            line_number=line_number,
            line=line,
        )

    width, duration = int(fields[0]), int(fields[1])
    if width <= 0 or duration <= 0:
        raise MalformedInputError(
            f"width and duration must be positive, got {width} and {duration}",
            line_number=line_number,
            line=line,
        )
    return width, duration


def parse_task_lines(lines: Iterable[str]) -> list[tuple[int, int]]:
    """Parse every non-blank line; blank lines are skipped and consume no id."""
    pairs: list[tuple[int, int]] = []
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        pairs.append(parse_task_line(line, line_number))
    return pairs


def check_fits_strip(tasks: Iterable[Task], strip_width: int) -> None:
    for task in tasks:
        if task.width > strip_width:
            raise OversizedTaskError(task.id, task.width, strip_width)


def sort_tasks(tasks: Iterable[Task]) -> list[Task]:
    """Non-increasing duration. sorted() is stable, so ties keep input order."""
    return sorted(tasks, key=lambda t: t.duration, reverse=True)


def build_tasks(pairs: Iterable[tuple[int, int]], strip_width: int) -> list[Task]:
    """
    Turn (width, duration) pairs into sorted Task objects.

    Ids follow input order starting at 1. Every pair is validated before any
    task is returned, so a bad record anywhere aborts the whole batch.

    Raises:
        InvalidParameterError: strip_width is not a positive integer
        MalformedInputError: a pair is not two positive integers
        OversizedTaskError: a task is wider than the strip
    """
    validate_strip_width(strip_width)

    tasks: list[Task] = []
    for task_id, pair in enumerate(pairs, start=1):
        try:
            width, duration = pair
        except (TypeError, ValueError):
            raise MalformedInputError(f"task {task_id}: expected a (width, duration) pair, got {pair!r}") from None

        for value in (width, duration):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise MalformedInputError(
                    f"task {task_id}: width and duration must be positive integers, got {pair!r}"
                )

        tasks.append(Task(id=task_id, width=width, duration=duration))

    check_fits_strip(tasks, strip_width)
    return sort_tasks(tasks)
