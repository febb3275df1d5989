"""Error kinds raised by ingestion, packing and file handling."""

from __future__ import annotations

from typing import Optional


class SchedulingError(Exception):
    """Base class for every failure of a scheduling run."""


class MalformedInputError(SchedulingError, ValueError):
    """A record does not parse into two positive integers."""

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class OversizedTaskError(SchedulingError, ValueError):
    """A task needs more units than the strip provides."""

    def __init__(self, task_id: int, width: int, strip_width: int):
        super().__init__(
            f"task {task_id} requires {width} units but the strip only has {strip_width}"
        )
        self.task_id = task_id
        self.width = width
        self.strip_width = strip_width


class InvalidParameterError(SchedulingError, ValueError):
    """A numeric run parameter (strip width, generator bounds) is out of range."""


class ScheduleIOError(SchedulingError, OSError):
    """A task file could not be read or an output file could not be written."""

    def __init__(self, path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
