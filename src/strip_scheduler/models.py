from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from typing import Optional


class Task(BaseModel):
    """Task model: a block of identical units held for a fixed duration."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=1, description="Position of the task in the input (1-based)")
    width: int = Field(gt=0, description="Number of contiguous units required")
    duration: int = Field(gt=0, description="Time the units are held")

    @property
    def area(self) -> int:
        return self.width * self.duration


class Placement(BaseModel):
    """Placement model representing where a task landed on the strip."""

    model_config = ConfigDict(frozen=True)

    task_id: int = Field(ge=1, description="Identifier of the placed task")
    level: int = Field(ge=0, description="Index of the level holding the task")
    start: int = Field(ge=0, description="First unit occupied by the task")
    width: int = Field(gt=0, description="Number of units occupied")
    duration: int = Field(gt=0, description="Duration of the task")
    start_time: int = Field(ge=0, description="Time at which the task starts")


class Level(BaseModel):
    """
    One row of the strip.

    The height is fixed by the first task placed on the level and the base is
    the sum of the heights of all earlier levels. Only occupied_width and
    placements change after creation.
    """

    index: int = Field(ge=0, frozen=True)
    height: int = Field(gt=0, frozen=True)
    base: int = Field(default=0, ge=0, frozen=True)
    occupied_width: int = 0
    placements: list[Placement] = Field(default_factory=list)

    @property
    def top(self) -> int:
        return self.base + self.height

    def free_width(self, strip_width: int) -> int:
        return strip_width - self.occupied_width


class ScheduleResult(BaseModel):
    """Standard result returned by the packers once metrics are attached."""

    algorithm: str
    strip_width: int = Field(gt=0)
    task_count: int = 0
    levels: list[Level] = Field(default_factory=list)
    placements: list[Placement] = Field(default_factory=list)
    makespan: int = 0
    total_work: float = 0.0
    efficiency: float = 0.0
    elapsed_ms: Optional[float] = None
