"""Data schemas for the HTTP API."""

from typing import List, Optional
from pydantic import BaseModel, Field

from strip_scheduler.models import ScheduleResult

MAX_TASKS = 100_000


class TaskSchema(BaseModel):
    """Schema for a task."""
    width: int = Field(gt=0, description="Number of contiguous units required")
    duration: int = Field(gt=0, description="Time the units are held")


class ScheduleRequestSchema(BaseModel):
    """Schema for a scheduling request."""
    algorithm: str = Field(description="NFDH or FFDH (case-insensitive)")
    strip_width: int = Field(gt=0, description="Number of parallel units in the strip")
    tasks: List[TaskSchema] = Field(max_length=MAX_TASKS, description="Tasks in input order")


class ScheduleResponseSchema(BaseModel):
    """Schema for a scheduling response."""
    result: ScheduleResult
    schedule: List[str] = Field(description="Formatted schedule lines, one per task")


class GenerateRequestSchema(BaseModel):
    """Schema for a task generation request."""
    count: int = Field(ge=0, le=MAX_TASKS, description="Number of tasks to generate")
    max_width: int = Field(ge=1, description="Exclusive upper bound for task width")
    max_duration: int = Field(ge=1, description="Exclusive upper bound for task duration")
    seed: Optional[int] = Field(None, description="Seed for a reproducible instance")


class GenerateResponseSchema(BaseModel):
    """Schema for generated tasks."""
    tasks: List[TaskSchema]
