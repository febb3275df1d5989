"""FastAPI endpoints for the strip scheduler."""

from __future__ import annotations

import json
import logging
import random
from typing import Any

from fastapi import FastAPI, HTTPException, Response

from strip_scheduler.errors import MalformedInputError, OversizedTaskError
from strip_scheduler.generator import generate_tasks
from strip_scheduler.ingestion import build_tasks
from strip_scheduler.io.schedule_file import format_schedule
from strip_scheduler.io.schemas import (
    GenerateRequestSchema,
    GenerateResponseSchema,
    ScheduleRequestSchema,
    ScheduleResponseSchema,
    TaskSchema,
)
from strip_scheduler.scheduler import PACKERS, parse_mode, schedule_tasks

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Strip Scheduler API",
    description="Level-based scheduling of rectangular tasks on parallel units (NFDH / FFDH)",
)


def error_response(error: str, summary: str, details: dict[str, Any]) -> Response:
    """Friendly 422 body for domain errors."""
    return Response(
        content=json.dumps({"error": error, "summary": summary, "details": details}),
        status_code=422,
        media_type="application/json",
    )


@app.post("/schedule", response_model=ScheduleResponseSchema)
def schedule(request: ScheduleRequestSchema) -> Any:
    """
    Pack the given tasks and return the schedule.

    Input (request body):
        {
            "algorithm": "FFDH",
            "strip_width": 3,
            "tasks": [{"width": 2, "duration": 5}, {"width": 1, "duration": 5}]
        }
    """
    try:
        mode = parse_mode(request.algorithm)
        if mode not in PACKERS:
            return error_response(
                "INVALID_MODE",
                f"Unknown algorithm '{request.algorithm}'",
                {"algorithm": request.algorithm, "valid": sorted(m.value for m in PACKERS)},
            )

        try:
            tasks = build_tasks([(t.width, t.duration) for t in request.tasks], request.strip_width)
        except OversizedTaskError as e:
            return error_response(
                "OVERSIZED_TASK",
                str(e),
                {"task_id": e.task_id, "width": e.width, "strip_width": e.strip_width},
            )
        except MalformedInputError as e:
            return error_response("MALFORMED_INPUT", str(e), {})

        result = schedule_tasks(tasks, request.strip_width, mode)

        logger.info(
            f"algorithm={result.algorithm}, tasks={result.task_count}, "
            f"makespan={result.makespan}, efficiency={result.efficiency:.4f}"
        )
        return ScheduleResponseSchema(result=result, schedule=format_schedule(result))

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"ERROR in /schedule endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/generate", response_model=GenerateResponseSchema)
async def generate(request: GenerateRequestSchema) -> GenerateResponseSchema:
    """Draw a random task instance; pass a seed for a reproducible one."""
    pairs = generate_tasks(request.count, request.max_width, request.max_duration, random.Random(request.seed))
    return GenerateResponseSchema(tasks=[TaskSchema(width=w, duration=d) for w, d in pairs])


@app.get("/health")
async def health() -> dict[str, Any]:
    """Health check endpoint."""
    return {"ok": True}
