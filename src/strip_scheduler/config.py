"""Runtime settings; loads .env locally via python-dotenv."""

from __future__ import annotations

import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from strip_scheduler.errors import InvalidParameterError

LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseModel):
    """Defaults for file locations, logging and randomness."""

    schedule_file: str = Field(default="schedule.txt", description="Where schedules are written")
    tasks_dir: str = Field(default=".", description="Where generated task files go")
    log_level: str = Field(default="WARNING", description="Root logging level")
    seed: Optional[int] = Field(default=None, description="Seed for task generation")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.strip().upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {LOG_LEVELS}")
        return value


ENV_VARS = {
    "schedule_file": "STRIP_SCHEDULE_FILE",
    "tasks_dir": "STRIP_TASKS_DIR",
    "log_level": "STRIP_LOG_LEVEL",
    "seed": "STRIP_SEED",
}


def load_settings(env: Optional[dict[str, str]] = None) -> Settings:
    """
    Build Settings from the environment.

    A .env file in the working directory is loaded first; it does not
    override variables that are already set. Pass `env` to read from a
    mapping instead of os.environ.
    """
    if env is None:
        load_dotenv(find_dotenv(usecwd=True))
        env = dict(os.environ)

    values = {field: env[var] for field, var in ENV_VARS.items() if env.get(var)}
    try:
        return Settings(**values)
    except ValidationError as e:
        raise InvalidParameterError(f"invalid settings: {e}") from e
