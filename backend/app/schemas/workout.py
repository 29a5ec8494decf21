"""Pydantic schemas for workout API."""

from datetime import datetime

from pydantic import BaseModel

from app.models import WorkoutType


class WorkoutCreate(BaseModel):
    """Body for logging a workout; the owner is the authenticated user."""

    date: datetime
    type: WorkoutType
    description: str
    result: str | None = None
    completed: bool = False
