"""Pydantic schemas for personal record API."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.models import PersonalRecord


class PersonalRecordCreate(BaseModel):
    """Body for logging a PR; the owner is the authenticated user."""

    exercise_id: int
    value: str = Field(..., min_length=1)
    unit: str
    date: datetime
    notes: str | None = None


class PersonalRecordWithExercise(PersonalRecord):
    exercise_name: str
