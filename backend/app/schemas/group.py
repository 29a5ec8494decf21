"""Pydantic schemas for groups, membership, scheduled workouts and results."""

from datetime import datetime

from pydantic import BaseModel, Field


class GroupCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=128)
    description: str | None = None


class GroupMemberAdd(BaseModel):
    group_id: int
    user_id: int


class GroupMemberBatch(BaseModel):
    group_id: int
    user_ids: list[int]


class ScheduledWorkoutCreate(BaseModel):
    group_id: int
    workout_id: int
    scheduled_date: datetime


class WorkoutResultCreate(BaseModel):
    scheduled_workout_id: int
    result: str = Field(..., min_length=1)
    notes: str | None = None
