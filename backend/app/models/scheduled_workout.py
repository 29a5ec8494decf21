"""Workouts a coach schedules for a group, and the results members submit for them."""

from typing import ClassVar

from app.models.base import Entity, Insert, Patch, UtcDatetime


class ScheduledWorkout(Entity):
    group_id: int
    workout_id: int
    scheduled_date: UtcDatetime
    created_by: int
    created_at: UtcDatetime


class ScheduledWorkoutInsert(Insert):
    group_id: int
    workout_id: int
    scheduled_date: UtcDatetime
    created_by: int


class ScheduledWorkoutUpdate(Patch):
    not_null: ClassVar[frozenset[str]] = frozenset({"workout_id", "scheduled_date"})

    workout_id: int | None = None
    scheduled_date: UtcDatetime | None = None


class WorkoutResult(Entity):
    scheduled_workout_id: int
    user_id: int
    result: str
    notes: str | None = None
    completed_at: UtcDatetime


class WorkoutResultInsert(Insert):
    scheduled_workout_id: int
    user_id: int
    result: str
    notes: str | None = None


class WorkoutResultUpdate(Patch):
    not_null: ClassVar[frozenset[str]] = frozenset({"result"})

    result: str | None = None
    notes: str | None = None
