"""Workout log entry: what the athlete did on a given day and how it went."""

from enum import Enum
from typing import ClassVar

from app.models.base import Entity, Insert, Patch, UtcDatetime


class WorkoutType(str, Enum):
    AMRAP = "AMRAP"
    EMOM = "EMOM"
    FOR_TIME = "For Time"
    TABATA = "Tabata"
    STRENGTH = "Strength"
    SKILL = "Skill"
    OTHER = "Other"


class Workout(Entity):
    user_id: int
    date: UtcDatetime
    type: WorkoutType
    description: str
    result: str | None = None
    completed: bool = False


class WorkoutInsert(Insert):
    user_id: int
    date: UtcDatetime
    type: WorkoutType
    description: str
    result: str | None = None
    completed: bool = False


class WorkoutUpdate(Patch):
    not_null: ClassVar[frozenset[str]] = frozenset({"date", "type", "description", "completed"})

    date: UtcDatetime | None = None
    type: WorkoutType | None = None
    description: str | None = None
    result: str | None = None
    completed: bool | None = None
