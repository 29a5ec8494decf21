"""Personal record: best value an athlete logged for an exercise on a date."""

from typing import ClassVar

from app.models.base import Entity, Insert, Patch, UtcDatetime


class PersonalRecord(Entity):
    user_id: int
    exercise_id: int
    value: str  # free text: "100", "3:45", "25 reps"
    unit: str
    date: UtcDatetime
    notes: str | None = None


class PersonalRecordInsert(Insert):
    user_id: int
    exercise_id: int
    value: str
    unit: str
    date: UtcDatetime
    notes: str | None = None


class PersonalRecordUpdate(Patch):
    not_null: ClassVar[frozenset[str]] = frozenset({"exercise_id", "value", "unit", "date"})

    exercise_id: int | None = None
    value: str | None = None
    unit: str | None = None
    date: UtcDatetime | None = None
    notes: str | None = None
