"""In-memory Storage: one dict per entity type, keyed by an id from a per-type counter.

Every public method runs to completion without awaiting, so on the event loop
no two store operations interleave (cascades included). Data lives as long as
the process.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Iterable
from datetime import datetime
from typing import Generic, TypeVar

from app.models import (
    Exercise,
    ExerciseInsert,
    Group,
    GroupInsert,
    GroupMember,
    GroupMemberInsert,
    GroupUpdate,
    PersonalRecord,
    PersonalRecordInsert,
    PersonalRecordUpdate,
    ScheduledWorkout,
    ScheduledWorkoutInsert,
    ScheduledWorkoutUpdate,
    User,
    UserInsert,
    UserUpdate,
    Workout,
    WorkoutInsert,
    WorkoutResult,
    WorkoutResultInsert,
    WorkoutResultUpdate,
    WorkoutUpdate,
)
from app.models.base import Entity, Patch, apply_patch, as_utc, utcnow
from app.storage.base import Storage
from app.storage.seed import DEFAULT_EXERCISES

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Entity)


class Table(Generic[E]):
    """Rows of one entity type in insertion order. Ids start at 1 and are never reused."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._rows: dict[int, E] = {}
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._rows)

    def get(self, row_id: int) -> E | None:
        return self._rows.get(row_id)

    def rows(self) -> list[E]:
        return list(self._rows.values())

    def where(self, predicate: Callable[[E], bool]) -> list[E]:
        return [row for row in self._rows.values() if predicate(row)]

    def insert(self, build: Callable[[int], E]) -> E:
        row = build(next(self._ids))
        self._rows[row.id] = row
        return row

    def update(self, row_id: int, patch: Patch) -> E | None:
        existing = self._rows.get(row_id)
        if existing is None:
            return None
        updated = apply_patch(existing, patch)
        self._rows[row_id] = updated
        return updated

    def delete(self, row_id: int) -> bool:
        return self._rows.pop(row_id, None) is not None


# Child rows removed before a parent row, in order: (child table, foreign key field)
CASCADES: dict[str, tuple[tuple[str, str], ...]] = {
    "groups": (
        ("group_members", "group_id"),
        ("scheduled_workouts", "group_id"),
    ),
    "scheduled_workouts": (
        ("workout_results", "scheduled_workout_id"),
    ),
}


def _newest_first(rows: Iterable[E], key: Callable[[E], datetime]) -> list[E]:
    # sorted() is stable with reverse=True too: equal keys keep insertion order
    return sorted(rows, key=key, reverse=True)


def _oldest_first(rows: Iterable[E], key: Callable[[E], datetime]) -> list[E]:
    return sorted(rows, key=key)


class MemStorage(Storage):
    def __init__(self, seed: bool = True) -> None:
        self._tables: dict[str, Table] = {}
        self.users: Table[User] = self._table("users")
        self.workouts: Table[Workout] = self._table("workouts")
        self.exercises: Table[Exercise] = self._table("exercises")
        self.personal_records: Table[PersonalRecord] = self._table("personal_records")
        self.groups: Table[Group] = self._table("groups")
        self.group_members: Table[GroupMember] = self._table("group_members")
        self.scheduled_workouts: Table[ScheduledWorkout] = self._table("scheduled_workouts")
        self.workout_results: Table[WorkoutResult] = self._table("workout_results")
        if seed:
            # __init__ cannot await; insert_exercise is the whole body of create_exercise
            for exercise in DEFAULT_EXERCISES:
                self.insert_exercise(exercise)
            logger.debug("Seeded %d exercises", len(self.exercises))

    def _table(self, name: str) -> Table:
        table: Table = Table(name)
        self._tables[name] = table
        return table

    def _delete_row(self, table_name: str, row_id: int) -> bool:
        """Delete a row after its children (recursively, per CASCADES)."""
        table = self._tables[table_name]
        if table.get(row_id) is None:
            return False
        for child_name, foreign_key in CASCADES.get(table_name, ()):
            children = self._tables[child_name].where(lambda row: getattr(row, foreign_key) == row_id)
            for child in children:
                self._delete_row(child_name, child.id)
            if children:
                logger.debug(
                    "Cascade: removed %d %s rows of %s id=%s",
                    len(children), child_name, table_name, row_id,
                )
        return table.delete(row_id)

    # Users

    async def get_user(self, user_id: int) -> User | None:
        return self.users.get(user_id)

    async def get_user_by_username(self, username: str) -> User | None:
        return next((u for u in self.users.rows() if u.username == username), None)

    async def get_all_users(self) -> list[User]:
        return self.users.rows()

    async def create_user(self, data: UserInsert) -> User:
        return self.users.insert(
            lambda id_: User(id=id_, created_at=utcnow(), **data.model_dump())
        )

    async def update_user(self, user_id: int, patch: UserUpdate) -> User | None:
        return self.users.update(user_id, patch)

    # Workouts

    async def get_workout(self, workout_id: int) -> Workout | None:
        return self.workouts.get(workout_id)

    async def get_workouts_by_user_id(self, user_id: int) -> list[Workout]:
        rows = self.workouts.where(lambda w: w.user_id == user_id)
        return _newest_first(rows, key=lambda w: w.date)

    async def get_workouts_by_type(self, user_id: int, workout_type: str) -> list[Workout]:
        rows = self.workouts.where(lambda w: w.user_id == user_id and w.type == workout_type)
        return _newest_first(rows, key=lambda w: w.date)

    async def get_recent_workouts(self, user_id: int, limit: int) -> list[Workout]:
        return (await self.get_workouts_by_user_id(user_id))[: max(limit, 0)]

    async def create_workout(self, data: WorkoutInsert) -> Workout:
        return self.workouts.insert(lambda id_: Workout(id=id_, **data.model_dump()))

    async def update_workout(self, workout_id: int, patch: WorkoutUpdate) -> Workout | None:
        return self.workouts.update(workout_id, patch)

    async def delete_workout(self, workout_id: int) -> bool:
        return self._delete_row("workouts", workout_id)

    # Exercises

    async def get_exercise(self, exercise_id: int) -> Exercise | None:
        return self.exercises.get(exercise_id)

    async def get_exercise_by_name(self, name: str) -> Exercise | None:
        wanted = name.lower()
        return next((e for e in self.exercises.rows() if e.name.lower() == wanted), None)

    async def get_all_exercises(self) -> list[Exercise]:
        return self.exercises.rows()

    async def get_exercises_by_category(self, category: str) -> list[Exercise]:
        return self.exercises.where(lambda e: e.category == category)

    async def search_exercises(self, query: str) -> list[Exercise]:
        q = query.lower()
        return self.exercises.where(lambda e: q in e.name.lower() or q in e.description.lower())

    def insert_exercise(self, data: ExerciseInsert) -> Exercise:
        """Synchronous create_exercise, shared with the seed."""
        return self.exercises.insert(lambda id_: Exercise(id=id_, **data.model_dump()))

    async def create_exercise(self, data: ExerciseInsert) -> Exercise:
        return self.insert_exercise(data)

    # Personal records

    async def get_personal_record(self, pr_id: int) -> PersonalRecord | None:
        return self.personal_records.get(pr_id)

    async def get_personal_records_by_user_id(self, user_id: int) -> list[PersonalRecord]:
        rows = self.personal_records.where(lambda pr: pr.user_id == user_id)
        return _newest_first(rows, key=lambda pr: pr.date)

    async def get_personal_records_by_exercise_id(
        self, user_id: int, exercise_id: int
    ) -> list[PersonalRecord]:
        # Oldest first: progression charts plot left to right
        rows = self.personal_records.where(
            lambda pr: pr.user_id == user_id and pr.exercise_id == exercise_id
        )
        return _oldest_first(rows, key=lambda pr: pr.date)

    async def get_recent_personal_records(self, user_id: int, limit: int) -> list[PersonalRecord]:
        return (await self.get_personal_records_by_user_id(user_id))[: max(limit, 0)]

    async def create_personal_record(self, data: PersonalRecordInsert) -> PersonalRecord:
        return self.personal_records.insert(lambda id_: PersonalRecord(id=id_, **data.model_dump()))

    async def update_personal_record(
        self, pr_id: int, patch: PersonalRecordUpdate
    ) -> PersonalRecord | None:
        return self.personal_records.update(pr_id, patch)

    async def delete_personal_record(self, pr_id: int) -> bool:
        return self._delete_row("personal_records", pr_id)

    # Groups

    async def get_group(self, group_id: int) -> Group | None:
        return self.groups.get(group_id)

    async def get_groups_by_coach_id(self, coach_id: int) -> list[Group]:
        rows = self.groups.where(lambda g: g.coach_id == coach_id)
        return _newest_first(rows, key=lambda g: g.created_at)

    async def get_groups_for_user(self, user_id: int) -> list[Group]:
        group_ids = {m.group_id for m in self.group_members.where(lambda m: m.user_id == user_id)}
        return self.groups.where(lambda g: g.id in group_ids)

    async def create_group(self, data: GroupInsert) -> Group:
        return self.groups.insert(lambda id_: Group(id=id_, created_at=utcnow(), **data.model_dump()))

    async def update_group(self, group_id: int, patch: GroupUpdate) -> Group | None:
        return self.groups.update(group_id, patch)

    async def delete_group(self, group_id: int) -> bool:
        return self._delete_row("groups", group_id)

    # Group members

    def _find_member(self, group_id: int, user_id: int) -> GroupMember | None:
        return next(
            (m for m in self.group_members.rows() if m.group_id == group_id and m.user_id == user_id),
            None,
        )

    async def add_group_member(self, data: GroupMemberInsert) -> GroupMember:
        existing = self._find_member(data.group_id, data.user_id)
        if existing is not None:
            return existing
        return self.group_members.insert(
            lambda id_: GroupMember(id=id_, joined_at=utcnow(), **data.model_dump())
        )

    async def remove_group_member(self, group_id: int, user_id: int) -> bool:
        member = self._find_member(group_id, user_id)
        if member is None:
            return False
        return self._delete_row("group_members", member.id)

    async def get_group_members(self, group_id: int) -> list[GroupMember]:
        rows = self.group_members.where(lambda m: m.group_id == group_id)
        return _newest_first(rows, key=lambda m: m.joined_at)

    async def is_group_member(self, group_id: int, user_id: int) -> bool:
        return self._find_member(group_id, user_id) is not None

    # Scheduled workouts

    async def get_scheduled_workout(self, scheduled_id: int) -> ScheduledWorkout | None:
        return self.scheduled_workouts.get(scheduled_id)

    async def get_scheduled_workouts_by_group_id(self, group_id: int) -> list[ScheduledWorkout]:
        rows = self.scheduled_workouts.where(lambda sw: sw.group_id == group_id)
        return _oldest_first(rows, key=lambda sw: sw.scheduled_date)

    async def get_upcoming_workouts_for_user(
        self, user_id: int, now: datetime | None = None
    ) -> list[ScheduledWorkout]:
        now = as_utc(now) if now is not None else utcnow()
        group_ids = {g.id for g in await self.get_groups_for_user(user_id)}
        rows = self.scheduled_workouts.where(
            lambda sw: sw.group_id in group_ids and sw.scheduled_date >= now
        )
        return _oldest_first(rows, key=lambda sw: sw.scheduled_date)

    async def create_scheduled_workout(self, data: ScheduledWorkoutInsert) -> ScheduledWorkout:
        return self.scheduled_workouts.insert(
            lambda id_: ScheduledWorkout(id=id_, created_at=utcnow(), **data.model_dump())
        )

    async def update_scheduled_workout(
        self, scheduled_id: int, patch: ScheduledWorkoutUpdate
    ) -> ScheduledWorkout | None:
        return self.scheduled_workouts.update(scheduled_id, patch)

    async def delete_scheduled_workout(self, scheduled_id: int) -> bool:
        return self._delete_row("scheduled_workouts", scheduled_id)

    # Workout results

    async def get_workout_result(self, result_id: int) -> WorkoutResult | None:
        return self.workout_results.get(result_id)

    async def get_workout_results_by_user_id(self, user_id: int) -> list[WorkoutResult]:
        rows = self.workout_results.where(lambda r: r.user_id == user_id)
        return _newest_first(rows, key=lambda r: r.completed_at)

    async def get_workout_results_by_scheduled_workout(
        self, scheduled_workout_id: int
    ) -> list[WorkoutResult]:
        rows = self.workout_results.where(lambda r: r.scheduled_workout_id == scheduled_workout_id)
        return _newest_first(rows, key=lambda r: r.completed_at)

    async def create_workout_result(self, data: WorkoutResultInsert) -> WorkoutResult:
        return self.workout_results.insert(
            lambda id_: WorkoutResult(id=id_, completed_at=utcnow(), **data.model_dump())
        )

    async def update_workout_result(
        self, result_id: int, patch: WorkoutResultUpdate
    ) -> WorkoutResult | None:
        return self.workout_results.update(result_id, patch)
