"""Storage interface used by route handlers.

Lookups return None for a missing id, deletes return False; nothing here raises
for an absent row. No authorization and no foreign-key checks happen at this
layer: callers resolve and check related rows themselves.
"""

from abc import ABC, abstractmethod
from datetime import datetime

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


class Storage(ABC):
    # Users
    @abstractmethod
    async def get_user(self, user_id: int) -> User | None: ...

    @abstractmethod
    async def get_user_by_username(self, username: str) -> User | None: ...

    @abstractmethod
    async def get_all_users(self) -> list[User]: ...

    @abstractmethod
    async def create_user(self, data: UserInsert) -> User: ...

    @abstractmethod
    async def update_user(self, user_id: int, patch: UserUpdate) -> User | None: ...

    # Workouts
    @abstractmethod
    async def get_workout(self, workout_id: int) -> Workout | None: ...

    @abstractmethod
    async def get_workouts_by_user_id(self, user_id: int) -> list[Workout]: ...

    @abstractmethod
    async def get_workouts_by_type(self, user_id: int, workout_type: str) -> list[Workout]: ...

    @abstractmethod
    async def get_recent_workouts(self, user_id: int, limit: int) -> list[Workout]: ...

    @abstractmethod
    async def create_workout(self, data: WorkoutInsert) -> Workout: ...

    @abstractmethod
    async def update_workout(self, workout_id: int, patch: WorkoutUpdate) -> Workout | None: ...

    @abstractmethod
    async def delete_workout(self, workout_id: int) -> bool: ...

    # Exercises
    @abstractmethod
    async def get_exercise(self, exercise_id: int) -> Exercise | None: ...

    @abstractmethod
    async def get_exercise_by_name(self, name: str) -> Exercise | None: ...

    @abstractmethod
    async def get_all_exercises(self) -> list[Exercise]: ...

    @abstractmethod
    async def get_exercises_by_category(self, category: str) -> list[Exercise]: ...

    @abstractmethod
    async def search_exercises(self, query: str) -> list[Exercise]: ...

    @abstractmethod
    async def create_exercise(self, data: ExerciseInsert) -> Exercise: ...

    # Personal records
    @abstractmethod
    async def get_personal_record(self, pr_id: int) -> PersonalRecord | None: ...

    @abstractmethod
    async def get_personal_records_by_user_id(self, user_id: int) -> list[PersonalRecord]: ...

    @abstractmethod
    async def get_personal_records_by_exercise_id(
        self, user_id: int, exercise_id: int
    ) -> list[PersonalRecord]: ...

    @abstractmethod
    async def get_recent_personal_records(self, user_id: int, limit: int) -> list[PersonalRecord]: ...

    @abstractmethod
    async def create_personal_record(self, data: PersonalRecordInsert) -> PersonalRecord: ...

    @abstractmethod
    async def update_personal_record(
        self, pr_id: int, patch: PersonalRecordUpdate
    ) -> PersonalRecord | None: ...

    @abstractmethod
    async def delete_personal_record(self, pr_id: int) -> bool: ...

    # Groups
    @abstractmethod
    async def get_group(self, group_id: int) -> Group | None: ...

    @abstractmethod
    async def get_groups_by_coach_id(self, coach_id: int) -> list[Group]: ...

    @abstractmethod
    async def get_groups_for_user(self, user_id: int) -> list[Group]: ...

    @abstractmethod
    async def create_group(self, data: GroupInsert) -> Group: ...

    @abstractmethod
    async def update_group(self, group_id: int, patch: GroupUpdate) -> Group | None: ...

    @abstractmethod
    async def delete_group(self, group_id: int) -> bool: ...

    # Group members
    @abstractmethod
    async def add_group_member(self, data: GroupMemberInsert) -> GroupMember: ...

    @abstractmethod
    async def remove_group_member(self, group_id: int, user_id: int) -> bool: ...

    @abstractmethod
    async def get_group_members(self, group_id: int) -> list[GroupMember]: ...

    @abstractmethod
    async def is_group_member(self, group_id: int, user_id: int) -> bool: ...

    # Scheduled workouts
    @abstractmethod
    async def get_scheduled_workout(self, scheduled_id: int) -> ScheduledWorkout | None: ...

    @abstractmethod
    async def get_scheduled_workouts_by_group_id(self, group_id: int) -> list[ScheduledWorkout]: ...

    @abstractmethod
    async def get_upcoming_workouts_for_user(
        self, user_id: int, now: datetime | None = None
    ) -> list[ScheduledWorkout]: ...

    @abstractmethod
    async def create_scheduled_workout(self, data: ScheduledWorkoutInsert) -> ScheduledWorkout: ...

    @abstractmethod
    async def update_scheduled_workout(
        self, scheduled_id: int, patch: ScheduledWorkoutUpdate
    ) -> ScheduledWorkout | None: ...

    @abstractmethod
    async def delete_scheduled_workout(self, scheduled_id: int) -> bool: ...

    # Workout results
    @abstractmethod
    async def get_workout_result(self, result_id: int) -> WorkoutResult | None: ...

    @abstractmethod
    async def get_workout_results_by_user_id(self, user_id: int) -> list[WorkoutResult]: ...

    @abstractmethod
    async def get_workout_results_by_scheduled_workout(
        self, scheduled_workout_id: int
    ) -> list[WorkoutResult]: ...

    @abstractmethod
    async def create_workout_result(self, data: WorkoutResultInsert) -> WorkoutResult: ...

    @abstractmethod
    async def update_workout_result(
        self, result_id: int, patch: WorkoutResultUpdate
    ) -> WorkoutResult | None: ...
