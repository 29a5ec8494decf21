from app.models.user import User, UserInsert, UserRole, UserUpdate
from app.models.workout import Workout, WorkoutInsert, WorkoutType, WorkoutUpdate
from app.models.exercise import Exercise, ExerciseCategory, ExerciseInsert
from app.models.personal_record import PersonalRecord, PersonalRecordInsert, PersonalRecordUpdate
from app.models.group import Group, GroupInsert, GroupMember, GroupMemberInsert, GroupUpdate
from app.models.scheduled_workout import (
    ScheduledWorkout,
    ScheduledWorkoutInsert,
    ScheduledWorkoutUpdate,
    WorkoutResult,
    WorkoutResultInsert,
    WorkoutResultUpdate,
)

__all__ = [
    "User",
    "UserInsert",
    "UserRole",
    "UserUpdate",
    "Workout",
    "WorkoutInsert",
    "WorkoutType",
    "WorkoutUpdate",
    "Exercise",
    "ExerciseCategory",
    "ExerciseInsert",
    "PersonalRecord",
    "PersonalRecordInsert",
    "PersonalRecordUpdate",
    "Group",
    "GroupInsert",
    "GroupUpdate",
    "GroupMember",
    "GroupMemberInsert",
    "ScheduledWorkout",
    "ScheduledWorkoutInsert",
    "ScheduledWorkoutUpdate",
    "WorkoutResult",
    "WorkoutResultInsert",
    "WorkoutResultUpdate",
]
