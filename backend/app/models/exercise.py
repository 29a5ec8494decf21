from enum import Enum

from app.models.base import Entity, Insert


class ExerciseCategory(str, Enum):
    WEIGHTLIFTING = "Weightlifting"
    GYMNASTICS = "Gymnastics"
    CARDIO = "Cardio"
    METCONS = "Metcons"


class Exercise(Entity):
    name: str
    description: str
    category: ExerciseCategory
    video_url: str | None = None


class ExerciseInsert(Insert):
    name: str
    description: str
    category: ExerciseCategory
    video_url: str | None = None
