"""Demo exercise catalog inserted when the in-memory store is built."""

from app.models import ExerciseCategory, ExerciseInsert

DEFAULT_EXERCISES: tuple[ExerciseInsert, ...] = (
    ExerciseInsert(
        name="Back Squat",
        description="A squat performed with a barbell across the shoulders behind the neck.",
        category=ExerciseCategory.WEIGHTLIFTING,
        video_url="https://www.youtube.com/watch?v=ultWZbUMPL8",
    ),
    ExerciseInsert(
        name="Clean & Jerk",
        description=(
            "Olympic weightlifting movement that combines lifting a barbell from the floor "
            "to the shoulders and then overhead."
        ),
        category=ExerciseCategory.WEIGHTLIFTING,
        video_url="https://www.youtube.com/watch?v=9HyWjAk7fhY",
    ),
    ExerciseInsert(
        name="Deadlift",
        description="A weight training exercise where a loaded barbell is lifted from the ground to hip level.",
        category=ExerciseCategory.WEIGHTLIFTING,
        video_url="https://www.youtube.com/watch?v=op9kVnSso6Q",
    ),
    ExerciseInsert(
        name="Pull-up",
        description=(
            "An upper-body compound exercise where you hang from a bar and pull your body up "
            "until your chin is over the bar."
        ),
        category=ExerciseCategory.GYMNASTICS,
        video_url="https://www.youtube.com/watch?v=eGo4IYlbE5g",
    ),
    ExerciseInsert(
        name="Handstand Push-up",
        description="A push-up performed while in a handstand position with the feet against a wall for balance.",
        category=ExerciseCategory.GYMNASTICS,
        video_url="https://www.youtube.com/watch?v=hvoQiF0kBI8",
    ),
    ExerciseInsert(
        name="Muscle-up",
        description="A movement that combines a pull-up with a dip to transition from below a bar or rings to above it.",
        category=ExerciseCategory.GYMNASTICS,
        video_url="https://www.youtube.com/watch?v=rtF51pQB6Wc",
    ),
    ExerciseInsert(
        name="Double-Under",
        description="A jump rope exercise where the rope passes under the feet twice in a single jump.",
        category=ExerciseCategory.CARDIO,
        video_url="https://www.youtube.com/watch?v=82jNjDS19lg",
    ),
    ExerciseInsert(
        name="Running",
        description="Continuous movement on foot, used for cardiovascular endurance training.",
        category=ExerciseCategory.CARDIO,
        video_url="https://www.youtube.com/watch?v=brFHyOtTwH4",
    ),
    ExerciseInsert(
        name="Rowing",
        description="Exercise on a rowing machine that provides a full-body workout.",
        category=ExerciseCategory.CARDIO,
        video_url="https://www.youtube.com/watch?v=H0r_ZPXJLtg",
    ),
    ExerciseInsert(
        name="Thruster",
        description="A compound movement combining a front squat with a push press.",
        category=ExerciseCategory.METCONS,
        video_url="https://www.youtube.com/watch?v=L219ltL15zk",
    ),
    ExerciseInsert(
        name="Wall Ball",
        description="A movement where you throw a medicine ball to a target on the wall from a squat position.",
        category=ExerciseCategory.METCONS,
        video_url="https://www.youtube.com/watch?v=fpUD0mcFp_0",
    ),
    ExerciseInsert(
        name="Burpee",
        description="A full-body exercise that combines a squat, push-up, and jump.",
        category=ExerciseCategory.METCONS,
        video_url="https://www.youtube.com/watch?v=dZgVxmf6jkA",
    ),
)
