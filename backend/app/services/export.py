"""User data export (profile without password, workouts, PRs) as JSON or sectioned CSV."""

import csv
import io

from app.models import PersonalRecord, User, Workout
from app.schemas.user import UserOut
from app.storage import Storage

EXPORT_FILENAME = "essentialcross_export"


async def collect_export(storage: Storage, user: User) -> dict:
    workouts = await storage.get_workouts_by_user_id(user.id)
    prs = await storage.get_personal_records_by_user_id(user.id)
    return {
        "user": UserOut.from_user(user).model_dump(mode="json"),
        "workouts": [w.model_dump(mode="json") for w in workouts],
        "personal_records": [pr.model_dump(mode="json") for pr in prs],
    }


def _iso(value) -> str:
    return value.isoformat() if value is not None else ""


def render_csv(user: User, workouts: list[Workout], prs: list[PersonalRecord]) -> str:
    """Three sections (user, workouts, PRs), each a title row, a header row and data rows."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")

    writer.writerow(["User Info"])
    writer.writerow(["ID", "Username", "Name", "Email", "Role", "Created At"])
    writer.writerow([user.id, user.username, user.name or "", user.email or "", user.role.value, _iso(user.created_at)])
    writer.writerow([])

    writer.writerow(["Workouts"])
    writer.writerow(["ID", "Date", "Type", "Description", "Result", "Completed"])
    for w in workouts:
        writer.writerow([w.id, _iso(w.date), w.type.value, w.description, w.result or "", str(w.completed).lower()])
    writer.writerow([])

    writer.writerow(["Personal Records"])
    writer.writerow(["ID", "Exercise ID", "Value", "Unit", "Date", "Notes"])
    for pr in prs:
        writer.writerow([pr.id, pr.exercise_id, pr.value, pr.unit, _iso(pr.date), pr.notes or ""])
    return buf.getvalue()


async def export_csv(storage: Storage, user: User) -> str:
    workouts = await storage.get_workouts_by_user_id(user.id)
    prs = await storage.get_personal_records_by_user_id(user.id)
    return render_csv(user, workouts, prs)
