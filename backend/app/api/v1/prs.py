"""Personal records API: log PRs, list all/recent, progression per exercise, edit own PRs."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.deps import get_current_user, get_storage
from app.core.access import owns_record
from app.models import PersonalRecord, PersonalRecordInsert, PersonalRecordUpdate, User
from app.schemas.personal_record import PersonalRecordCreate, PersonalRecordWithExercise
from app.storage import Storage

router = APIRouter(prefix="/prs", tags=["personal-records"])

UNKNOWN_EXERCISE = "Unknown Exercise"


async def _require_exercise(storage: Storage, exercise_id: int) -> None:
    if not await storage.get_exercise(exercise_id):
        raise HTTPException(status_code=404, detail="Exercise not found.")


async def _own_pr(storage: Storage, user: User, pr_id: int) -> PersonalRecord:
    pr = await storage.get_personal_record(pr_id)
    if not pr:
        raise HTTPException(status_code=404, detail="Personal record not found.")
    if not owns_record(user, pr):
        raise HTTPException(status_code=403, detail="Access denied.")
    return pr


@router.post(
    "",
    response_model=PersonalRecord,
    status_code=201,
    summary="Log personal record",
    responses={404: {"description": "Exercise not found"}},
)
async def create_pr(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    body: PersonalRecordCreate,
) -> PersonalRecord:
    await _require_exercise(storage, body.exercise_id)
    return await storage.create_personal_record(PersonalRecordInsert(user_id=user.id, **body.model_dump()))


@router.get("", response_model=list[PersonalRecord], summary="List personal records (newest first)")
async def list_prs(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
) -> list[PersonalRecord]:
    return await storage.get_personal_records_by_user_id(user.id)


@router.get(
    "/recent",
    response_model=list[PersonalRecordWithExercise],
    summary="Most recent personal records with exercise name",
)
async def recent_prs(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    limit: int = Query(default=3, ge=1, le=100),
) -> list[PersonalRecordWithExercise]:
    out = []
    for pr in await storage.get_recent_personal_records(user.id, limit):
        exercise = await storage.get_exercise(pr.exercise_id)
        out.append(
            PersonalRecordWithExercise(
                **pr.model_dump(),
                exercise_name=exercise.name if exercise else UNKNOWN_EXERCISE,
            )
        )
    return out


@router.get(
    "/exercise/{exercise_id}",
    response_model=list[PersonalRecord],
    summary="PR progression for one exercise (oldest first)",
    responses={404: {"description": "Exercise not found"}},
)
async def prs_for_exercise(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    exercise_id: int,
) -> list[PersonalRecord]:
    await _require_exercise(storage, exercise_id)
    return await storage.get_personal_records_by_exercise_id(user.id, exercise_id)


@router.get(
    "/{pr_id}",
    response_model=PersonalRecord,
    summary="Get personal record",
    responses={403: {"description": "Not the owner"}, 404: {"description": "Personal record not found"}},
)
async def get_pr(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    pr_id: int,
) -> PersonalRecord:
    return await _own_pr(storage, user, pr_id)


@router.patch(
    "/{pr_id}",
    response_model=PersonalRecord,
    summary="Update personal record",
    responses={403: {"description": "Not the owner"}, 404: {"description": "Personal record or exercise not found"}},
)
async def update_pr(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    pr_id: int,
    body: PersonalRecordUpdate,
) -> PersonalRecord:
    await _own_pr(storage, user, pr_id)
    if body.exercise_id is not None:
        await _require_exercise(storage, body.exercise_id)
    updated = await storage.update_personal_record(pr_id, body)
    if not updated:
        raise HTTPException(status_code=404, detail="Personal record not found.")
    return updated


@router.delete(
    "/{pr_id}",
    status_code=204,
    summary="Delete personal record",
    responses={403: {"description": "Not the owner"}, 404: {"description": "Personal record not found"}},
)
async def delete_pr(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    pr_id: int,
) -> None:
    await _own_pr(storage, user, pr_id)
    await storage.delete_personal_record(pr_id)
