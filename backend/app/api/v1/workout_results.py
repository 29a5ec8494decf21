"""Results members log against a scheduled group workout."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_current_user, get_storage, load_scheduled_workout
from app.core.access import can_submit_result, can_view_results, owns_record
from app.models import User, WorkoutResult, WorkoutResultInsert, WorkoutResultUpdate
from app.schemas.group import WorkoutResultCreate
from app.storage import Storage

router = APIRouter(prefix="/workout-results", tags=["workout-results"])


@router.post(
    "",
    response_model=WorkoutResult,
    status_code=201,
    summary="Submit result",
    responses={403: {"description": "Not a member, the coach or an admin"}, 404: {"description": "Scheduled workout or group not found"}},
)
async def submit_result(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    body: WorkoutResultCreate,
) -> WorkoutResult:
    _, group = await load_scheduled_workout(storage, body.scheduled_workout_id)
    if not await can_submit_result(storage, user, group):
        raise HTTPException(status_code=403, detail="Access denied.")
    return await storage.create_workout_result(
        WorkoutResultInsert(
            scheduled_workout_id=body.scheduled_workout_id,
            user_id=user.id,
            result=body.result,
            notes=body.notes,
        )
    )


@router.get("/user", response_model=list[WorkoutResult], summary="My results (latest first)")
async def my_results(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
) -> list[WorkoutResult]:
    return await storage.get_workout_results_by_user_id(user.id)


@router.get(
    "/scheduled/{scheduled_workout_id}",
    response_model=list[WorkoutResult],
    summary="Results for a scheduled workout (latest first)",
    responses={403: {"description": "Not a member, the coach or an admin"}, 404: {"description": "Scheduled workout or group not found"}},
)
async def results_for_scheduled(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    scheduled_workout_id: int,
) -> list[WorkoutResult]:
    _, group = await load_scheduled_workout(storage, scheduled_workout_id)
    if not await can_view_results(storage, user, group):
        raise HTTPException(status_code=403, detail="Access denied.")
    return await storage.get_workout_results_by_scheduled_workout(scheduled_workout_id)


@router.patch(
    "/{result_id}",
    response_model=WorkoutResult,
    summary="Edit my result",
    responses={403: {"description": "Not the submitter"}, 404: {"description": "Result not found"}},
)
async def update_result(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    result_id: int,
    body: WorkoutResultUpdate,
) -> WorkoutResult:
    result = await storage.get_workout_result(result_id)
    if not result:
        raise HTTPException(status_code=404, detail="Result not found.")
    if not owns_record(user, result):
        raise HTTPException(status_code=403, detail="Access denied.")
    updated = await storage.update_workout_result(result_id, body)
    if not updated:
        raise HTTPException(status_code=404, detail="Result not found.")
    return updated
