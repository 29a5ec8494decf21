"""Workouts API: log, list (all, by type, recent), read, update and delete own workouts."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.deps import get_current_user, get_storage
from app.core.access import owns_record
from app.models import User, Workout, WorkoutInsert, WorkoutType, WorkoutUpdate
from app.schemas.workout import WorkoutCreate
from app.storage import Storage

router = APIRouter(prefix="/workouts", tags=["workouts"])


async def _own_workout(storage: Storage, user: User, workout_id: int) -> Workout:
    """404 when missing, 403 when it belongs to someone else."""
    workout = await storage.get_workout(workout_id)
    if not workout:
        raise HTTPException(status_code=404, detail="Workout not found.")
    if not owns_record(user, workout):
        raise HTTPException(status_code=403, detail="Access denied.")
    return workout


@router.post(
    "",
    response_model=Workout,
    status_code=201,
    summary="Log workout",
    responses={401: {"description": "Not authenticated"}},
)
async def create_workout(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    body: WorkoutCreate,
) -> Workout:
    return await storage.create_workout(WorkoutInsert(user_id=user.id, **body.model_dump()))


@router.get(
    "",
    response_model=list[Workout],
    summary="List workouts (newest first)",
    responses={401: {"description": "Not authenticated"}},
)
async def list_workouts(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    type: WorkoutType | None = None,
) -> list[Workout]:
    if type is not None:
        return await storage.get_workouts_by_type(user.id, type.value)
    return await storage.get_workouts_by_user_id(user.id)


@router.get(
    "/recent",
    response_model=list[Workout],
    summary="Most recent workouts",
    responses={401: {"description": "Not authenticated"}},
)
async def recent_workouts(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    limit: int = Query(default=5, ge=1, le=100),
) -> list[Workout]:
    return await storage.get_recent_workouts(user.id, limit)


@router.get(
    "/{workout_id}",
    response_model=Workout,
    summary="Get workout",
    responses={403: {"description": "Not the owner"}, 404: {"description": "Workout not found"}},
)
async def get_workout(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    workout_id: int,
) -> Workout:
    return await _own_workout(storage, user, workout_id)


@router.patch(
    "/{workout_id}",
    response_model=Workout,
    summary="Update workout",
    responses={403: {"description": "Not the owner"}, 404: {"description": "Workout not found"}},
)
async def update_workout(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    workout_id: int,
    body: WorkoutUpdate,
) -> Workout:
    await _own_workout(storage, user, workout_id)
    updated = await storage.update_workout(workout_id, body)
    if not updated:
        raise HTTPException(status_code=404, detail="Workout not found.")
    return updated


@router.delete(
    "/{workout_id}",
    status_code=204,
    summary="Delete workout",
    responses={403: {"description": "Not the owner"}, 404: {"description": "Workout not found"}},
)
async def delete_workout(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    workout_id: int,
) -> None:
    await _own_workout(storage, user, workout_id)
    await storage.delete_workout(workout_id)
