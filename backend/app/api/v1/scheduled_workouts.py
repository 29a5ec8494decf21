"""Scheduled workouts: coaches schedule a workout for a group; members see what is coming up."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_current_user, get_storage, load_group, load_scheduled_workout
from app.core.access import can_manage_scheduled_workout, can_view_group
from app.models import ScheduledWorkout, ScheduledWorkoutInsert, ScheduledWorkoutUpdate, User
from app.schemas.group import ScheduledWorkoutCreate
from app.storage import Storage

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/scheduled-workouts", tags=["scheduled-workouts"])


async def _require_workout(storage: Storage, workout_id: int) -> None:
    if not await storage.get_workout(workout_id):
        raise HTTPException(status_code=404, detail="Workout not found.")


@router.post(
    "",
    response_model=ScheduledWorkout,
    status_code=201,
    summary="Schedule a workout for a group",
    responses={403: {"description": "Not the group's coach or an admin"}, 404: {"description": "Group or workout not found"}},
)
async def schedule_workout(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    body: ScheduledWorkoutCreate,
) -> ScheduledWorkout:
    group = await load_group(storage, body.group_id)
    await _require_workout(storage, body.workout_id)
    if not can_manage_scheduled_workout(user, group):
        raise HTTPException(status_code=403, detail="Only the group's coach or an admin can schedule workouts.")
    scheduled = await storage.create_scheduled_workout(
        ScheduledWorkoutInsert(
            group_id=body.group_id,
            workout_id=body.workout_id,
            scheduled_date=body.scheduled_date,
            created_by=user.id,
        )
    )
    logger.info("Workout id=%s scheduled for group id=%s", body.workout_id, body.group_id)
    return scheduled


@router.get(
    "/upcoming",
    response_model=list[ScheduledWorkout],
    summary="Upcoming workouts in my groups (soonest first)",
)
async def upcoming_workouts(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
) -> list[ScheduledWorkout]:
    return await storage.get_upcoming_workouts_for_user(user.id)


@router.get(
    "/group/{group_id}",
    response_model=list[ScheduledWorkout],
    summary="Workouts scheduled for a group (soonest first)",
    responses={403: {"description": "Not coach, admin or member"}, 404: {"description": "Group not found"}},
)
async def group_schedule(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    group_id: int,
) -> list[ScheduledWorkout]:
    group = await load_group(storage, group_id)
    if not await can_view_group(storage, user, group):
        raise HTTPException(status_code=403, detail="Access denied.")
    return await storage.get_scheduled_workouts_by_group_id(group_id)


@router.get(
    "/{scheduled_id}",
    response_model=ScheduledWorkout,
    summary="Get scheduled workout",
    responses={403: {"description": "Not coach, admin or member"}, 404: {"description": "Scheduled workout or group not found"}},
)
async def get_scheduled_workout(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    scheduled_id: int,
) -> ScheduledWorkout:
    scheduled, group = await load_scheduled_workout(storage, scheduled_id)
    if not await can_view_group(storage, user, group):
        raise HTTPException(status_code=403, detail="Access denied.")
    return scheduled


@router.patch(
    "/{scheduled_id}",
    response_model=ScheduledWorkout,
    summary="Reschedule or swap the workout",
    responses={403: {"description": "Not coach, admin or creator"}, 404: {"description": "Scheduled workout, group or workout not found"}},
)
async def update_scheduled_workout(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    scheduled_id: int,
    body: ScheduledWorkoutUpdate,
) -> ScheduledWorkout:
    scheduled, group = await load_scheduled_workout(storage, scheduled_id)
    if body.workout_id is not None:
        await _require_workout(storage, body.workout_id)
    if not can_manage_scheduled_workout(user, group, scheduled):
        raise HTTPException(status_code=403, detail="Access denied.")
    updated = await storage.update_scheduled_workout(scheduled_id, body)
    if not updated:
        raise HTTPException(status_code=404, detail="Scheduled workout not found.")
    return updated


@router.delete(
    "/{scheduled_id}",
    status_code=204,
    summary="Delete scheduled workout and its results",
    responses={403: {"description": "Not coach, admin or creator"}, 404: {"description": "Scheduled workout or group not found"}},
)
async def delete_scheduled_workout(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    scheduled_id: int,
) -> None:
    scheduled, group = await load_scheduled_workout(storage, scheduled_id)
    if not can_manage_scheduled_workout(user, group, scheduled):
        raise HTTPException(status_code=403, detail="Access denied.")
    await storage.delete_scheduled_workout(scheduled_id)
