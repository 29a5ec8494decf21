"""Training groups: create (coach/admin), list coached/joined, view, edit, delete, leave."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_current_user, get_storage, load_group, require_coach
from app.core.access import can_manage_group, can_view_group
from app.models import Group, GroupInsert, GroupMember, GroupUpdate, User
from app.schemas.group import GroupCreate
from app.storage import Storage

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/groups", tags=["groups"])


@router.post(
    "",
    response_model=Group,
    status_code=201,
    summary="Create group",
    responses={403: {"description": "Coach or admin role required"}},
)
async def create_group(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(require_coach)],
    body: GroupCreate,
) -> Group:
    group = await storage.create_group(
        GroupInsert(name=body.name.strip(), description=body.description, coach_id=user.id)
    )
    logger.info("Group id=%s created by coach id=%s", group.id, user.id)
    return group


@router.get("/coach", response_model=list[Group], summary="Groups I coach (newest first)")
async def coached_groups(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
) -> list[Group]:
    return await storage.get_groups_by_coach_id(user.id)


@router.get("/member", response_model=list[Group], summary="Groups I belong to")
async def joined_groups(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
) -> list[Group]:
    return await storage.get_groups_for_user(user.id)


@router.get(
    "/{group_id}",
    response_model=Group,
    summary="Get group",
    responses={403: {"description": "Not coach, admin or member"}, 404: {"description": "Group not found"}},
)
async def get_group(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    group_id: int,
) -> Group:
    group = await load_group(storage, group_id)
    if not await can_view_group(storage, user, group):
        raise HTTPException(status_code=403, detail="Access denied.")
    return group


@router.patch(
    "/{group_id}",
    response_model=Group,
    summary="Update group",
    responses={403: {"description": "Not the group's coach or an admin"}, 404: {"description": "Group or new coach not found"}},
)
async def update_group(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    group_id: int,
    body: GroupUpdate,
) -> Group:
    group = await load_group(storage, group_id)
    if not can_manage_group(user, group):
        raise HTTPException(status_code=403, detail="Access denied.")
    if body.coach_id is not None and not await storage.get_user(body.coach_id):
        raise HTTPException(status_code=404, detail="Coach not found.")
    updated = await storage.update_group(group_id, body)
    if not updated:
        raise HTTPException(status_code=404, detail="Group not found.")
    return updated


@router.delete(
    "/{group_id}",
    status_code=204,
    summary="Delete group with its members, scheduled workouts and results",
    responses={403: {"description": "Not the group's coach or an admin"}, 404: {"description": "Group not found"}},
)
async def delete_group(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    group_id: int,
) -> None:
    group = await load_group(storage, group_id)
    if not can_manage_group(user, group):
        raise HTTPException(status_code=403, detail="Access denied.")
    await storage.delete_group(group_id)
    logger.info("Group id=%s deleted by user id=%s", group_id, user.id)


@router.get(
    "/{group_id}/members",
    response_model=list[GroupMember],
    summary="Group members (latest joined first)",
    responses={403: {"description": "Not coach, admin or member"}, 404: {"description": "Group not found"}},
)
async def group_members(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    group_id: int,
) -> list[GroupMember]:
    group = await load_group(storage, group_id)
    if not await can_view_group(storage, user, group):
        raise HTTPException(status_code=403, detail="Access denied.")
    return await storage.get_group_members(group_id)


@router.delete(
    "/{group_id}/leave",
    status_code=204,
    summary="Leave group",
    responses={404: {"description": "Group not found or not a member"}},
)
async def leave_group(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    group_id: int,
) -> None:
    await load_group(storage, group_id)
    if not await storage.remove_group_member(group_id, user.id):
        raise HTTPException(status_code=404, detail="Not a member of this group.")
