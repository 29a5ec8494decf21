"""Group membership management by the group's coach or an admin."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_current_user, get_storage, load_group
from app.core.access import can_manage_group
from app.models import Group, GroupMember, GroupMemberInsert, User
from app.schemas.group import GroupMemberAdd, GroupMemberBatch
from app.storage import Storage

router = APIRouter(prefix="/group-members", tags=["groups"])


async def _managed_group(storage: Storage, user: User, group_id: int) -> Group:
    group = await load_group(storage, group_id)
    if not can_manage_group(user, group):
        raise HTTPException(status_code=403, detail="Only the group's coach or an admin can manage members.")
    return group


@router.post(
    "",
    response_model=GroupMember,
    status_code=201,
    summary="Add member",
    responses={403: {"description": "Not the group's coach or an admin"}, 404: {"description": "Group or user not found"}},
)
async def add_member(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    body: GroupMemberAdd,
) -> GroupMember:
    await _managed_group(storage, user, body.group_id)
    if not await storage.get_user(body.user_id):
        raise HTTPException(status_code=404, detail="User not found.")
    return await storage.add_group_member(GroupMemberInsert(group_id=body.group_id, user_id=body.user_id))


@router.post(
    "/batch",
    response_model=list[GroupMember],
    status_code=201,
    summary="Add several members; unknown user ids are skipped",
    responses={403: {"description": "Not the group's coach or an admin"}, 404: {"description": "Group not found"}},
)
async def add_members_batch(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    body: GroupMemberBatch,
) -> list[GroupMember]:
    await _managed_group(storage, user, body.group_id)
    added = []
    for user_id in dict.fromkeys(body.user_ids):
        if not await storage.get_user(user_id):
            continue
        added.append(await storage.add_group_member(GroupMemberInsert(group_id=body.group_id, user_id=user_id)))
    return added


@router.delete(
    "/{group_id}/{user_id}",
    status_code=204,
    summary="Remove member",
    responses={403: {"description": "Not the group's coach or an admin"}, 404: {"description": "Group not found or not a member"}},
)
async def remove_member(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    group_id: int,
    user_id: int,
) -> None:
    await _managed_group(storage, user, group_id)
    if not await storage.remove_group_member(group_id, user_id):
        raise HTTPException(status_code=404, detail="User is not a member of this group.")
