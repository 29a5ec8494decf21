"""FastAPI dependencies: storage from app state, current user from JWT, role gates, group lookups."""

import logging
from typing import Annotated

from fastapi import Depends, HTTPException, Request
from jose import JWTError

from app.core.access import is_coach_or_admin
from app.core.auth import user_id_from_token
from app.models import Group, ScheduledWorkout, User
from app.storage import Storage

logger = logging.getLogger(__name__)


def get_storage(request: Request) -> Storage:
    """The store built by create_app for this application."""
    return request.app.state.storage


def _bearer_token(request: Request) -> str | None:
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        return None
    return auth_header[7:].strip() or None


async def _user_from_token(storage: Storage, token: str) -> User:
    try:
        user_id = user_id_from_token(token)
    except JWTError:
        logger.warning("Rejected access token: invalid or expired")
        raise HTTPException(status_code=401, detail="Invalid or expired token")
    user = await storage.get_user(user_id)
    if not user:
        raise HTTPException(status_code=401, detail="User not found")
    return user


async def get_current_user(
    request: Request,
    storage: Annotated[Storage, Depends(get_storage)],
) -> User:
    token = _bearer_token(request)
    if not token:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return await _user_from_token(storage, token)


async def get_optional_user(
    request: Request,
    storage: Annotated[Storage, Depends(get_storage)],
) -> User | None:
    """Current user, or None when no valid token is sent."""
    token = _bearer_token(request)
    if not token:
        return None
    try:
        return await _user_from_token(storage, token)
    except HTTPException:
        return None


async def require_coach(
    user: Annotated[User, Depends(get_current_user)],
) -> User:
    """Require coach or admin role. Raises 403 otherwise."""
    if not is_coach_or_admin(user):
        raise HTTPException(status_code=403, detail="Coach or admin role required")
    return user


async def load_group(storage: Storage, group_id: int) -> Group:
    """Group by id or 404. Rules on group-scoped rows are checked only after this resolves."""
    group = await storage.get_group(group_id)
    if not group:
        raise HTTPException(status_code=404, detail="Group not found.")
    return group


async def load_scheduled_workout(storage: Storage, scheduled_id: int) -> tuple[ScheduledWorkout, Group]:
    """Scheduled workout and the group it targets, or 404 when either is gone."""
    scheduled = await storage.get_scheduled_workout(scheduled_id)
    if not scheduled:
        raise HTTPException(status_code=404, detail="Scheduled workout not found.")
    return scheduled, await load_group(storage, scheduled.group_id)
