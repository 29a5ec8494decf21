"""User endpoints: list users so coaches can pick group members."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.deps import get_storage, require_coach
from app.models import User
from app.schemas.user import UserOut
from app.storage import Storage

router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "",
    response_model=list[UserOut],
    summary="List users (coach or admin)",
    responses={401: {"description": "Not authenticated"}, 403: {"description": "Coach or admin role required"}},
)
async def list_users(
    storage: Annotated[Storage, Depends(get_storage)],
    _coach: Annotated[User, Depends(require_coach)],
) -> list[UserOut]:
    return [UserOut.from_user(u) for u in await storage.get_all_users()]
