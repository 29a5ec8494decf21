"""Auth: register, login, me, session."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_current_user, get_optional_user, get_storage
from app.config import settings
from app.core.auth import create_access_token, hash_password, verify_password
from app.models import User, UserInsert
from app.schemas.user import LoginBody, RegisterBody, SessionResponse, TokenResponse, UserOut
from app.storage import Storage

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])

ACCESS_TOKEN_EXPIRE_SECONDS = settings.access_token_expire_minutes * 60


@router.post(
    "/register",
    response_model=UserOut,
    status_code=201,
    summary="Register a new user",
    responses={400: {"description": "Username and password required or username already exists"}},
)
async def register(
    storage: Annotated[Storage, Depends(get_storage)],
    body: RegisterBody,
) -> UserOut:
    username = (body.username or "").strip()
    password = body.password or ""
    if not username or not password:
        raise HTTPException(status_code=400, detail="Username and password required")
    # Uniqueness is checked here; the store accepts duplicates
    if await storage.get_user_by_username(username) is not None:
        raise HTTPException(status_code=400, detail="Username already exists")
    user = await storage.create_user(
        UserInsert(
            username=username,
            password=hash_password(password),
            name=body.name,
            email=(body.email or "").strip().lower() or None,
            role=body.role,
        )
    )
    logger.info("Registered user id=%s role=%s", user.id, user.role.value)
    return UserOut.from_user(user)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login with username and password",
    responses={401: {"description": "Invalid username or password"}},
)
async def login(
    storage: Annotated[Storage, Depends(get_storage)],
    body: LoginBody,
) -> TokenResponse:
    username = (body.username or "").strip()
    if not username or not body.password:
        raise HTTPException(status_code=401, detail="Username and password required")
    user = await storage.get_user_by_username(username)
    if not user or not verify_password(body.password, user.password):
        logger.warning("Failed login for username=%r", username)
        raise HTTPException(status_code=401, detail="Invalid username or password")
    return TokenResponse(
        access_token=create_access_token(user.id, user.username, user.role.value),
        expires_in=ACCESS_TOKEN_EXPIRE_SECONDS,
        user=UserOut.from_user(user),
    )


@router.get(
    "/me",
    response_model=UserOut,
    summary="Get current authenticated user",
    responses={401: {"description": "Not authenticated or invalid token"}},
)
async def me(user: Annotated[User, Depends(get_current_user)]) -> UserOut:
    return UserOut.from_user(user)


@router.get("/session", response_model=SessionResponse, summary="Whether the request is authenticated")
async def session_status(user: Annotated[User | None, Depends(get_optional_user)]) -> SessionResponse:
    if user is None:
        return SessionResponse(is_authenticated=False)
    return SessionResponse(is_authenticated=True, user_id=user.id)
