"""Pydantic schemas for auth and user API. The password hash never leaves the server."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.models import User, UserRole


class RegisterBody(BaseModel):
    username: str = Field(..., max_length=64)
    password: str
    name: str | None = None
    email: str | None = None
    role: UserRole = UserRole.ATHLETE


class LoginBody(BaseModel):
    username: str
    password: str


class UserOut(BaseModel):
    id: int
    username: str
    name: str | None = None
    email: str | None = None
    role: UserRole
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserOut":
        return cls(**user.model_dump(exclude={"password"}))


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int  # seconds until access token expires
    user: UserOut


class SessionResponse(BaseModel):
    is_authenticated: bool
    user_id: int | None = None
