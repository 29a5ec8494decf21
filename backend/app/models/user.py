from enum import Enum
from typing import ClassVar

from app.models.base import Entity, Insert, Patch, UtcDatetime


class UserRole(str, Enum):
    ATHLETE = "athlete"
    COACH = "coach"
    ADMIN = "admin"


class User(Entity):
    username: str
    password: str  # bcrypt hash; routes must never serialize it
    name: str | None = None
    email: str | None = None
    role: UserRole = UserRole.ATHLETE
    created_at: UtcDatetime


class UserInsert(Insert):
    username: str
    password: str
    name: str | None = None
    email: str | None = None
    role: UserRole = UserRole.ATHLETE


class UserUpdate(Patch):
    not_null: ClassVar[frozenset[str]] = frozenset({"username", "password", "role"})

    username: str | None = None
    password: str | None = None
    name: str | None = None
    email: str | None = None
    role: UserRole | None = None
