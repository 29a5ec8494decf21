"""Training groups run by a coach, and their membership rows."""

from typing import ClassVar

from app.models.base import Entity, Insert, Patch, UtcDatetime


class Group(Entity):
    name: str
    description: str | None = None
    coach_id: int
    created_at: UtcDatetime


class GroupInsert(Insert):
    name: str
    description: str | None = None
    coach_id: int


class GroupUpdate(Patch):
    not_null: ClassVar[frozenset[str]] = frozenset({"name", "coach_id"})

    name: str | None = None
    description: str | None = None
    coach_id: int | None = None


class GroupMember(Entity):
    group_id: int
    user_id: int
    joined_at: UtcDatetime


class GroupMemberInsert(Insert):
    group_id: int
    user_id: int
