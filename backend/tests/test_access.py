"""Unit tests for ownership and role rules."""

from datetime import datetime, timezone

import pytest

from app.core.access import (
    can_manage_group,
    can_manage_scheduled_workout,
    can_submit_result,
    can_view_group,
    is_coach_or_admin,
    owns_record,
)
from app.models import Group, GroupMemberInsert, ScheduledWorkout, User, UserRole, Workout, WorkoutType

NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


def _user(user_id: int, role: UserRole = UserRole.ATHLETE) -> User:
    return User(id=user_id, username=f"u{user_id}", password="x", role=role, created_at=NOW)


COACH = _user(1, UserRole.COACH)
ADMIN = _user(2, UserRole.ADMIN)
MEMBER = _user(3)
STRANGER = _user(4)
OTHER_COACH = _user(5, UserRole.COACH)
GROUP = Group(id=1, name="Noon", coach_id=COACH.id, created_at=NOW)


def test_roles():
    assert is_coach_or_admin(COACH)
    assert is_coach_or_admin(ADMIN)
    assert not is_coach_or_admin(MEMBER)


def test_owns_record():
    workout = Workout(id=1, user_id=MEMBER.id, date=NOW, type=WorkoutType.SKILL, description="HS walk")
    assert owns_record(MEMBER, workout)
    assert not owns_record(STRANGER, workout)
    # Admins get no override on personal data
    assert not owns_record(ADMIN, workout)


def test_can_manage_group():
    assert can_manage_group(COACH, GROUP)
    assert can_manage_group(ADMIN, GROUP)
    assert not can_manage_group(OTHER_COACH, GROUP)
    assert not can_manage_group(MEMBER, GROUP)


@pytest.mark.asyncio
async def test_can_view_group_and_submit(storage):
    await storage.add_group_member(GroupMemberInsert(group_id=GROUP.id, user_id=MEMBER.id))
    for user in (COACH, ADMIN, MEMBER):
        assert await can_view_group(storage, user, GROUP)
        assert await can_submit_result(storage, user, GROUP)
    assert not await can_view_group(storage, STRANGER, GROUP)
    assert not await can_submit_result(storage, OTHER_COACH, GROUP)


def test_can_manage_scheduled_workout_creator():
    by_member = ScheduledWorkout(
        id=1, group_id=GROUP.id, workout_id=1, scheduled_date=NOW, created_by=MEMBER.id, created_at=NOW
    )
    assert can_manage_scheduled_workout(COACH, GROUP)
    assert not can_manage_scheduled_workout(MEMBER, GROUP)
    assert can_manage_scheduled_workout(MEMBER, GROUP, by_member)
    assert not can_manage_scheduled_workout(STRANGER, GROUP, by_member)


@pytest.mark.asyncio
async def test_joining_group_grants_view_and_submit(storage):
    assert not await can_view_group(storage, STRANGER, GROUP)
    assert not await can_submit_result(storage, STRANGER, GROUP)

    await storage.add_group_member(GroupMemberInsert(group_id=GROUP.id, user_id=STRANGER.id))
    assert await can_view_group(storage, STRANGER, GROUP)
    assert await can_submit_result(storage, STRANGER, GROUP)
    assert not can_manage_group(STRANGER, GROUP)

    await storage.remove_group_member(GROUP.id, STRANGER.id)
    assert not await can_view_group(storage, STRANGER, GROUP)
