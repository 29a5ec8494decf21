"""
Ownership and role rules for workouts, PRs, groups, scheduled workouts and results.

Predicates only: callers fetch the entities (and the group a row points at),
answer 404 when one is missing, then evaluate the rule and answer 403 on False.
"""

from typing import Protocol

from app.models import Group, ScheduledWorkout, User, UserRole
from app.storage import Storage


class Owned(Protocol):
    user_id: int


def is_admin(user: User) -> bool:
    return user.role == UserRole.ADMIN


def is_coach_or_admin(user: User) -> bool:
    return user.role in (UserRole.COACH, UserRole.ADMIN)


def owns_record(user: User, record: Owned) -> bool:
    """Workouts, PRs and results are changed only by the user they belong to."""
    return record.user_id == user.id


def can_manage_group(user: User, group: Group) -> bool:
    """Edit/delete the group, add/remove members: its coach or any admin."""
    return group.coach_id == user.id or is_admin(user)


async def can_view_group(storage: Storage, user: User, group: Group) -> bool:
    """See the group and its members: coach, admin, or a member."""
    if can_manage_group(user, group):
        return True
    return await storage.is_group_member(group.id, user.id)


def can_manage_scheduled_workout(user: User, group: Group, scheduled: ScheduledWorkout | None = None) -> bool:
    """Schedule into group (scheduled=None) or change/delete an existing one: manage rule or its creator."""
    if can_manage_group(user, group):
        return True
    return scheduled is not None and scheduled.created_by == user.id


async def can_submit_result(storage: Storage, user: User, group: Group) -> bool:
    """Log a result for a workout scheduled into group: member, its coach, or admin."""
    return await can_view_group(storage, user, group)


async def can_view_results(storage: Storage, user: User, group: Group) -> bool:
    return await can_view_group(storage, user, group)
