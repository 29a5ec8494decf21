"""Base classes for stored entities, insert payloads and partial-update patches."""

from datetime import datetime, timezone
from typing import Annotated, Any, ClassVar, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict, model_validator


def as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken as UTC; aware ones are converted to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class Entity(BaseModel):
    """A stored row. Frozen: the store hands out new copies instead of mutating in place."""

    model_config = ConfigDict(frozen=True)

    id: int


class Insert(BaseModel):
    """Fields a caller supplies when creating an entity (no id, no server timestamps)."""


class Patch(BaseModel):
    """Partial update: every field optional. Unset fields leave the entity as is; fields
    set to None clear it, except those listed in not_null, which reject None."""

    not_null: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_on_required(self):
        cleared = sorted(
            name for name in self.model_fields_set & self.not_null if getattr(self, name) is None
        )
        if cleared:
            raise ValueError(f"Field(s) cannot be null: {', '.join(cleared)}")
        return self

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


E = TypeVar("E", bound=Entity)


def apply_patch(entity: E, patch: Patch | None) -> E:
    """Merge the fields a patch sets into a copy of entity (shallow, patch wins)."""
    if patch is None:
        return entity
    changes = patch.changes()
    changes.pop("id", None)
    unknown = set(changes) - set(type(entity).model_fields)
    if unknown:
        raise ValueError(f"{type(entity).__name__} has no field(s): {', '.join(sorted(unknown))}")
    if not changes:
        return entity
    return entity.model_copy(update=changes)
