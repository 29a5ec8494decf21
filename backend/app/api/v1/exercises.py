"""Exercise catalog: list (by category or search) and detail. Public, no auth."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_storage
from app.models import Exercise, ExerciseCategory
from app.storage import Storage

router = APIRouter(prefix="/exercises", tags=["exercises"])


@router.get("", response_model=list[Exercise], summary="List exercises")
async def list_exercises(
    storage: Annotated[Storage, Depends(get_storage)],
    category: ExerciseCategory | None = None,
    search: str | None = None,
) -> list[Exercise]:
    """Filter by category, else search name/description (case-insensitive), else everything."""
    if category is not None:
        return await storage.get_exercises_by_category(category.value)
    if search and search.strip():
        return await storage.search_exercises(search.strip())
    return await storage.get_all_exercises()


@router.get(
    "/{exercise_id}",
    response_model=Exercise,
    summary="Get exercise",
    responses={404: {"description": "Exercise not found"}},
)
async def get_exercise(
    storage: Annotated[Storage, Depends(get_storage)],
    exercise_id: int,
) -> Exercise:
    exercise = await storage.get_exercise(exercise_id)
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found.")
    return exercise
