"""Download my data (profile, workouts, PRs) as JSON or CSV."""

from typing import Annotated, Literal

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, Response

from app.api.deps import get_current_user, get_storage
from app.models import User
from app.services.export import EXPORT_FILENAME, collect_export, export_csv
from app.storage import Storage

router = APIRouter(prefix="/export", tags=["export"])


@router.get("", summary="Export my data", responses={401: {"description": "Not authenticated"}})
async def export_data(
    storage: Annotated[Storage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    format: Literal["json", "csv"] = "json",
) -> Response:
    if format == "csv":
        return Response(
            content=await export_csv(storage, user),
            media_type="text/csv",
            headers={"Content-Disposition": f"attachment; filename={EXPORT_FILENAME}.csv"},
        )
    return JSONResponse(
        content=await collect_export(storage, user),
        headers={"Content-Disposition": f"attachment; filename={EXPORT_FILENAME}.json"},
    )
