"""Admin Routes — /api/admin course management and coach promotion.

Invariants:
    - Course creation and coach promotion answer 201; course edits answer 200
    - Path identifiers are passed through as strings; AdminHandlers validates them
"""

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.responses import handle_success
from app.infrastructure.database import get_db
from app.services.handle_admin import AdminHandlers

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.post("/courses")
async def create_course(
    body: dict | None = Body(None), db: AsyncSession = Depends(get_db),
):
    course = await AdminHandlers(db).create_course(body)
    return handle_success(status.HTTP_201_CREATED, course)


@router.patch("/courses/{course_id}")
async def edit_course(
    course_id: str,
    body: dict | None = Body(None),
    db: AsyncSession = Depends(get_db),
):
    result = await AdminHandlers(db).edit_course(course_id, body)
    return handle_success(status.HTTP_200_OK, result)


@router.post("/coaches/{user_id}")
async def change_role(
    user_id: str,
    body: dict | None = Body(None),
    db: AsyncSession = Depends(get_db),
):
    result = await AdminHandlers(db).change_role(user_id, body)
    return handle_success(status.HTTP_201_CREATED, result)
