"""Skill Routes — /api/coaches/skill."""

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.responses import handle_success
from app.infrastructure.database import get_db
from app.services.handle_skills import SkillHandlers

router = APIRouter(prefix="/api/coaches/skill", tags=["skill"])


@router.get("")
async def list_skills(db: AsyncSession = Depends(get_db)):
    return handle_success(status.HTTP_200_OK, await SkillHandlers(db).list_skills())


@router.post("")
async def create_skill(
    body: dict | None = Body(None), db: AsyncSession = Depends(get_db),
):
    skill = await SkillHandlers(db).create_skill(body)
    return handle_success(status.HTTP_200_OK, skill)


@router.delete("/{skill_id}")
async def delete_skill(skill_id: str, db: AsyncSession = Depends(get_db)):
    await SkillHandlers(db).delete_skill(skill_id)
    return handle_success(status.HTTP_200_OK)


@router.delete("/")
async def delete_skill_without_id(db: AsyncSession = Depends(get_db)):
    await SkillHandlers(db).delete_skill("")
    return handle_success(status.HTTP_200_OK)
