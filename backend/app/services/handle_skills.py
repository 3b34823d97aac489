"""Skill Handlers — list, create, delete coaching skills."""

from sqlalchemy.ext.asyncio import AsyncSession

from app.core import messages
from app.core.errors import ConflictError
from app.core.payloads import parse_skill
from app.infrastructure.observability import component_logger
from app.infrastructure.repository import get_repository
from app.schemas.catalog import SkillResponse, SkillSummary
from app.services.handler_helpers import delete_by_raw_id, require_valid

logger = component_logger("Skill")


class SkillHandlers:
    """Skill catalogue handlers."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repo = get_repository(db, "Skill")

    async def list_skills(self) -> list[SkillSummary]:
        skills = await self.repo.find()
        return [SkillSummary.model_validate(s) for s in skills]

    async def create_skill(self, body: dict) -> SkillResponse:
        data = require_valid(parse_skill(body), logger)

        if await self.repo.find({"name": data.name}):
            logger.warning(messages.DUPLICATE, extra={"fields": ["name"]})
            raise ConflictError("Skill", "name")

        saved = await self.repo.save(self.repo.create(name=data.name))
        await self.db.commit()
        return SkillResponse.model_validate(saved)

    async def delete_skill(self, skill_id: str) -> None:
        await delete_by_raw_id(self.db, self.repo, skill_id, "Skill", logger)
