"""Admin Handlers — create_course, edit_course, change_role.

Invariants:
    - A course can only be created for an existing user that already holds COACH
    - edit_course requires the course to exist and the update to touch a row
    - change_role requires an existing non-coach user; role update and Coach insert
      are committed together (one unit of work, rolled back together on failure)

Design Decisions:
    - Re-fetch after commit: the response reflects what the database stored
      (defaults, onupdate timestamps), not the in-memory request object
    - No locking: concurrent promotions of one user race, the unique
      coaches.user_id constraint makes the loser fail with a database error
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.core import messages
from app.core.domain_types import UserId, UserRole
from app.core.errors import BusinessRuleError, ResourceNotFoundError
from app.core.payloads import (
    Invalid,
    parse_course,
    parse_course_update,
    parse_coach_promotion,
)
from app.infrastructure.observability import component_logger
from app.infrastructure.repository import get_repository
from app.schemas.admin import (
    CoachPromotionResponse,
    CoachResponse,
    CourseResponse,
    PromotedUser,
)
from app.services.handler_helpers import require_valid

logger = component_logger("Admin")


class AdminHandlers:
    """Course management and coach promotion."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.users = get_repository(db, "User")
        self.coaches = get_repository(db, "Coach")
        self.courses = get_repository(db, "Course")

    async def _get_user_or_raise(self, user_id: UserId):
        user = await self.users.find_one({"id": user_id})
        if not user:
            logger.warning(messages.USER_NOT_FOUND, extra={"resource_id": str(user_id)})
            raise ResourceNotFoundError("User", str(user_id), messages.USER_NOT_FOUND)
        return user

    async def create_course(self, body: dict) -> CourseResponse:
        data = require_valid(parse_course(body), logger)

        user = await self._get_user_or_raise(data.user_id)
        if user.role != UserRole.COACH.value:
            logger.warning(messages.USER_NOT_COACH, extra={"resource_id": str(user.id)})
            raise BusinessRuleError(messages.USER_NOT_COACH, "USER_NOT_COACH")

        course = self.courses.create(user_id=data.user_id, **data.fields.to_columns())
        saved = await self.courses.save(course)
        await self.db.commit()

        course = await self.courses.find_one({"id": saved.id})
        return CourseResponse.model_validate(course)

    async def edit_course(self, course_id: str, body: dict) -> dict:
        data = require_valid(parse_course_update(course_id, body), logger)

        existing = await self.courses.find_one({"id": data.course_id})
        if not existing:
            logger.warning(messages.COURSE_NOT_FOUND, extra={"resource_id": course_id})
            raise ResourceNotFoundError("Course", course_id, messages.COURSE_NOT_FOUND)

        affected = await self.courses.update(
            {"id": data.course_id}, data.fields.to_columns(),
        )
        if affected == 0:
            logger.warning(messages.COURSE_UPDATE_FAILED, extra={"resource_id": course_id})
            raise BusinessRuleError(messages.COURSE_UPDATE_FAILED, "COURSE_UPDATE_FAILED")
        await self.db.commit()

        course = await self.courses.find_one({"id": data.course_id})
        return {"course": CourseResponse.model_validate(course)}

    async def change_role(self, user_id: str, body: dict) -> CoachPromotionResponse:
        result = parse_coach_promotion(user_id, body)
        log_message = messages.INVALID_FIELDS
        if isinstance(result, Invalid) and result.fields == ("profile_image_url",):
            log_message = messages.INVALID_PROFILE_IMAGE_URL
        data = require_valid(result, logger, log_message)

        user = await self._get_user_or_raise(data.user_id)
        if user.role == UserRole.COACH.value:
            logger.warning(messages.USER_ALREADY_COACH, extra={"resource_id": user_id})
            raise BusinessRuleError(messages.USER_ALREADY_COACH, "USER_ALREADY_COACH")

        coach = self.coaches.create(
            user_id=data.user_id,
            experience_years=data.experience_years,
            description=data.description,
            profile_image_url=data.profile_image_url,
        )
        affected = await self.users.update(
            {"id": data.user_id}, {"role": UserRole.COACH.value},
        )
        if affected == 0:
            logger.warning(messages.USER_UPDATE_FAILED, extra={"resource_id": user_id})
            raise BusinessRuleError(messages.USER_UPDATE_FAILED, "USER_UPDATE_FAILED")
        saved_coach = await self.coaches.save(coach)
        await self.db.commit()

        saved_user = await self.users.find_one({"id": data.user_id})
        return CoachPromotionResponse(
            user=PromotedUser.model_validate(saved_user),
            coach=CoachResponse.model_validate(saved_coach),
        )
