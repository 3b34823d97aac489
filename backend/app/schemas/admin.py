"""Admin Schemas — courses and coach promotion results.

Invariants:
    - PromotedUser exposes only name and role (no id/email leak in the promotion result)
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class CourseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    skill_id: UUID
    name: str
    description: str
    start_at: datetime
    end_at: datetime
    max_participants: int
    meeting_url: str
    created_at: datetime
    updated_at: datetime


class PromotedUser(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    role: str


class CoachResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    experience_years: int
    description: str
    profile_image_url: str | None = None
    created_at: datetime
    updated_at: datetime


class CoachPromotionResponse(BaseModel):
    user: PromotedUser
    coach: CoachResponse
