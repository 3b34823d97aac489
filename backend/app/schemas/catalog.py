"""Catalog Schemas — credit packages and skills."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class CreditPackageSummary(BaseModel):
    """List item: id, name, credit_amount, price."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    credit_amount: int
    price: int


class CreditPackageResponse(CreditPackageSummary):
    created_at: datetime


class SkillSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str


class SkillResponse(SkillSummary):
    created_at: datetime
