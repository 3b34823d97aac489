"""Credit Package Handlers — list, create, delete.

Invariants:
    - name is unique: a duplicate is rejected with 409 before any insert
    - delete reports 400 when the id matches no row
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.core import messages
from app.core.errors import ConflictError
from app.core.payloads import parse_credit_package
from app.infrastructure.observability import component_logger
from app.infrastructure.repository import get_repository
from app.schemas.catalog import CreditPackageResponse, CreditPackageSummary
from app.services.handler_helpers import delete_by_raw_id, require_valid

logger = component_logger("CreditPackage")


class CreditPackageHandlers:
    """Credit package catalogue handlers."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repo = get_repository(db, "CreditPackage")

    async def list_packages(self) -> list[CreditPackageSummary]:
        packages = await self.repo.find()
        return [CreditPackageSummary.model_validate(p) for p in packages]

    async def create_package(self, body: dict) -> CreditPackageResponse:
        data = require_valid(parse_credit_package(body), logger)

        existing = await self.repo.find({"name": data.name})
        if existing:
            logger.warning(messages.DUPLICATE, extra={"fields": ["name"]})
            raise ConflictError("CreditPackage", "name")

        package = self.repo.create(
            name=data.name,
            credit_amount=data.credit_amount,
            price=data.price,
        )
        saved = await self.repo.save(package)
        await self.db.commit()
        return CreditPackageResponse.model_validate(saved)

    async def delete_package(self, package_id: str) -> None:
        await delete_by_raw_id(
            self.db, self.repo, package_id, "CreditPackage", logger,
        )
