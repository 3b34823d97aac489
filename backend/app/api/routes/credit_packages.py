"""Credit Package Routes — /api/credit-package.

Invariants:
    - Routes only translate HTTP <-> handler calls; all rules live in CreditPackageHandlers
    - Body is taken raw (dict) so field rules are applied by core/payloads.py
    - DELETE with an empty final segment reaches the handler as id "" (400 ID error)
"""

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.responses import handle_success
from app.infrastructure.database import get_db
from app.services.handle_credit_packages import CreditPackageHandlers

router = APIRouter(prefix="/api/credit-package", tags=["credit-package"])


@router.get("")
async def list_credit_packages(db: AsyncSession = Depends(get_db)):
    packages = await CreditPackageHandlers(db).list_packages()
    return handle_success(status.HTTP_200_OK, packages)


@router.post("")
async def create_credit_package(
    body: dict | None = Body(None), db: AsyncSession = Depends(get_db),
):
    package = await CreditPackageHandlers(db).create_package(body)
    return handle_success(status.HTTP_200_OK, package)


@router.delete("/{package_id}")
async def delete_credit_package(
    package_id: str, db: AsyncSession = Depends(get_db),
):
    await CreditPackageHandlers(db).delete_package(package_id)
    return handle_success(status.HTTP_200_OK)


@router.delete("/")
async def delete_credit_package_without_id(db: AsyncSession = Depends(get_db)):
    await CreditPackageHandlers(db).delete_package("")
    return handle_success(status.HTTP_200_OK)
