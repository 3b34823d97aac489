"""Handler Helpers — shared steps of the parse/look-up/delete sequence.

Invariants:
    - require_valid logs the offending fields before raising
    - delete_by_raw_id treats malformed ids and 0-affected deletes identically (400 ID error)
"""

from typing import TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from app.core import messages
from app.core.errors import FieldValidationError, InvalidIdError
from app.core.payloads import Invalid, ParseResult, parse_uuid
from app.core.repository_protocols import EntityRepository
from app.infrastructure.observability import ComponentAdapter

T = TypeVar("T")


def require_valid(
    result: ParseResult[T], logger: ComponentAdapter, log_message: str = messages.INVALID_FIELDS,
) -> T:
    """Unwrap a parse result or raise FieldValidationError."""
    if isinstance(result, Invalid):
        logger.warning(log_message, extra={"fields": list(result.fields)})
        raise FieldValidationError(list(result.fields))
    return result.payload


async def delete_by_raw_id(
    db: AsyncSession,
    repo: EntityRepository,
    raw_id: str,
    resource_type: str,
    logger: ComponentAdapter,
) -> None:
    """Delete one row addressed by a path segment, committing on success."""
    entity_id = parse_uuid(raw_id)
    if entity_id is None:
        logger.warning(messages.INVALID_ID, extra={"resource_id": raw_id})
        raise InvalidIdError(resource_type, raw_id)
    affected = await repo.delete(entity_id)
    if affected == 0:
        logger.warning(messages.INVALID_ID, extra={"resource_id": raw_id})
        raise InvalidIdError(resource_type, raw_id)
    await db.commit()
