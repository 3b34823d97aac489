"""Response Formatter — the {status, message|data} envelope every endpoint returns.

Invariants:
    - Success: {"status": "success", "data": ...}; data key omitted for bare acks
    - Failure: {"status": "failed" | "error", "message": ...}
    - Payloads pass through jsonable_encoder (UUID, datetime, Pydantic models)
"""

from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.core.domain_types import ResponseStatus

_NO_DATA = object()


def handle_success(
    status_code: int = status.HTTP_200_OK, data: Any = _NO_DATA,
) -> JSONResponse:
    content: dict[str, Any] = {"status": ResponseStatus.SUCCESS.value}
    if data is not _NO_DATA:
        content["data"] = jsonable_encoder(data)
    return JSONResponse(status_code=status_code, content=content)


def handle_failed(
    status_code: int,
    message: str,
    response_status: ResponseStatus = ResponseStatus.FAILED,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": response_status.value, "message": message},
    )
