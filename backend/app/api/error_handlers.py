"""Error Handlers — global exception handlers mapping every failure to the envelope.

Invariants:
    - CoachHubError → its own http_status + to_response()
    - RequestValidationError (unparseable / non-object body) → 400 invalid fields
    - Starlette 404/405 → 404 "no such route"
    - Exception (catch-all) → 500 generic message, never leaks internal details

Design Decisions:
    - Four-layer handler: domain, validation, routing, catch-all
    - Catch-all sets CORS headers itself: it runs in ServerErrorMiddleware, outside
      the CORS middleware
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.cors import cors_headers
from app.api.responses import handle_failed
from app.core import messages
from app.core.domain_types import ResponseStatus
from app.core.errors import CoachHubError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI, allow_origin: str = "*") -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_coachhub_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app, allow_origin)


def _register_coachhub_error_handler(app: FastAPI) -> None:

    @app.exception_handler(CoachHubError)
    async def coachhub_error_handler(request: Request, exc: CoachHubError):
        """Handle all CoachHub domain/infrastructure errors."""
        level = (
            logging.ERROR
            if exc.severity in (ErrorSeverity.ERROR, ErrorSeverity.CRITICAL)
            else logging.WARNING
        )
        logger.log(
            level,
            f"CoachHubError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "fields": exc.context.fields,
            },
        )
        return handle_failed(
            exc.http_status, exc.message, exc.response_status,
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Malformed body — same answer as a field check failure."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return handle_failed(status.HTTP_400_BAD_REQUEST, messages.INVALID_FIELDS)


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (
            status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
        ):
            logger.warning(
                f"No route for {request.method} {request.url.path}",
                extra={"path": request.url.path, "method": request.method},
            )
            return handle_failed(
                status.HTTP_404_NOT_FOUND, messages.ROUTE_NOT_FOUND,
            )
        return handle_failed(exc.status_code, str(exc.detail))


def _register_generic_error_handler(app: FastAPI, allow_origin: str) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        response = handle_failed(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            messages.SERVER_ERROR,
            ResponseStatus.ERROR,
        )
        response.headers.update(cors_headers(allow_origin))
        return response
