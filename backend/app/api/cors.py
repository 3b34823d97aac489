"""CORS — fixed header set on every response, short-circuit for preflight.

Invariants:
    - Every response (including errors and 404s) carries the CORS headers
    - OPTIONS on any path answers 200 with an empty JSON object, never reaching a route

Design Decisions:
    - HTTP middleware over CORSMiddleware: Starlette only decorates requests that send
      an Origin header, while the admin panel contract wants the headers unconditionally
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

ALLOW_METHODS = "PATCH, POST, GET, OPTIONS, DELETE"
ALLOW_HEADERS = "Content-Type, Authorization, Content-Length, X-Requested-With"


def cors_headers(allow_origin: str) -> dict[str, str]:
    return {
        "Access-Control-Allow-Headers": ALLOW_HEADERS,
        "Access-Control-Allow-Origin": allow_origin,
        "Access-Control-Allow-Methods": ALLOW_METHODS,
    }


def register_cors(app: FastAPI, allow_origin: str) -> None:
    """Install the CORS middleware on the app."""
    headers = cors_headers(allow_origin)

    @app.middleware("http")
    async def apply_cors_headers(request: Request, call_next):
        if request.method == "OPTIONS":
            response = JSONResponse(status_code=status.HTTP_200_OK, content={})
        else:
            response = await call_next(request)
        response.headers.update(headers)
        return response
