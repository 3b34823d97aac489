"""Routing, CORS and the error pipeline.

Invariants:
    - OPTIONS on any path: 200, {} body, CORS headers
    - Unknown path or method: 404 "無此網站路由"
    - DELETE with an empty id segment: 400 "ID錯誤"
    - Unexpected exceptions: 500 {"status": "error"} with no internal detail
"""

import pytest

from app.api.cors import ALLOW_HEADERS, ALLOW_METHODS
from app.core import messages
from app.infrastructure.repository import SqlAlchemyRepository


def _assert_cors(res):
    assert res.headers["access-control-allow-origin"] == "*"
    assert res.headers["access-control-allow-methods"] == ALLOW_METHODS
    assert res.headers["access-control-allow-headers"] == ALLOW_HEADERS


@pytest.mark.parametrize("path", [
    "/api/credit-package", "/api/coaches/skill/123", "/api/admin/courses", "/anything/else",
])
async def test_options_preflight_any_path(client, path):
    res = await client.options(path)
    assert res.status_code == 200
    assert res.json() == {}
    _assert_cors(res)


async def test_cors_headers_on_regular_responses(client):
    _assert_cors(await client.get("/api/credit-package"))
    _assert_cors(await client.post("/api/coaches/skill", json={}))


async def test_unknown_route_returns_404(client):
    res = await client.get("/api/nope")
    assert res.status_code == 404
    assert res.json() == {"status": "failed", "message": messages.ROUTE_NOT_FOUND}
    _assert_cors(res)


async def test_unsupported_method_returns_404(client):
    res = await client.put("/api/credit-package")
    assert res.status_code == 404
    assert res.json()["message"] == messages.ROUTE_NOT_FOUND


@pytest.mark.parametrize("url", ["/api/credit-package/", "/api/coaches/skill/"])
async def test_delete_with_empty_id_returns_400(client, url):
    res = await client.delete(url)
    assert res.status_code == 400
    assert res.json() == {"status": "failed", "message": messages.INVALID_ID}
    _assert_cors(res)


async def test_trailing_slash_is_not_redirected(client):
    res = await client.get("/api/credit-package/")
    assert res.status_code == 404
    assert res.json()["message"] == messages.ROUTE_NOT_FOUND


async def test_unexpected_error_returns_generic_500(client, monkeypatch):
    async def _boom(self, where=None):
        raise RuntimeError("connection reset by peer")
    monkeypatch.setattr(SqlAlchemyRepository, "find", _boom)

    res = await client.get("/api/credit-package")
    assert res.status_code == 500
    assert res.json() == {"status": "error", "message": messages.SERVER_ERROR}
    assert "connection reset" not in res.text
    _assert_cors(res)
