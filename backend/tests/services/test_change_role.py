"""Coach Promotion — POST /api/admin/coaches/{userId}.

Invariants:
    - Eligible user: 201 with user (name, role=COACH) and the created coach record
    - Unknown user or user already COACH: 400, no Coach row
    - profile_image_url optional, must be https when given
    - Role update and Coach insert commit together
"""

from uuid import uuid4

import pytest

from app.core import messages
from app.core.domain_types import UserRole
from app.infrastructure.repository import SqlAlchemyRepository
from app.models import Coach, User

BODY = {"experience_years": 5, "description": "Certified yoga instructor"}


def _url(user_id) -> str:
    return f"/api/admin/coaches/{user_id}"


async def test_promote_eligible_user(client, seed_user, fetch_all):
    res = await client.post(
        _url(seed_user.id),
        json={**BODY, "profile_image_url": "https://img.example.com/a.png"},
    )
    assert res.status_code == 201
    data = res.json()["data"]
    assert data["user"] == {"name": "Alice", "role": "COACH"}
    assert data["coach"]["user_id"] == str(seed_user.id)
    assert data["coach"]["experience_years"] == 5
    assert data["coach"]["profile_image_url"] == "https://img.example.com/a.png"

    users = await fetch_all(User, id=seed_user.id)
    assert users[0].role == UserRole.COACH.value
    assert len(await fetch_all(Coach, user_id=seed_user.id)) == 1


async def test_promote_without_image(client, seed_user):
    res = await client.post(_url(seed_user.id), json=BODY)
    assert res.status_code == 201
    assert res.json()["data"]["coach"]["profile_image_url"] is None


async def test_promote_existing_coach_returns_400(client, seed_coach_user, fetch_all):
    res = await client.post(_url(seed_coach_user.id), json=BODY)
    assert res.status_code == 400
    assert res.json() == {"status": "failed", "message": messages.USER_ALREADY_COACH}
    assert await fetch_all(Coach) == []


async def test_promote_unknown_user_returns_400(client):
    res = await client.post(_url(uuid4()), json=BODY)
    assert res.status_code == 400
    assert res.json()["message"] == messages.USER_NOT_FOUND


async def test_promote_rejects_http_image(client, seed_user, fetch_all):
    res = await client.post(
        _url(seed_user.id), json={**BODY, "profile_image_url": "http://img.example.com/a.png"},
    )
    assert res.status_code == 400
    assert res.json()["message"] == messages.INVALID_FIELDS
    users = await fetch_all(User, id=seed_user.id)
    assert users[0].role == UserRole.USER.value


@pytest.mark.parametrize("body", [
    {"description": "d"},
    {"experience_years": -1, "description": "d"},
    {"experience_years": "5", "description": "d"},
    {"experience_years": 5},
    {"experience_years": 5, "description": "   "},
])
async def test_promote_rejects_bad_fields(client, seed_user, body):
    res = await client.post(_url(seed_user.id), json=body)
    assert res.status_code == 400
    assert res.json()["message"] == messages.INVALID_FIELDS


async def test_failed_coach_insert_leaves_role_unchanged(client, seed_user, fetch_all, monkeypatch):
    original_save = SqlAlchemyRepository.save

    async def _failing_save(self, entity):
        if isinstance(entity, Coach):
            raise RuntimeError("insert failed")
        return await original_save(self, entity)
    monkeypatch.setattr(SqlAlchemyRepository, "save", _failing_save)

    res = await client.post(_url(seed_user.id), json=BODY)
    assert res.status_code == 500
    assert res.json() == {"status": "error", "message": messages.SERVER_ERROR}

    users = await fetch_all(User, id=seed_user.id)
    assert users[0].role == UserRole.USER.value
    assert await fetch_all(Coach) == []
