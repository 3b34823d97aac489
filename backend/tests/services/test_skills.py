"""Skill Routes — list, create with uniqueness, delete by id."""

from uuid import uuid4

import pytest

from app.core import messages
from app.models import Skill

URL = "/api/coaches/skill"


async def test_create_skill(client):
    res = await client.post(URL, json={"name": "Boxing"})
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["name"] == "Boxing"
    assert data["id"]


@pytest.mark.parametrize("body", [{}, {"name": ""}, {"name": "  "}, {"name": 1}, {"name": None}])
async def test_create_skill_rejects_bad_name(client, body):
    res = await client.post(URL, json=body)
    assert res.status_code == 400
    assert res.json() == {"status": "failed", "message": messages.INVALID_FIELDS}


async def test_create_skill_without_body(client):
    res = await client.post(URL)
    assert res.status_code == 400


async def test_duplicate_skill_returns_409(client, seed_skill, fetch_all):
    res = await client.post(URL, json={"name": seed_skill.name})
    assert res.status_code == 409
    assert res.json()["message"] == messages.DUPLICATE
    assert len(await fetch_all(Skill)) == 1


async def test_list_skills(client, seed_skill):
    res = await client.get(URL)
    assert res.status_code == 200
    assert res.json()["data"] == [{"id": str(seed_skill.id), "name": "Yoga"}]


async def test_delete_skill(client, seed_skill, fetch_all):
    res = await client.delete(f"{URL}/{seed_skill.id}")
    assert res.status_code == 200
    assert res.json() == {"status": "success"}
    assert await fetch_all(Skill) == []


async def test_delete_unknown_skill_returns_400(client, seed_skill, fetch_all):
    res = await client.delete(f"{URL}/{uuid4()}")
    assert res.status_code == 400
    assert res.json()["message"] == messages.INVALID_ID
    assert len(await fetch_all(Skill)) == 1


async def test_delete_malformed_skill_id_returns_400(client, seed_skill, fetch_all):
    res = await client.delete(f"{URL}/not-a-uuid")
    assert res.status_code == 400
    assert res.json() == {"status": "failed", "message": messages.INVALID_ID}
    assert len(await fetch_all(Skill)) == 1
