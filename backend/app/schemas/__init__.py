"""Pydantic Schemas — response shapes for API endpoints.

Invariants:
    - Schemas read ORM rows via from_attributes; routes never hand-build row dicts
    - Field order matches what the admin panel renders

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
    - Request bodies are parsed by core/payloads.py, not here: the wire rules are not Pydantic's
"""
