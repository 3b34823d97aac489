"""Infrastructure Layer — datastore access and cross-cutting concerns.

Invariants:
    - Database failures leave this layer as DatabaseError, never raw SQLAlchemy errors
    - Repositories are the only code issuing SQL

Design Decisions:
    - Session manager + repositories split: lifecycle vs data access (ADR: ExMA single responsibility)
"""
