"""Database Metadata — SQLAlchemy declarative Base.

Invariants:
    - One Base, one MetaData for every table

Design Decisions:
    - asyncpg driver for PostgreSQL (ADR: native async, no thread pool overhead)
"""
