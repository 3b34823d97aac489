"""ORM Models — SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Entities are passive records; validation lives at the API boundary

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references and Base.metadata is complete before create_all runs
"""

from app.models.credit_package import CreditPackage  # noqa: F401
from app.models.skill import Skill  # noqa: F401
from app.models.user import User  # noqa: F401
from app.models.coach import Coach  # noqa: F401
from app.models.course import Course  # noqa: F401
