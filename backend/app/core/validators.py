"""Field Validators — pure predicates over raw JSON values.

Invariants:
    - No side effects, never raise
    - UNDEFINED marks a key absent from the request body; JSON null is a present value
    - bool is never accepted as a number (Python bool subclasses int)

Design Decisions:
    - Negative predicates (is_not_valid_*) so call sites read as rejection lists
    - Sentinel object over None: a null body field must still fail the string check
"""

import re
from typing import Any


class _Undefined:
    """Marker for a field missing from the request body."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED: Any = _Undefined()

_PASSWORD_PATTERN = re.compile(r"(?=.*\d)(?=.*[a-z])(?=.*[A-Z]).{8,16}")


def is_undefined(value: Any) -> bool:
    return value is UNDEFINED


def is_not_valid_string(value: Any) -> bool:
    return not isinstance(value, str) or len(value.strip()) == 0


def is_not_valid_integer(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return True
    if value != value:  # NaN
        return True
    return value < 0 or value % 1 != 0


def is_valid_password(value: Any) -> bool:
    """8-16 chars with at least one digit, one lowercase and one uppercase letter."""
    if not isinstance(value, str):
        return False
    return _PASSWORD_PATTERN.search(value) is not None


def is_not_valid_https_url(value: Any) -> bool:
    return is_not_valid_string(value) or not value.startswith("https")
