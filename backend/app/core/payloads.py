"""Request Payloads — typed request bodies with a discriminated parse result.

Invariants:
    - parse_* never raises: returns Valid(payload) or Invalid(fields)
    - Invalid.fields lists every offending field in declaration order, not just the first
    - Strings are stored as sent (no trimming); whitespace-only counts as empty
    - Identifier / timestamp strings must also parse (UUID / ISO-8601) to be valid
    - Integers fit a 32-bit signed column; names fit their column width

Design Decisions:
    - Frozen dataclasses over Pydantic: the wire rules (JS-style number checks, null vs
      missing) come from validators.py, not from Pydantic coercion
    - _FieldReader collects failures instead of short-circuiting so logs name all fields
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Generic, Mapping, TypeVar
from uuid import UUID

from app.core.domain_types import CourseId, SkillId, UserId
from app.core.validators import (
    UNDEFINED,
    is_undefined,
    is_not_valid_string,
    is_not_valid_integer,
    is_not_valid_https_url,
)

T = TypeVar("T")

INT_COLUMN_MAX = 2_147_483_647
NAME_MAX_LENGTH = 50
COURSE_NAME_MAX_LENGTH = 100


@dataclass(frozen=True)
class Valid(Generic[T]):
    payload: T


@dataclass(frozen=True)
class Invalid:
    fields: tuple[str, ...]


ParseResult = Valid[T] | Invalid


# ─── Payload Types ───────────────────────────────────────────────

@dataclass(frozen=True)
class CreditPackageInput:
    name: str
    credit_amount: int
    price: int


@dataclass(frozen=True)
class SkillInput:
    name: str


@dataclass(frozen=True)
class CourseFields:
    """Editable course columns, shared by create and update."""
    skill_id: SkillId
    name: str
    description: str
    start_at: datetime
    end_at: datetime
    max_participants: int
    meeting_url: str

    def to_columns(self) -> dict:
        return {
            "skill_id": self.skill_id,
            "name": self.name,
            "description": self.description,
            "start_at": self.start_at,
            "end_at": self.end_at,
            "max_participants": self.max_participants,
            "meeting_url": self.meeting_url,
        }


@dataclass(frozen=True)
class CourseInput:
    user_id: UserId
    fields: CourseFields


@dataclass(frozen=True)
class CourseUpdateInput:
    course_id: CourseId
    fields: CourseFields


@dataclass(frozen=True)
class CoachPromotionInput:
    user_id: UserId
    experience_years: int
    description: str
    profile_image_url: str | None


# ─── Field Reader ────────────────────────────────────────────────

class _FieldReader:
    """Reads fields off a raw body, recording the names of invalid ones."""

    def __init__(self, body: Mapping[str, Any] | None):
        self._body = body or {}
        self.invalid: list[str] = []

    def raw(self, name: str) -> Any:
        return self._body.get(name, UNDEFINED)

    def _reject(self, name: str) -> None:
        if name not in self.invalid:
            self.invalid.append(name)

    def string(
        self, name: str, value: Any = UNDEFINED, max_length: int | None = None,
    ) -> str | None:
        value = self.raw(name) if is_undefined(value) else value
        if is_undefined(value) or is_not_valid_string(value):
            self._reject(name)
            return None
        if max_length is not None and len(value) > max_length:
            self._reject(name)
            return None
        return value

    def integer(self, name: str) -> int | None:
        value = self.raw(name)
        if is_undefined(value) or is_not_valid_integer(value):
            self._reject(name)
            return None
        if value > INT_COLUMN_MAX:
            self._reject(name)
            return None
        return int(value)

    def uuid(self, name: str, value: Any = UNDEFINED) -> UUID | None:
        text = self.string(name, value)
        if text is None:
            return None
        parsed = parse_uuid(text)
        if parsed is None:
            self._reject(name)
        return parsed

    def timestamp(self, name: str) -> datetime | None:
        text = self.string(name)
        if text is None:
            return None
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            self._reject(name)
            return None

    def https_url(self, name: str) -> str | None:
        value = self.raw(name)
        if is_undefined(value) or is_not_valid_https_url(value):
            self._reject(name)
            return None
        return value

    def optional_https_url(self, name: str) -> str | None:
        """Absent, null or blank means no URL; anything else must be https."""
        value = self.raw(name)
        if is_undefined(value) or value is None:
            return None
        if isinstance(value, str) and not value.strip():
            return None
        if is_not_valid_https_url(value):
            self._reject(name)
            return None
        return value


def parse_uuid(value: Any) -> UUID | None:
    """Parse a path/body identifier; None when it is not a UUID string."""
    if is_undefined(value) or is_not_valid_string(value):
        return None
    try:
        return UUID(value)
    except ValueError:
        return None


def _read_course_fields(reader: _FieldReader) -> CourseFields | None:
    skill_id = reader.uuid("skill_id")
    name = reader.string("name", max_length=COURSE_NAME_MAX_LENGTH)
    description = reader.string("description")
    start_at = reader.timestamp("start_at")
    end_at = reader.timestamp("end_at")
    max_participants = reader.integer("max_participants")
    meeting_url = reader.https_url("meeting_url")
    if reader.invalid:
        return None
    return CourseFields(
        skill_id=SkillId(skill_id),
        name=name,
        description=description,
        start_at=start_at,
        end_at=end_at,
        max_participants=max_participants,
        meeting_url=meeting_url,
    )


# ─── Parsers ─────────────────────────────────────────────────────

def parse_credit_package(body: Mapping[str, Any] | None) -> ParseResult[CreditPackageInput]:
    reader = _FieldReader(body)
    name = reader.string("name", max_length=NAME_MAX_LENGTH)
    credit_amount = reader.integer("credit_amount")
    price = reader.integer("price")
    if reader.invalid:
        return Invalid(tuple(reader.invalid))
    return Valid(CreditPackageInput(name=name, credit_amount=credit_amount, price=price))


def parse_skill(body: Mapping[str, Any] | None) -> ParseResult[SkillInput]:
    reader = _FieldReader(body)
    name = reader.string("name", max_length=NAME_MAX_LENGTH)
    if reader.invalid:
        return Invalid(tuple(reader.invalid))
    return Valid(SkillInput(name=name))


def parse_course(body: Mapping[str, Any] | None) -> ParseResult[CourseInput]:
    reader = _FieldReader(body)
    user_id = reader.uuid("user_id")
    fields = _read_course_fields(reader)
    if reader.invalid:
        return Invalid(tuple(reader.invalid))
    return Valid(CourseInput(user_id=UserId(user_id), fields=fields))


def parse_course_update(
    course_id: Any, body: Mapping[str, Any] | None,
) -> ParseResult[CourseUpdateInput]:
    reader = _FieldReader(body)
    parsed_id = reader.uuid("course_id", course_id)
    fields = _read_course_fields(reader)
    if reader.invalid:
        return Invalid(tuple(reader.invalid))
    return Valid(CourseUpdateInput(course_id=CourseId(parsed_id), fields=fields))


def parse_coach_promotion(
    user_id: Any, body: Mapping[str, Any] | None,
) -> ParseResult[CoachPromotionInput]:
    reader = _FieldReader(body)
    parsed_id = reader.uuid("user_id", user_id)
    experience_years = reader.integer("experience_years")
    description = reader.string("description")
    profile_image_url = reader.optional_https_url("profile_image_url")
    if reader.invalid:
        return Invalid(tuple(reader.invalid))
    return Valid(CoachPromotionInput(
        user_id=UserId(parsed_id),
        experience_years=experience_years,
        description=description,
        profile_image_url=profile_image_url,
    ))
