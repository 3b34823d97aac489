"""Error Hierarchy — status codes and envelopes for each failure category."""

from app.core import messages
from app.core.errors import (
    BusinessRuleError,
    ConflictError,
    DatabaseError,
    ErrorCategory,
    FieldValidationError,
    InvalidIdError,
    ResourceNotFoundError,
)


def test_field_validation_error_is_400_failed():
    err = FieldValidationError(["name", "price"])
    assert err.http_status == 400
    assert err.category == ErrorCategory.VALIDATION
    assert err.fields == ["name", "price"]
    assert err.context.fields == ["name", "price"]
    assert err.to_response() == {"status": "failed", "message": messages.INVALID_FIELDS}


def test_conflict_error_is_409():
    err = ConflictError("Skill", "name")
    assert err.http_status == 409
    assert err.to_response() == {"status": "failed", "message": messages.DUPLICATE}


def test_missing_entity_is_400_with_given_message():
    err = ResourceNotFoundError("User", "abc", messages.USER_NOT_FOUND)
    assert err.http_status == 400
    assert err.context.resource_id == "abc"
    assert err.to_response()["message"] == messages.USER_NOT_FOUND


def test_invalid_id_and_business_rule_are_400():
    assert InvalidIdError("Skill", "x").to_response() == {
        "status": "failed", "message": messages.INVALID_ID,
    }
    err = BusinessRuleError(messages.USER_ALREADY_COACH, "USER_ALREADY_COACH")
    assert err.http_status == 400
    assert err.code == "USER_ALREADY_COACH"


def test_database_error_hides_detail():
    err = DatabaseError("duplicate key value violates unique constraint", "commit")
    assert err.http_status == 500
    assert err.to_response() == {"status": "error", "message": messages.SERVER_ERROR}
    assert "duplicate key" in err.context.debug_info["detail"]
