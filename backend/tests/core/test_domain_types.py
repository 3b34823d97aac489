"""Domain Types — role, envelope status, and server state values."""

from app.core.domain_types import ResponseStatus, ServerState, UserRole


def test_user_roles_are_upper_case_strings():
    assert UserRole.COACH.value == "COACH"
    assert UserRole("USER") is UserRole.USER


def test_response_statuses():
    assert {s.value for s in ResponseStatus} == {"success", "failed", "error"}


def test_server_state_lifecycle_order():
    assert [s.value for s in ServerState] == [
        "uninitialized", "connecting", "listening", "stopped",
    ]
