"""Error Hierarchy — verifies status codes and the uniform response envelope."""

import pytest

from app.core.errors import (
    DatabaseError,
    DuplicateKeyError,
    DuplicateUsernameError,
    ErrorCategory,
    ExerciseTrackerError,
    InputValidationError,
    InternalError,
    ResourceNotFoundError,
    RouteNotFoundError,
)


@pytest.mark.parametrize("error, status", [
    (InputValidationError("bad"), 400),
    (ResourceNotFoundError("missing"), 404),
    (DuplicateUsernameError("Amy"), 400),
    (DatabaseError("down"), 500),
    (DuplicateKeyError("username", "Amy"), 400),
    (RouteNotFoundError("nope"), 404),
    (RouteNotFoundError("bad id", status=400), 400),
    (InternalError("Server error"), 500),
])
def test_http_status(error, status):
    assert isinstance(error, ExerciseTrackerError)
    assert error.http_status == status


def test_to_response_envelope():
    error = ResourceNotFoundError("User not found. Please check the ID and try again.")
    assert error.to_response() == {
        "success": False,
        "status": 404,
        "message": "User not found. Please check the ID and try again.",
    }


def test_duplicate_username_message():
    assert DuplicateUsernameError("Amy").message == "User already exists"


def test_duplicate_key_is_a_database_error_with_conflict_category():
    error = DuplicateKeyError("username", "Amy")
    assert isinstance(error, DatabaseError)
    assert error.category == ErrorCategory.CONFLICT
    assert error.field == "username"
    assert error.value == "Amy"


def test_internal_error_keeps_operation_message():
    error = InternalError("Error retrieving exercises")
    assert error.category == ErrorCategory.INTERNAL
    assert error.to_response()["message"] == "Error retrieving exercises"
