"""Unit tests for taskhub.errors."""

from taskhub.errors import (
    AccessDeniedError,
    AuthenticationError,
    ErrorDetails,
    ResourceNotFoundError,
    ValidationFailure,
)


def test_not_found_message_from_fields():
    err = ResourceNotFoundError(resource_name="Task", field_name="id", field_value=42)
    assert err.message == "Task not found with id: '42'"
    assert err.status_code == 404


def test_access_denied_is_reported_as_not_found():
    err = AccessDeniedError("You do not have access to this task")
    assert isinstance(err, ResourceNotFoundError)
    assert err.status_code == 404


def test_status_codes():
    assert ValidationFailure("bad").status_code == 400
    assert AuthenticationError("no").status_code == 401


def test_error_details_has_timestamp():
    details = ErrorDetails(message="boom", details="uri=/api/tasks")
    assert details.timestamp.tzinfo is not None
