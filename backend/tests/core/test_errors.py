"""Error hierarchy — status codes, envelope shape, not-found resolution."""

from app.api.error_handlers import resolve_status
from app.config import get_settings
from app.core.errors import (
    DatabaseError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    ResourceNotFoundError,
)


def test_database_error_is_503_and_critical():
    err = DatabaseError("Connection or operational error", "execute")
    assert err.http_status == 503
    assert err.severity is ErrorSeverity.CRITICAL
    assert err.category is ErrorCategory.DATABASE
    assert err.context.operation == "execute"


def test_database_error_keeps_caller_operation():
    err = DatabaseError("boom", "execute", ErrorContext(operation="insert"))
    assert err.context.operation == "insert"


def test_not_found_message_names_resource():
    err = ResourceNotFoundError("Student", "7")
    assert err.message == "Student '7' not found"
    assert err.http_status == 404


def test_to_response_envelope():
    err = ResourceNotFoundError("Student", "7", ErrorContext(student_id=7, operation="get"))
    body = err.to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["category"] == "resource_not_found"
    assert body["context"] == {"student_id": 7, "operation": "get"}
    assert "timestamp" in body


def test_not_found_resolves_to_configured_status(monkeypatch):
    err = ResourceNotFoundError("Student", "7")
    assert resolve_status(err) == 503
    monkeypatch.setattr(get_settings(), "not_found_status", 404)
    assert resolve_status(err) == 404


def test_database_error_status_ignores_not_found_setting(monkeypatch):
    monkeypatch.setattr(get_settings(), "not_found_status", 404)
    assert resolve_status(DatabaseError("boom", "execute")) == 503
