"""Error Hierarchy: codes, statuses and the REST envelope.

Tests:
    - Each concrete error declares its code, category and http_status
    - to_response() always carries "error" and "message"
    - BookNotFoundError message names the isbn
    - DatabaseError keeps the failure detail out of the response body
"""

from bookstore.core.errors import (
    BookstoreError, BookNotFoundError, BookValidationError,
    DatabaseError, ResourceNotFoundError,
    ErrorCategory, ErrorSeverity,
)


def test_book_not_found_is_resource_not_found():
    err = BookNotFoundError("123")
    assert isinstance(err, ResourceNotFoundError)
    assert isinstance(err, BookstoreError)
    assert err.http_status == 404
    assert err.code == "BOOK_NOT_FOUND"
    assert err.category == ErrorCategory.RESOURCE_NOT_FOUND
    assert str(err) == "There is no book with an isbn '123'"


def test_not_found_response_envelope():
    body = BookNotFoundError("123").to_response()
    assert body["message"] == "There is no book with an isbn '123'"
    assert body["error"]["code"] == "BOOK_NOT_FOUND"
    assert body["error"]["status"] == 404
    assert body["error"]["isbn"] == "123"
    assert "timestamp" in body["error"]


def test_validation_error_carries_details():
    details = [{"field": "body.isbn", "message": "Field required", "type": "missing"}]
    err = BookValidationError(details)
    assert err.http_status == 400
    assert err.category == ErrorCategory.VALIDATION
    body = err.to_response()
    assert body["message"] == "Invalid request data"
    assert body["error"]["details"] == details


def test_database_error_is_critical_500():
    err = DatabaseError("Connection or operational error", "select")
    assert err.http_status == 500
    assert err.severity == ErrorSeverity.CRITICAL
    assert err.operation == "select"
    assert err.detail == "Database select failed: Connection or operational error"


def test_database_error_message_is_generic():
    body = DatabaseError("isbn '1' already exists", "insert").to_response()
    assert body["message"] == "Internal Server Error"
    assert body["error"]["message"] == "Internal Server Error"
    assert body["error"]["code"] == "DATABASE_ERROR"
    assert "already exists" not in str(body)


def test_envelope_omits_absent_context():
    body = DatabaseError("x", "query").to_response()
    assert "isbn" not in body["error"]
    assert "details" not in body["error"]


def test_severity_serializes_as_plain_string():
    assert BookNotFoundError("1").to_response()["error"]["severity"] == "warning"
