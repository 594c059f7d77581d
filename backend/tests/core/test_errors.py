"""Error Hierarchy — codes, statuses, subclassing, and REST envelope."""

from witquery.core.errors import (
    ConcurrencyError, DatabaseError, DocumentStoreError, ErrorCategory,
    ErrorContext, ExternalServiceError, FormServiceError, WitQueryError,
)


def test_external_errors_share_base():
    """Store and form errors are ExternalServiceErrors."""
    for error in (
        FormServiceError("HTTP 500", "get_id"),
        DocumentStoreError("down", "read_document"),
        DatabaseError("locked", "execute"),
    ):
        assert isinstance(error, ExternalServiceError)
        assert isinstance(error, WitQueryError)


def test_form_service_error_fields():
    """FormServiceError is a 502 prefixed with the failed operation."""
    error = FormServiceError("HTTP 500", "get_id")
    assert error.code == "FORM_SERVICE_ERROR"
    assert error.http_status == 502
    assert error.category is ErrorCategory.EXTERNAL_API
    assert "get_id failed: HTTP 500" in error.message


def test_database_error_is_document_store_error():
    """DatabaseError maps to 503 under the store base."""
    error = DatabaseError("locked", "commit")
    assert isinstance(error, DocumentStoreError)
    assert error.code == "DATABASE_ERROR"
    assert error.category is ErrorCategory.DATABASE
    assert error.http_status == 503


def test_to_response_envelope():
    """to_response wraps the error fields under "error"."""
    error = ConcurrencyError(
        "stale", ErrorContext(work_item_id=42, collection="CheckListItems"),
    )
    body = error.to_response()["error"]
    assert body["code"] == "CONCURRENCY_CONFLICT"
    assert body["category"] == "conflict"
    assert body["context"] == {"work_item_id": 42, "collection": "CheckListItems"}


def test_user_message_overrides_message():
    """user_message replaces the internal message in responses."""
    error = ConcurrencyError("etag 1 != 2", ErrorContext(user_message="Reload and retry"))
    assert error.to_response()["error"]["message"] == "Reload and retry"
