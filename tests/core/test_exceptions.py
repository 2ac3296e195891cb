"""Unit tests for domain exceptions."""

import pytest

from invoicekit.core.exceptions import (
    InvoiceKitError,
    InvoiceNotFoundError,
    LocalStoreFailure,
    RemoteUnavailable,
    StorageError,
    TemplateLoadError,
    ValidationError,
)


class TestInvoiceKitError:
    """Tests for the base exception."""

    def test_code_defaults_to_class_name(self):
        error = InvoiceKitError("boom")

        assert error.code == "InvoiceKitError"
        assert error.details == {}
        assert str(error) == "boom"

    def test_to_dict(self):
        error = InvoiceNotFoundError("A1")

        assert error.to_dict() == {
            "error": "INVOICE_NOT_FOUND",
            "message": "Invoice not found: A1",
            "details": {"invoice_id": "A1"},
        }


class TestStorageErrors:
    """Tests for store failures."""

    def test_remote_unavailable(self):
        error = RemoteUnavailable("fetch_all", "HTTP 502", status_code=502)

        assert isinstance(error, StorageError)
        assert error.status_code == 502
        assert error.to_dict()["details"] == {
            "operation": "fetch_all",
            "reason": "HTTP 502",
            "status_code": 502,
        }

    def test_local_store_failure(self):
        error = LocalStoreFailure("put", "disk I/O error")

        assert error.code == "LOCAL_STORE_FAILURE"
        assert error.operation == "put"
        assert "disk I/O error" in error.message


class TestRenderErrors:
    """Tests for rendering and validation errors."""

    def test_template_load_error_keeps_path(self):
        error = TemplateLoadError("template is empty", path="/tmp/t.pdf")
        assert error.to_dict()["details"] == {"reason": "template is empty", "path": "/tmp/t.pdf"}

    def test_validation_error_lists_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            raise ValidationError(["invoiceNumber", "client.name"])

        assert exc_info.value.fields == ["invoiceNumber", "client.name"]
        assert exc_info.value.message == "Missing required fields: invoiceNumber, client.name"
