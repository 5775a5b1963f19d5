"""Tests for core exceptions."""
from instantpdf.core.errors.classifier import ErrorCategory
from instantpdf.core.exceptions import CoreError, RejectedOperationError, StorageError


class TestExceptionHierarchy:
    def test_storage_error_is_core_error(self):
        assert isinstance(StorageError("test"), CoreError)

    def test_rejected_operation_is_core_error(self):
        assert isinstance(RejectedOperationError("test"), CoreError)

    def test_rejected_operation_carries_details(self):
        error = RejectedOperationError(
            "limit reached", category=ErrorCategory.DAILY_LIMIT, status_code=429
        )
        assert str(error) == "limit reached"
        assert error.category is ErrorCategory.DAILY_LIMIT
        assert error.status_code == 429
