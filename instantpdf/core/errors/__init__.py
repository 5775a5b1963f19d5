"""Backend error classification."""
from instantpdf.core.errors.classifier import (
    GENERIC_FAILURE_MESSAGE,
    ClassifiedError,
    ErrorCategory,
    classify,
    classify_error,
)

__all__ = [
    "GENERIC_FAILURE_MESSAGE",
    "ClassifiedError",
    "ErrorCategory",
    "classify",
    "classify_error",
]
