"""Core domain exceptions.

All exceptions raised by core logic inherit from CoreError.
Adapters catch backend-specific errors and re-raise as these.
Transport failures (requests.RequestException) are never wrapped.
"""
from typing import Optional


class CoreError(Exception):
    """Base for all core domain errors."""
    pass


class StorageError(CoreError):
    """Storage read or write failed."""
    pass


class RejectedOperationError(CoreError):
    """Remote service answered with a well-formed error response.

    The message is already user-facing text produced by the classifier.
    """

    def __init__(
        self,
        message: str,
        category=None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.category = category
        self.status_code = status_code
