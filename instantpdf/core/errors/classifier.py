"""
Error classifier for rejected remote operations.

Turns the JSON body of a failed PDF-service response into one user-facing
message. This is the only place backend error codes become user language:
a new backend reason needs exactly one branch in classify_error().
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any

from instantpdf.config.ledger_limits import DEFAULT_ANONYMOUS_DAILY_LIMIT

GENERIC_FAILURE_MESSAGE = "Processing failed. Please try again."


class ErrorCategory(Enum):
    """User-facing error categories."""
    DAILY_LIMIT = "daily_limit"
    FILE_SIZE_LIMIT = "file_size_limit"
    PAGE_LIMIT = "page_limit"
    ACCOUNT_DISABLED = "account_disabled"
    GENERIC = "generic"


@dataclass(frozen=True)
class ClassifiedError:
    """Category plus the message to show the user."""
    category: ErrorCategory
    message: str


def _format_limit(limit: Any) -> str:
    """Render a limit value for interpolation, or "" if there is none."""
    if limit is None or isinstance(limit, bool):
        return ""
    if isinstance(limit, float) and limit.is_integer():
        limit = int(limit)
    if isinstance(limit, (int, float)):
        return str(limit)
    if isinstance(limit, str):
        return limit.strip()
    return ""


def classify_error(response_body: Any, has_auth_token: bool) -> ClassifiedError:
    """Classify a failed response body.

    Args:
        response_body: Decoded JSON body shaped {error?, reason?, limit?}.
            Anything else is treated as an empty body.
        has_auth_token: Whether the request was made by a signed-in user

    Returns:
        ClassifiedError; never raises
    """
    body = response_body if isinstance(response_body, dict) else {}
    reason = body.get("reason")
    limit = _format_limit(body.get("limit"))

    if reason == "daily_limit_exceeded":
        if not has_auth_token:
            cap = limit or str(DEFAULT_ANONYMOUS_DAILY_LIMIT)
            return ClassifiedError(
                ErrorCategory.DAILY_LIMIT,
                f"You've reached the daily limit of {cap} free operations. "
                "Sign up for a free account to get more, or upgrade to Pro for unlimited access.",
            )
        cap = f"daily limit of {limit} operations" if limit else "daily operation limit"
        return ClassifiedError(
            ErrorCategory.DAILY_LIMIT,
            f"You've reached your {cap}. Upgrade to Pro for unlimited access.",
        )

    if reason == "file_size_exceeded":
        size = f"the {limit} limit" if limit else "your plan's limit"
        return ClassifiedError(
            ErrorCategory.FILE_SIZE_LIMIT,
            f"File size exceeds {size}. Upgrade your plan for larger files.",
        )

    if reason == "page_limit_exceeded":
        pages = f"the {limit} page limit" if limit else "your plan's page limit"
        return ClassifiedError(
            ErrorCategory.PAGE_LIMIT,
            f"PDF exceeds {pages}. Upgrade your plan for more pages.",
        )

    if reason == "account_disabled":
        return ClassifiedError(
            ErrorCategory.ACCOUNT_DISABLED,
            "Your account has been disabled. Please contact support.",
        )

    error = body.get("error")
    if isinstance(error, str) and error:
        return ClassifiedError(ErrorCategory.GENERIC, error)
    return ClassifiedError(ErrorCategory.GENERIC, GENERIC_FAILURE_MESSAGE)


def classify(response_body: Any, has_auth_token: bool) -> str:
    """Return the user-facing message for a failed response body."""
    return classify_error(response_body, has_auth_token).message
