"""Tests for the backend error classifier."""
import pytest

from instantpdf.core.errors.classifier import (
    GENERIC_FAILURE_MESSAGE,
    ErrorCategory,
    classify,
    classify_error,
)


class TestDailyLimit:
    """Anonymous and signed-in daily limits render distinct copy"""

    def test_anonymous_mentions_limit_and_signup(self):
        message = classify({"reason": "daily_limit_exceeded", "limit": 8}, has_auth_token=False)
        assert "8" in message
        assert "Sign up" in message

    def test_anonymous_defaults_to_eight(self):
        message = classify({"reason": "daily_limit_exceeded"}, has_auth_token=False)
        assert "daily limit of 8 free operations" in message

    def test_authenticated_invites_upgrade_not_signup(self):
        anonymous = classify({"reason": "daily_limit_exceeded", "limit": 8}, has_auth_token=False)
        message = classify({"reason": "daily_limit_exceeded", "limit": 8}, has_auth_token=True)
        assert message != anonymous
        assert "Upgrade to Pro" in message
        assert "Sign up" not in message
        assert "8" in message

    def test_authenticated_without_limit_has_no_placeholder(self):
        message = classify({"reason": "daily_limit_exceeded"}, has_auth_token=True)
        assert "None" not in message
        assert "daily operation limit" in message

    def test_category(self):
        result = classify_error({"reason": "daily_limit_exceeded"}, has_auth_token=True)
        assert result.category is ErrorCategory.DAILY_LIMIT


class TestPlanLimits:
    def test_file_size_cites_limit(self):
        result = classify_error({"reason": "file_size_exceeded", "limit": "25MB"}, False)
        assert result.category is ErrorCategory.FILE_SIZE_LIMIT
        assert "25MB" in result.message
        assert "Upgrade your plan" in result.message

    def test_page_limit_cites_limit(self):
        result = classify_error({"reason": "page_limit_exceeded", "limit": 100}, True)
        assert result.category is ErrorCategory.PAGE_LIMIT
        assert "100 page limit" in result.message

    def test_float_limit_rendered_as_integer(self):
        message = classify({"reason": "page_limit_exceeded", "limit": 50.0}, False)
        assert "50 page limit" in message

    def test_account_disabled_is_fixed(self):
        with_limit = classify({"reason": "account_disabled", "limit": 3}, False)
        without = classify({"reason": "account_disabled"}, True)
        assert with_limit == without == "Your account has been disabled. Please contact support."


class TestFallback:
    def test_unknown_reason_uses_error_verbatim(self):
        result = classify_error({"reason": "teapot", "error": "Encrypted PDF"}, False)
        assert result.category is ErrorCategory.GENERIC
        assert result.message == "Encrypted PDF"

    @pytest.mark.parametrize("body", [{}, None, [], "oops", 42, {"error": ""}, {"error": 5}])
    def test_generic_message_never_raises(self, body):
        for has_token in (True, False):
            assert classify(body, has_token) == GENERIC_FAILURE_MESSAGE
