"""Tests for error handling utilities"""

import logging

import pytest

from wordlist_sync.exceptions import (
    AuthenticationError,
    ConfigurationError,
    RemoteError,
    WordSyncError,
)
from wordlist_sync.utils.error_handler import (
    ErrorCollector,
    handle_errors_async,
    safe_execute,
)


class TestExceptions:
    """Exception messages and details"""

    def test_str_includes_details(self):
        error = WordSyncError("Something broke", {"key": "value"})

        assert error.message == "Something broke"
        assert str(error) == "Something broke (Details: {'key': 'value'})"

    def test_str_without_details(self):
        assert str(WordSyncError("plain")) == "plain"

    def test_remote_error_message_is_service_message(self):
        error = RemoteError("DELETE", "/graveyard/w1", "Word not found", 404)

        assert error.message == "Word not found"
        assert error.details["status_code"] == 404
        assert error.details["original_error"] is None

    def test_authentication_error_names_endpoint(self):
        error = AuthenticationError("/starred")

        assert "/starred" in error.message
        assert isinstance(error, WordSyncError)

    def test_configuration_error(self):
        error = ConfigurationError("base_url", "ftp://x", "bad scheme")

        assert error.setting == "base_url"
        assert "bad scheme" in error.message


class TestHandleErrorsAsync:
    """Async error boundary decorator"""

    @pytest.mark.asyncio
    async def test_returns_result_on_success(self):
        @handle_errors_async(default_return=False)
        async def operation():
            return True

        assert await operation() is True

    @pytest.mark.asyncio
    async def test_application_error_returns_default(self, caplog):
        """Test application errors are logged by message"""

        @handle_errors_async(default_return=False, operation_name="star word")
        async def operation():
            raise RemoteError("POST", "/starred/w1", "Internal error", 500)

        with caplog.at_level(logging.ERROR):
            assert await operation() is False

        assert "Error in star word: Internal error" in caplog.text

    @pytest.mark.asyncio
    async def test_unexpected_error_returns_default(self, caplog):
        @handle_errors_async(default_return="fallback")
        async def operation():
            raise ValueError("unexpected")

        with caplog.at_level(logging.ERROR):
            assert await operation() == "fallback"

        assert "Unexpected error in operation: unexpected" in caplog.text


class TestErrorCollector:
    """Collecting errors from concurrent requests"""

    def test_empty(self):
        collector = ErrorCollector()

        assert not collector.has_errors()
        assert collector.get_summary() == "No errors"

    def test_summary_lists_messages(self):
        collector = ErrorCollector()
        collector.add_error(RemoteError("GET", "/starred", "Internal error", 500))
        collector.add_error(ValueError("bad value"))

        assert collector.has_errors()
        assert collector.get_summary() == (
            "2 errors:\n  1. Internal error\n  2. bad value"
        )


class TestSafeExecute:
    """Guarded callbacks"""

    def test_returns_result(self):
        assert safe_execute(lambda x: x * 2, None, 4) == 8

    def test_failure_returns_default(self, caplog):
        def broken():
            raise RuntimeError("listener failed")

        with caplog.at_level(logging.WARNING):
            assert safe_execute(broken, "default") == "default"

        assert "Safe execution failed for broken" in caplog.text
