"""Custom exceptions for the word-list synchronization engine"""

from typing import Any


class WordSyncError(Exception):
    """Base exception class for all application errors"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class AuthenticationError(WordSyncError):
    """Raised when no usable auth token is available for a remote call"""

    def __init__(self, endpoint: str):
        super().__init__(
            f"No auth token available for '{endpoint}'. Please sign in again.",
            {"endpoint": endpoint},
        )
        self.endpoint = endpoint


class RemoteError(WordSyncError):
    """Raised when the word-list service fails or answers with a non-2xx status"""

    def __init__(
        self,
        method: str,
        endpoint: str,
        error_message: str,
        status_code: int | None = None,
        original_error: Exception | None = None,
    ):
        super().__init__(
            error_message,
            {
                "method": method,
                "endpoint": endpoint,
                "status_code": status_code,
                "original_error": str(original_error) if original_error else None,
            },
        )
        self.method = method
        self.endpoint = endpoint
        self.error_message = error_message
        self.status_code = status_code
        self.original_error = original_error


class MalformedResponseError(WordSyncError):
    """Raised when a response body cannot be parsed or has the wrong shape"""

    def __init__(self, endpoint: str, content: str, reason: str):
        super().__init__(
            f"Malformed response from '{endpoint}': {reason}",
            {
                "endpoint": endpoint,
                "content": content[:100] + "..." if len(content) > 100 else content,
                "reason": reason,
            },
        )
        self.endpoint = endpoint
        self.content = content
        self.reason = reason


class ConfigurationError(WordSyncError):
    """Raised when configuration is invalid or missing"""

    def __init__(self, setting: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for '{setting}': {reason}",
            {"setting": setting, "value": value, "reason": reason},
        )
        self.setting = setting
        self.value = value
        self.reason = reason
