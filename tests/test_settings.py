"""Tests for environment-driven settings"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from wordlist_sync.config.settings import (
    AppSettings,
    AuthSettings,
    LoggingSettings,
    ServiceSettings,
)

ENV_VARS = [
    "WORDSYNC_BASE_URL",
    "WORDSYNC_REQUEST_TIMEOUT",
    "WORDSYNC_MAX_RETRIES",
    "WORDSYNC_BACKOFF_FACTOR",
    "WORDSYNC_TOKEN",
    "LOG_LEVEL",
    "LOG_FILE",
    "DEBUG",
    "VERBOSE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate from the developer's environment and any local .env file"""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class TestServiceSettings:
    """Remote service configuration"""

    def test_defaults(self):
        service = ServiceSettings()

        assert service.base_url == "http://localhost:54321/functions/v1/server"
        assert service.request_timeout == 10.0
        assert service.max_retries == 3
        assert service.backoff_factor == 0.2

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("WORDSYNC_BASE_URL", "https://words.example.com/api/")
        monkeypatch.setenv("WORDSYNC_REQUEST_TIMEOUT", "2.5")
        monkeypatch.setenv("WORDSYNC_MAX_RETRIES", "0")

        service = ServiceSettings()

        assert service.base_url == "https://words.example.com/api"
        assert service.request_timeout == 2.5
        assert service.max_retries == 0

    @pytest.mark.parametrize(
        "name, value",
        [
            ("WORDSYNC_BASE_URL", "words.example.com"),
            ("WORDSYNC_REQUEST_TIMEOUT", "0"),
            ("WORDSYNC_MAX_RETRIES", "-1"),
            ("WORDSYNC_BACKOFF_FACTOR", "-0.5"),
        ],
    )
    def test_invalid_values_are_rejected(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)

        with pytest.raises(ValidationError):
            ServiceSettings()


class TestAuthSettings:
    """Static token"""

    def test_token_is_stripped(self, monkeypatch):
        monkeypatch.setenv("WORDSYNC_TOKEN", "  abc  ")

        assert AuthSettings().token == "abc"

    def test_blank_token_is_none(self, monkeypatch):
        monkeypatch.setenv("WORDSYNC_TOKEN", "   ")

        assert AuthSettings().token is None

    def test_missing_token_is_none(self):
        assert AuthSettings().token is None


class TestLoggingSettings:
    """Log level and destination"""

    def test_level_is_normalized(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FILE", "sync.log")

        logging_settings = LoggingSettings()

        assert logging_settings.level == "DEBUG"
        assert logging_settings.file == Path("sync.log")

    def test_invalid_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")

        with pytest.raises(ValidationError):
            LoggingSettings()


class TestAppSettings:
    """Aggregated settings"""

    def test_nested_sections_read_environment(self, monkeypatch):
        monkeypatch.setenv("WORDSYNC_TOKEN", "tok")
        monkeypatch.setenv("DEBUG", "true")

        app = AppSettings()

        assert app.auth.token == "tok"
        assert app.debug is True
        assert app.verbose is False
        assert app.logging.level == "INFO"
