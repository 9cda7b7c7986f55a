"""Configuration module for the word-list sync engine"""

from .settings import (
    AppSettings,
    AuthSettings,
    LoggingSettings,
    ServiceSettings,
    settings,
)

__all__ = [
    "AppSettings",
    "AuthSettings",
    "LoggingSettings",
    "ServiceSettings",
    "settings",
]
