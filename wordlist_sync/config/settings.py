"""Configuration management with Pydantic v2 settings style"""

from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServiceSettings(BaseSettings):
    """Remote word-list service settings"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    base_url: str = Field(
        default="http://localhost:54321/functions/v1/server",
        validation_alias=AliasChoices("WORDSYNC_BASE_URL"),
    )
    request_timeout: float = Field(
        default=10.0, validation_alias=AliasChoices("WORDSYNC_REQUEST_TIMEOUT")
    )
    max_retries: int = Field(
        default=3, validation_alias=AliasChoices("WORDSYNC_MAX_RETRIES")
    )
    backoff_factor: float = Field(
        default=0.2, validation_alias=AliasChoices("WORDSYNC_BACKOFF_FACTOR")
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL format"""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Base URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("request_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate request timeout"""
        if v <= 0:
            raise ValueError("Request timeout must be positive")
        return v

    @field_validator("max_retries", "backoff_factor")
    @classmethod
    def validate_non_negative(cls, v: float) -> float:
        """Validate retry tuning values"""
        if v < 0:
            raise ValueError("Value cannot be negative")
        return v


class AuthSettings(BaseSettings):
    """Static credentials for non-interactive consumers such as the CLI"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    token: str | None = Field(
        default=None, validation_alias=AliasChoices("WORDSYNC_TOKEN")
    )

    @field_validator("token")
    @classmethod
    def strip_token(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None


class LoggingSettings(BaseSettings):
    """Logging configuration"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    level: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL"))
    file: Path | None = Field(default=None, validation_alias=AliasChoices("LOG_FILE"))

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()


class AppSettings(BaseSettings):
    """Main application settings"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    service: ServiceSettings = Field(default_factory=ServiceSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    debug: bool = Field(default=False, validation_alias=AliasChoices("DEBUG"))
    verbose: bool = Field(default=False, validation_alias=AliasChoices("VERBOSE"))


# Global settings instance
settings = AppSettings()
