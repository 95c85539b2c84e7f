"""Logging configuration using Pydantic settings."""

from enum import StrEnum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(StrEnum):
    """Valid log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(StrEnum):
    """Valid log formats."""

    JSON = "json"
    HUMAN = "human"


class LoggingConfig(BaseSettings):
    """Logging configuration loaded from environment variables.

    Attributes:
        log_level: Minimum log level to output.
        log_format: Output format - json for aggregation, human for terminals.
        service_name: Service identifier added to every JSON record.
        include_timestamp: Whether to include timestamp.
        include_location: Whether to include file/function/line info.
        include_mdc: Whether MDC entries are rendered into records.
        mdc_key_prefix: Prefix prepended to MDC keys in JSON output.
        use_colors: Whether the human format uses ANSI colors.
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_format: LogFormat = Field(default=LogFormat.JSON)
    service_name: str = Field(default="mdcext", min_length=1)
    include_timestamp: bool = Field(default=True)
    include_location: bool = Field(default=True)
    include_mdc: bool = Field(default=True)
    mdc_key_prefix: str = Field(default="")
    use_colors: bool = Field(default=True)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        """Accept log levels in any case."""
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, value: object) -> object:
        """Accept log formats in any case."""
        if isinstance(value, str):
            return value.strip().lower()
        return value


@lru_cache
def get_logging_config() -> LoggingConfig:
    """Get cached logging configuration instance."""
    return LoggingConfig()
