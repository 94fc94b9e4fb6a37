"""Locale detection and resolution settings."""

from typing import List, Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


class LocaleSettings(InfrastructureSettings):
    """Locale catalog query and candidate configuration.

    Environment Variables:
        LOCALE_TIME_REGIONAL: Preferred regional locale for time formatting
            (default: ru_RU.UTF-8)
        LOCALE_PROFILE_PATH: Optional YAML file with message/time candidate lists
        LOCALE_QUERY_COMMAND: JSON list, command listing installed locales
            (default: ["locale", "-a"])
        LOCALE_QUERY_TIMEOUT_SECONDS: Seconds before a hung query is abandoned
            (default: 5)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        regional = settings.locales.time_regional_locale
        ```
    """

    time_regional_locale: str = Field(
        default="ru_RU.UTF-8",
        alias="LOCALE_TIME_REGIONAL",
        description="Regional locale preferred for LC_TIME when installed",
    )
    profile_path: Optional[str] = Field(
        default=None,
        alias="LOCALE_PROFILE_PATH",
        description="YAML candidate profile overriding the built-in chains",
    )
    query_command: List[str] = Field(
        default_factory=lambda: ["locale", "-a"],
        alias="LOCALE_QUERY_COMMAND",
        description="Command printing one installed locale per line",
    )
    query_timeout_seconds: float = Field(
        default=5.0,
        alias="LOCALE_QUERY_TIMEOUT_SECONDS",
        description="Timeout for the locale catalog query (seconds)",
    )

    @field_validator("query_command")
    @classmethod
    def validate_query_command(cls, v: List[str]) -> List[str]:
        """Reject an empty query command."""
        if not v:
            raise ValueError("LOCALE_QUERY_COMMAND must name a program")
        return v

    @field_validator("query_timeout_seconds")
    @classmethod
    def validate_query_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("LOCALE_QUERY_TIMEOUT_SECONDS must be positive")
        return v
