"""Audit locale configuration settings - main aggregator."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.infrastructure import (
    LocaleSettings,
    SterileSettings,
)


class Settings(BaseSettings):
    """Configuration settings - main aggregator.

    Aggregates the domain-specific settings into a single configuration
    object:

    - **locales**: Locale catalog query and candidate chains
    - **sterile**: Fixed values of the sterile process environment

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        LOG_FORMAT: Log renderer, 'console' or 'json'

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if settings.json_logs:
            ...
        regional = settings.locales.time_regional_locale
        ```
    """

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = Field(default="console")

    locales: LocaleSettings
    sterile: SterileSettings

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        normalized = v.strip().lower()
        if normalized not in ("console", "json"):
            raise ValueError(f"Unsupported LOG_FORMAT: {v}")
        return normalized

    @property
    def json_logs(self) -> bool:
        """Check if logs should be rendered as JSON.

        Returns:
            True if LOG_FORMAT is 'json', False otherwise.
        """
        return self.LOG_FORMAT == "json"

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "locales": LocaleSettings,
            "sterile": SterileSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
