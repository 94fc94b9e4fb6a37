"""Infrastructure configuration module - public API.

This module provides centralized configuration management using Pydantic
BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    LocaleSettings: Locale detection settings class
    SterileSettings: Sterile environment settings class

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    regional = settings.locales.time_regional_locale
    sterile_path = settings.sterile.path
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.infrastructure import (
    LocaleSettings,
    SterileSettings,
)

__all__ = ["Settings", "LocaleSettings", "SterileSettings"]
