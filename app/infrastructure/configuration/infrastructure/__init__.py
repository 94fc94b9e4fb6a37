"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.locales import LocaleSettings
from infrastructure.configuration.infrastructure.sterile import SterileSettings

__all__ = [
    "LocaleSettings",
    "SterileSettings",
]
