"""Infrastructure modules for the audit locale toolkit.

Centralized infrastructure components:
- configuration: Settings management (Settings, LocaleSettings, SterileSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- locales: Locale catalog detection and resolution (LocaleSelection, resolve)
- execution: Sterile command execution (run_sterile, with_locale, ensure_sterile)
- services: Process-scoped singletons (get_settings)
"""

# Configuration
from infrastructure.configuration import Settings

# Observability
from infrastructure.logging import get_module_logger

# Services
from infrastructure.services import get_settings

__all__ = [
    "Settings",
    "get_module_logger",
    "get_settings",
]
