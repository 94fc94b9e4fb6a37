"""Structured logging infrastructure.

This package provides centralized logging configuration and utilities
using structlog.

Public API:
    - configure_logging(): Initialize logging for the program
    - get_module_logger(): Get a logger for the calling module
    - bind_run_context(): Context manager for run-scoped logging

Formatters:
    - add_app_info(): Processor to add app name/version
    - truncate_large_values(): Processor to limit string lengths
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)

from infrastructure.logging.context import bind_run_context

from infrastructure.logging.formatters import (
    add_app_info,
    truncate_large_values,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_run_context",
    "add_app_info",
    "truncate_large_values",
]
