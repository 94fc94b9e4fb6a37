"""Test data factories for deterministic test data generation."""

from tests.factories.execution import (
    make_completed_process,
    make_settings,
)
from tests.factories.locales import (
    make_candidates,
    make_installed,
    make_selection,
)

__all__ = [
    "make_completed_process",
    "make_settings",
    "make_candidates",
    "make_installed",
    "make_selection",
]
