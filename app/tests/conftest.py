"""Shared fixtures for the whole test suite.

Process-scoped caches (settings, installed locale catalog, locale
selection) are reset around every test so tests never observe each
other's host queries or configuration.
"""

import pytest

from infrastructure.locales import get_locale_selection, reset_installed_locales
from infrastructure.services.providers import get_settings


@pytest.fixture(autouse=True)
def reset_process_caches():
    """Clear process-scoped caches before and after each test."""
    get_settings.cache_clear()
    get_locale_selection.cache_clear()
    reset_installed_locales()
    yield
    get_settings.cache_clear()
    get_locale_selection.cache_clear()
    reset_installed_locales()


@pytest.fixture
def clean_locale_env(monkeypatch):
    """Remove locale, sterility and rc-hook variables from os.environ."""
    for name in (
        "LANG",
        "LANGUAGE",
        "LC_ALL",
        "LC_TIME",
        "LC_NUMERIC",
        "_STERILE",
        "BASH_ENV",
        "ENV",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
