"""Factory functions for creating locale components.

Provides convenience functions for building a LocaleResolver from settings
and for obtaining the process's LocaleSelection.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Mapping, Optional

import structlog
from infrastructure.configuration import Settings
from infrastructure.services.providers import get_settings
from infrastructure.locales.catalog import get_installed_locales
from infrastructure.locales.loader import YAMLCandidateProfileLoader
from infrastructure.locales.models import LocaleSelection
from infrastructure.locales.resolvers import (
    DEFAULT_MESSAGE_CANDIDATES,
    LocaleResolver,
    time_candidates_for,
)

logger = structlog.get_logger()


def create_locale_resolver(settings: Optional[Settings] = None) -> LocaleResolver:
    """Create a LocaleResolver from configuration.

    A configured YAML profile replaces the built-in chains; a profile that
    names only a message chain gets a time chain derived from it.

    Args:
        settings: Settings instance (default: loaded from the environment)

    Returns:
        LocaleResolver: Configured resolver

    Raises:
        FileNotFoundError: If the configured profile does not exist
        ValueError: If the configured profile is malformed
    """
    if settings is None:
        settings = get_settings()

    regional = settings.locales.time_regional_locale or None
    message_candidates = DEFAULT_MESSAGE_CANDIDATES
    time_candidates = None

    if settings.locales.profile_path:
        profile = YAMLCandidateProfileLoader(
            Path(settings.locales.profile_path)
        ).load()
        if profile.message is not None:
            message_candidates = profile.message
        time_candidates = profile.time

    if time_candidates is None:
        time_candidates = time_candidates_for(regional, message_candidates)

    return LocaleResolver(
        message_candidates=message_candidates,
        time_candidates=time_candidates,
        regional_time_locale=regional,
    )


def create_locale_selection(
    settings: Optional[Settings] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> LocaleSelection:
    """Return the LocaleSelection for this process.

    A process started by the sterile wrapper inherits its parent's choice
    through its environment and does not re-derive it. Otherwise the host
    catalog is queried (once per process) and resolved.

    Args:
        settings: Settings instance (default: loaded from the environment)
        environ: Process environment (default: os.environ)

    Returns:
        LocaleSelection: Selection consumed by every command launch

    Usage:
        selection = create_locale_selection()
        outcome = with_locale(selection, ProcessSpec.command("date"))
    """
    if environ is None:
        environ = os.environ

    inherited = LocaleSelection.from_environment(environ)
    if inherited is not None:
        logger.info(
            "locale_selection_inherited",
            message_locale=inherited.message_locale,
            time_locale=inherited.time_locale,
        )
        return inherited

    if settings is None:
        settings = get_settings()

    resolver = create_locale_resolver(settings)
    installed = get_installed_locales(
        settings.locales.query_command,
        settings.locales.query_timeout_seconds,
    )
    return resolver.resolve(installed, inherited=environ)


@lru_cache
def get_locale_selection() -> LocaleSelection:
    """Get the process-scoped LocaleSelection.

    Resolved once per process from the cached settings and the host
    catalog, then shared read-only by every launch.
    """
    return create_locale_selection(get_settings())
