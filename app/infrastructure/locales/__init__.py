"""Locale catalog resolver.

Discovers installed locales and picks deterministic locales for message
output and time formatting. Numeric formatting is always the C locale.

Main components:
- models: LocaleCandidates, InstalledLocaleSet, LocaleSelection
- catalog: detect_installed and the per-process cached catalog
- resolvers: resolve, resolve_selection and LocaleResolver
- loader: YAML candidate profiles
- factory: create_locale_resolver, create_locale_selection
"""

from infrastructure.locales.catalog import (
    LocaleCatalog,
    detect_installed,
    get_installed_locales,
    reset_installed_locales,
)
from infrastructure.locales.factory import (
    create_locale_resolver,
    create_locale_selection,
    get_locale_selection,
)
from infrastructure.locales.loader import (
    CandidateProfile,
    CandidateProfileLoader,
    YAMLCandidateProfileLoader,
)
from infrastructure.locales.models import (
    C_LOCALE,
    STERILE_MARKER,
    InstalledLocaleSet,
    LocaleCandidates,
    LocaleSelection,
    codeset_variants,
)
from infrastructure.locales.resolvers import (
    DEFAULT_MESSAGE_CANDIDATES,
    DEFAULT_TIME_CANDIDATES,
    LocaleResolver,
    resolve,
    resolve_selection,
    time_candidates_for,
)

__all__ = [
    "C_LOCALE",
    "STERILE_MARKER",
    "LocaleCandidates",
    "InstalledLocaleSet",
    "LocaleSelection",
    "codeset_variants",
    "LocaleCatalog",
    "detect_installed",
    "get_installed_locales",
    "reset_installed_locales",
    "resolve",
    "resolve_selection",
    "time_candidates_for",
    "LocaleResolver",
    "DEFAULT_MESSAGE_CANDIDATES",
    "DEFAULT_TIME_CANDIDATES",
    "CandidateProfile",
    "CandidateProfileLoader",
    "YAMLCandidateProfileLoader",
    "create_locale_resolver",
    "create_locale_selection",
    "get_locale_selection",
]
