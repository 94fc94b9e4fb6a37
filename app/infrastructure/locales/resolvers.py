"""Locale resolution logic for choosing message and time locales.

Walks ordered candidate lists against the host's installed locales. Every
list ends in the C locale, so resolution always produces an answer.
"""

from typing import Mapping, Optional

import structlog
from infrastructure.locales.models import (
    C_LOCALE,
    InstalledLocaleSet,
    LocaleCandidates,
    LocaleSelection,
    codeset_variants,
)

logger = structlog.get_logger().bind(component="locales.resolver")

DEFAULT_REGIONAL_TIME_LOCALE = "ru_RU.UTF-8"

DEFAULT_MESSAGE_CANDIDATES = LocaleCandidates(
    purpose="message",
    identifiers=(
        "en_US.UTF-8",
        "en_US.utf8",
        "C.UTF-8",
        "C.utf8",
        "POSIX",
        C_LOCALE,
    ),
)


def time_candidates_for(
    regional_locale: Optional[str] = DEFAULT_REGIONAL_TIME_LOCALE,
    message_candidates: LocaleCandidates = DEFAULT_MESSAGE_CANDIDATES,
) -> LocaleCandidates:
    """Build the time chain: the regional locale, then the message chain.

    Args:
        regional_locale: Designated regional locale, or None for none.
        message_candidates: Chain used when the regional locale is missing.

    Returns:
        LocaleCandidates for the time purpose.
    """
    regional = codeset_variants(regional_locale) if regional_locale else ()
    return LocaleCandidates(
        purpose="time",
        identifiers=tuple(regional) + message_candidates.identifiers,
    )


DEFAULT_TIME_CANDIDATES = time_candidates_for()


def resolve(candidates: LocaleCandidates, installed: InstalledLocaleSet) -> str:
    """Pick the first installed candidate.

    Matching is case-insensitive and exact; the candidate's own spelling is
    returned, not the host's. When nothing matches, the last candidate
    (always C) is returned.

    Args:
        candidates: Preference-ordered locale identifiers.
        installed: Locales present on the host.

    Returns:
        Chosen locale identifier; always a member of ``candidates``.
    """
    for identifier in candidates:
        if identifier in installed:
            return identifier
    return candidates.fallback


def resolve_selection(
    installed: InstalledLocaleSet,
    message_candidates: Optional[LocaleCandidates] = None,
    time_candidates: Optional[LocaleCandidates] = None,
) -> LocaleSelection:
    """Resolve the message and time locales independently.

    The numeric locale is never resolved; LocaleSelection pins it to C.

    Args:
        installed: Locales present on the host.
        message_candidates: Chain for LANG/LANGUAGE (default: English UTF-8
            variants, minimal UTF-8, POSIX, C).
        time_candidates: Chain for LC_TIME (default: regional locale, then
            the default message chain).

    Returns:
        LocaleSelection for every downstream command.
    """
    message_candidates = message_candidates or DEFAULT_MESSAGE_CANDIDATES
    time_candidates = time_candidates or DEFAULT_TIME_CANDIDATES
    return LocaleSelection(
        message_locale=resolve(message_candidates, installed),
        time_locale=resolve(time_candidates, installed),
    )


class LocaleResolver:
    """Resolves the locale selection for a process.

    Holds the configured candidate chains and reports how the choice was
    made:
    1. First installed message candidate
    2. First installed time candidate (regional locale preferred)
    3. Universal fallback when the host confirms nothing
    """

    def __init__(
        self,
        message_candidates: LocaleCandidates = DEFAULT_MESSAGE_CANDIDATES,
        time_candidates: LocaleCandidates = DEFAULT_TIME_CANDIDATES,
        regional_time_locale: Optional[str] = DEFAULT_REGIONAL_TIME_LOCALE,
    ):
        """Initialize locale resolver.

        Args:
            message_candidates: Chain for the message locale.
            time_candidates: Chain for the time locale.
            regional_time_locale: Regional locale the time chain leads with,
                used only to report when it is unavailable.
        """
        self.message_candidates = message_candidates
        self.time_candidates = time_candidates
        self.regional_time_locale = regional_time_locale
        self.log = logger.bind(
            message_candidates=list(message_candidates.identifiers),
            time_candidates=list(time_candidates.identifiers),
        )

    def resolve(
        self,
        installed: InstalledLocaleSet,
        inherited: Optional[Mapping[str, str]] = None,
    ) -> LocaleSelection:
        """Resolve a selection and log notices about it.

        Args:
            installed: Locales present on the host.
            inherited: Environment the process started with; used only to
                report locale variables that the selection overrides.

        Returns:
            Resolved LocaleSelection.
        """
        selection = resolve_selection(
            installed,
            message_candidates=self.message_candidates,
            time_candidates=self.time_candidates,
        )

        log = self.log.bind(
            message_locale=selection.message_locale,
            time_locale=selection.time_locale,
            numeric_locale=selection.numeric_locale,
            installed_count=len(installed),
        )
        if installed.is_empty:
            log.warning("locale_catalog_empty_using_fallback")

        if self.regional_time_locale and not any(
            variant in installed
            for variant in codeset_variants(self.regional_time_locale)
        ):
            log.info(
                "regional_time_locale_unavailable",
                regional_time_locale=self.regional_time_locale,
            )

        if inherited is not None:
            self._report_overrides(selection, inherited)

        log.info("locale_selection_resolved")
        return selection

    def _report_overrides(
        self, selection: LocaleSelection, inherited: Mapping[str, str]
    ) -> None:
        for name, chosen in selection.as_environment().items():
            current = inherited.get(name)
            if current != chosen:
                self.log.info(
                    "locale_override",
                    variable=name,
                    inherited=current if current is not None else "unset",
                    chosen=chosen,
                )
