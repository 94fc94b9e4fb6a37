"""Locale models for the locale catalog resolver.

Defines the immutable values passed between locale detection, resolution
and process launching.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Iterator, Mapping, Optional, Tuple

# Locale every POSIX host provides; numeric formatting is pinned to it.
C_LOCALE = "C"

STERILE_MARKER = "_STERILE"

MESSAGE_VARIABLES: Tuple[str, ...] = ("LANG", "LANGUAGE")
TIME_VARIABLE = "LC_TIME"
NUMERIC_VARIABLE = "LC_NUMERIC"

_UTF8_CODESETS = ("utf-8", "utf8")


def codeset_variants(identifier: str) -> Tuple[str, ...]:
    """Expand a UTF-8 locale identifier to both common codeset spellings.

    glibc lists normalized codesets (``en_US.utf8``) in ``locale -a`` while
    configuration usually names ``en_US.UTF-8``. Case-insensitive matching
    cannot bridge the missing hyphen, so both spellings are candidates.

    Args:
        identifier: Locale identifier (e.g., "ru_RU.UTF-8").

    Returns:
        Tuple with the given spelling first, then its alternate spelling.
        Identifiers without a UTF-8 codeset are returned unchanged.
    """
    base, dot, codeset = identifier.partition(".")
    if not dot:
        return (identifier,)

    codeset_name, at, modifier = codeset.partition("@")
    if codeset_name.lower() not in _UTF8_CODESETS:
        return (identifier,)

    suffix = f"{at}{modifier}"
    alternate = "utf8" if codeset_name.lower() == "utf-8" else "UTF-8"
    return (identifier, f"{base}.{alternate}{suffix}")


@dataclass(frozen=True)
class LocaleCandidates:
    """Ordered preference list of locale identifiers for one purpose.

    Order encodes preference and the first installed entry wins. The list
    always ends in the C locale, which every POSIX host supports; that is
    what makes resolution total. POSIX may appear earlier in the list.

    Attributes:
        purpose: What the locale is for (e.g., "message", "time").
        identifiers: Locale identifiers in preference order.
    """

    purpose: str
    identifiers: Tuple[str, ...]

    def __post_init__(self):
        if not self.identifiers:
            raise ValueError(f"Locale candidates for {self.purpose} are empty")
        if self.identifiers[-1] != C_LOCALE:
            raise ValueError(
                f"Locale candidates for {self.purpose} must end in "
                f"{C_LOCALE!r}, got {self.identifiers[-1]!r}"
            )

    @classmethod
    def from_preferences(
        cls, purpose: str, identifiers: Iterable[str]
    ) -> "LocaleCandidates":
        """Build candidates from arbitrary preferences.

        Blank entries are dropped and the C locale is appended when the
        last preference is not C.

        Args:
            purpose: What the locale is for.
            identifiers: Preferred locale identifiers.

        Returns:
            LocaleCandidates guaranteed to end in the C locale.
        """
        cleaned = [str(item).strip() for item in identifiers if str(item).strip()]
        if not cleaned or cleaned[-1] != C_LOCALE:
            cleaned.append(C_LOCALE)
        return cls(purpose=purpose, identifiers=tuple(cleaned))

    @property
    def fallback(self) -> str:
        """The guaranteed-available tail of the list."""
        return self.identifiers[-1]

    def __iter__(self) -> Iterator[str]:
        return iter(self.identifiers)

    def __len__(self) -> int:
        return len(self.identifiers)


@dataclass(frozen=True)
class InstalledLocaleSet:
    """Locale identifiers present on the host.

    Membership checks ignore case, so an installed ``EN_US.UTF-8`` matches a
    candidate spelled ``en_US.UTF-8``.

    Attributes:
        names: Identifiers exactly as reported by the host.
    """

    names: FrozenSet[str] = frozenset()
    _folded: FrozenSet[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "names", frozenset(self.names))
        object.__setattr__(
            self, "_folded", frozenset(name.casefold() for name in self.names)
        )

    @classmethod
    def empty(cls) -> "InstalledLocaleSet":
        return cls(frozenset())

    @classmethod
    def from_lines(cls, text: str) -> "InstalledLocaleSet":
        """Parse one identifier per line, ignoring blank lines."""
        return cls(frozenset(line.strip() for line in text.splitlines() if line.strip()))

    @property
    def is_empty(self) -> bool:
        return not self.names

    def __contains__(self, identifier: object) -> bool:
        if not isinstance(identifier, str):
            return False
        return identifier.casefold() in self._folded

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.names))

    def __len__(self) -> int:
        return len(self.names)


@dataclass(frozen=True)
class LocaleSelection:
    """Resolved locale roles for every downstream command.

    The numeric locale is not a constructor argument: number parsing must
    never vary with host configuration, so it is always the C locale.

    Attributes:
        message_locale: Locale for human-readable text (LANG, LANGUAGE).
        time_locale: Locale for date/time formatting (LC_TIME).
        numeric_locale: Always "C" (LC_NUMERIC).
    """

    message_locale: str
    time_locale: str
    numeric_locale: str = field(default=C_LOCALE, init=False)

    def as_environment(self) -> Dict[str, str]:
        """Return the locale variables for this selection as a new dict."""
        env = {name: self.message_locale for name in MESSAGE_VARIABLES}
        env[TIME_VARIABLE] = self.time_locale
        env[NUMERIC_VARIABLE] = self.numeric_locale
        return env

    @classmethod
    def from_environment(
        cls, environ: Mapping[str, str]
    ) -> Optional["LocaleSelection"]:
        """Rebuild the selection a sterile parent passed to this process.

        Args:
            environ: Process environment.

        Returns:
            LocaleSelection, or None when the environment is not sterile or
            lacks the locale variables.
        """
        if STERILE_MARKER not in environ:
            return None
        message_locale = environ.get("LANG")
        time_locale = environ.get(TIME_VARIABLE)
        if not message_locale or not time_locale:
            return None
        return cls(message_locale=message_locale, time_locale=time_locale)
