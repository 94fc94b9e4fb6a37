"""Sterile and locale-overlay environment construction.

Both builders are pure: they read the caller's environment and return a
new dict. Nothing here mutates ``os.environ``, and every call returns an
independent mapping, so a per-call override can never leak into a
sibling launch.
"""

import os
import sys
from typing import IO, Dict, Mapping, Optional

from infrastructure.configuration import Settings
from infrastructure.locales.models import STERILE_MARKER, LocaleSelection
from infrastructure.services.providers import get_settings

# Overrides every LC_* category, including the ones a selection pins.
LC_ALL = "LC_ALL"

RC_HOOK_VARIABLES = ("BASH_ENV", "ENV")

# Read by this program's own Settings on startup.
CONFIGURATION_VARIABLES = ("LOG_LEVEL", "LOG_FORMAT")
CONFIGURATION_PREFIXES = ("LOCALE_", "STERILE_")


def is_sterile(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Check whether this process already runs in a sterile environment."""
    if environ is None:
        environ = os.environ
    return STERILE_MARKER in environ


def is_contaminated(
    environ: Optional[Mapping[str, str]] = None,
    stdin: Optional[IO] = None,
) -> bool:
    """Check whether inherited shell state could leak into child commands.

    A process is contaminated when it is attached to a terminal (an
    interactive session with its aliases and rc files loaded) or when
    BASH_ENV/ENV would make child shells source a startup file.

    Args:
        environ: Process environment (default: os.environ)
        stdin: Standard input stream (default: sys.stdin)
    """
    if environ is None:
        environ = os.environ
    if any(environ.get(name) for name in RC_HOOK_VARIABLES):
        return True

    if stdin is None:
        stdin = sys.stdin
    if stdin is None:
        return False
    try:
        return stdin.isatty()
    except ValueError:
        # closed stream
        return False


def configuration_environment(
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """Select this program's configuration variables from ``environ``.

    A re-executed copy of the program loads its Settings from the sterile
    environment, so these are carried across the re-exec to keep log
    format, log level and sterile/locale settings unchanged.
    """
    if environ is None:
        environ = os.environ
    return {
        name: value
        for name, value in environ.items()
        if name in CONFIGURATION_VARIABLES or name.startswith(CONFIGURATION_PREFIXES)
    }


def build_environment(
    selection: LocaleSelection,
    settings: Optional[Settings] = None,
    environ: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """Build a sterile environment for one launch.

    Contains the fixed HOME, PATH and TERM, the sterility marker and the
    locale variables of ``selection``. Configured preserve-names are copied
    from ``environ`` when present; no other caller variable is inherited.
    Preserved names cannot replace the fixed values, per-call overrides can.

    Args:
        selection: Locale selection to seed the environment with
        settings: Settings instance (default: cached process settings)
        environ: Caller environment for preserved names (default: os.environ)
        overrides: Per-call values applied last

    Returns:
        A new dict owned by the caller.
    """
    if settings is None:
        settings = get_settings()
    if environ is None:
        environ = os.environ

    sterile = settings.sterile
    env: Dict[str, str] = {}
    for name in sterile.preserve:
        if name in environ:
            env[name] = environ[name]

    env["HOME"] = sterile.home
    env["PATH"] = sterile.path
    env["TERM"] = sterile.term
    env[STERILE_MARKER] = "1"
    env.update(selection.as_environment())

    if overrides:
        env.update(overrides)
    return env


def overlay_locale(
    selection: LocaleSelection,
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """Copy the caller environment with only the locale variables replaced.

    LC_ALL is dropped from the copy: when set it takes precedence over
    LC_TIME and LC_NUMERIC and would defeat the selection.

    Args:
        selection: Locale selection to apply
        environ: Caller environment (default: os.environ)

    Returns:
        A new dict owned by the caller.
    """
    if environ is None:
        environ = os.environ

    env = dict(environ)
    env.pop(LC_ALL, None)
    env.update(selection.as_environment())
    return env
