"""Sterile execution of commands and of the current program.

Usage:
    from infrastructure.execution import ProcessSpec, run_sterile, with_locale
    from infrastructure.locales import get_locale_selection

    selection = get_locale_selection()

    # Full isolation: nothing inherited but the fixed allowlist
    outcome = run_sterile(ProcessSpec.command("atopsar", "-A"), selection)

    # Only the locale is pinned; the rest of the environment is kept
    outcome = with_locale(selection, ProcessSpec.command("date", "+%c"))

    # Re-run this program sterile; returns only when already sterile
    ensure_sterile(selection)
"""

import os
import shutil
import subprocess
import sys
from typing import Callable, IO, Mapping, Optional

from infrastructure.configuration import Settings
from infrastructure.execution.classifiers import classify_launch_error
from infrastructure.execution.environment import (
    build_environment,
    configuration_environment,
    is_contaminated,
    is_sterile,
    overlay_locale,
)
from infrastructure.execution.models import ExitOutcome, ProcessSpec
from infrastructure.locales.models import LocaleSelection
from infrastructure.logging import get_module_logger
from infrastructure.services.providers import get_settings

logger = get_module_logger()

Execve = Callable[[str, list, dict], None]


def _locate(program: str, path: str) -> Optional[str]:
    """Resolve a program against the target PATH, not the caller's."""
    if os.sep in program:
        return program
    return shutil.which(program, path=path)


def _launch(
    target: ProcessSpec,
    env: Mapping[str, str],
    timeout: Optional[float] = None,
    input: Optional[str] = None,
    cwd: Optional[str] = None,
    capture_output: bool = True,
) -> ExitOutcome:
    log = logger.bind(program=target.program, args=list(target.args))
    try:
        result = subprocess.run(
            list(target.argv),
            env=dict(env),
            input=input,
            cwd=cwd,
            timeout=timeout,
            capture_output=capture_output,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        outcome = classify_launch_error(e)
        log.warning(
            "command_launch_failed",
            error_code=outcome.error_code,
            error=outcome.message,
        )
        return outcome

    outcome = ExitOutcome.completed(
        result.returncode, result.stdout or "", result.stderr or ""
    )
    if result.returncode != 0:
        log.info(
            "command_exited_nonzero",
            returncode=result.returncode,
            stderr=outcome.stderr.strip(),
        )
    else:
        log.debug("command_completed", returncode=result.returncode)
    return outcome


def ensure_sterile(
    selection: LocaleSelection,
    settings: Optional[Settings] = None,
    environ: Optional[Mapping[str, str]] = None,
    target: Optional[ProcessSpec] = None,
    only_if_contaminated: Optional[bool] = None,
    stdin: Optional[IO] = None,
    execve: Execve = os.execve,
) -> Optional[ExitOutcome]:
    """Replace the current process with a sterile copy of itself.

    NOT_STERILE -> STERILE happens at most once per logical run: the new
    process carries the sterility marker, so its own call short-circuits.
    The program's own LOG_LEVEL, LOG_FORMAT, LOCALE_* and STERILE_* settings are
    carried over so the new process is configured like this one.

    Args:
        selection: Locale selection for the sterile process
        settings: Settings instance (default: cached process settings)
        environ: Current environment (default: os.environ)
        target: What to re-invoke (default: the running program)
        only_if_contaminated: Skip the re-exec unless the process is
            interactive or has BASH_ENV/ENV set (default: from settings)
        stdin: Standard input used for the interactivity check
        execve: Process replacement function

    Returns:
        None when already sterile or when the re-exec was skipped. On
        success the call does not return. A LAUNCH_FAILED outcome when the
        replacement could not be started.
    """
    if settings is None:
        settings = get_settings()
    if environ is None:
        environ = os.environ
    if only_if_contaminated is None:
        only_if_contaminated = settings.sterile.only_if_contaminated

    if is_sterile(environ):
        logger.debug("already_sterile")
        return None

    if only_if_contaminated and not is_contaminated(environ, stdin):
        logger.debug("sterile_reexec_skipped", reason="not_contaminated")
        return None

    target = target or ProcessSpec.current_program()
    env = build_environment(
        selection,
        settings=settings,
        environ=environ,
        overrides=configuration_environment(environ),
    )
    program = _locate(target.program, env["PATH"])
    if program is None:
        outcome = ExitOutcome.launch_failure(
            f"Not found: {target.program}", error_code="NOT_FOUND"
        )
        logger.error("sterile_reexec_failed", error_code=outcome.error_code)
        return outcome

    logger.info(
        "sterile_reexec",
        program=program,
        message_locale=selection.message_locale,
        time_locale=selection.time_locale,
    )
    # Buffered output would be lost when the process image is replaced.
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        execve(program, list(target.argv), env)
    except OSError as e:
        outcome = classify_launch_error(e)
        logger.error(
            "sterile_reexec_failed",
            error_code=outcome.error_code,
            error=outcome.message,
        )
        return outcome
    return None


def run_sterile(
    target: ProcessSpec,
    selection: LocaleSelection,
    settings: Optional[Settings] = None,
    environ: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, str]] = None,
    timeout: Optional[float] = None,
    input: Optional[str] = None,
    cwd: Optional[str] = None,
    capture_output: bool = True,
    execve: Execve = os.execve,
) -> Optional[ExitOutcome]:
    """Launch ``target`` in a freshly built sterile environment.

    External commands run to completion and their exit code and captured
    streams are returned; a non-zero exit is data, not an error. A target
    with ``replace_current`` re-invokes the current program through
    :func:`ensure_sterile` and does not return on success.

    Args:
        target: What to launch
        selection: Locale selection to seed the environment with
        settings: Settings instance (default: cached process settings)
        environ: Caller environment for preserved names (default: os.environ)
        overrides: Per-call environment values for this launch only
        timeout: Seconds before the child is killed (LAUNCH_FAILED/TIMEOUT)
        input: Text fed to the child's standard input
        cwd: Working directory for the child
        capture_output: Capture stdout/stderr instead of passing them through
        execve: Process replacement function for ``replace_current`` targets

    Returns:
        ExitOutcome, or None when a self re-exec was a no-op.
    """
    if target.replace_current:
        return ensure_sterile(
            selection,
            settings=settings,
            environ=environ,
            target=target,
            execve=execve,
        )

    env = build_environment(
        selection, settings=settings, environ=environ, overrides=overrides
    )
    return _launch(
        target,
        env,
        timeout=timeout,
        input=input,
        cwd=cwd,
        capture_output=capture_output,
    )


def with_locale(
    selection: LocaleSelection,
    command: ProcessSpec,
    environ: Optional[Mapping[str, str]] = None,
    timeout: Optional[float] = None,
    input: Optional[str] = None,
    cwd: Optional[str] = None,
    capture_output: bool = True,
) -> ExitOutcome:
    """Run one command with only the locale variables pinned.

    Cheaper than :func:`run_sterile` when the environment is trusted and
    only date/number formatting must be deterministic.

    Args:
        selection: Locale selection to apply
        command: External command to run
        environ: Caller environment to overlay (default: os.environ)
        timeout: Seconds before the child is killed (LAUNCH_FAILED/TIMEOUT)
        input: Text fed to the child's standard input
        cwd: Working directory for the child
        capture_output: Capture stdout/stderr instead of passing them through

    Returns:
        ExitOutcome for the command.
    """
    if command.replace_current:
        raise ValueError("with_locale runs external commands only")

    env = overlay_locale(selection, environ=environ)
    return _launch(
        command,
        env,
        timeout=timeout,
        input=input,
        cwd=cwd,
        capture_output=capture_output,
    )
