"""Error classifiers for process launch exceptions.

Converts exceptions raised while starting a child into LAUNCH_FAILED
outcomes, so callers branch on data instead of catching OS errors.

Error Mapping:
- FileNotFoundError: binary or working directory missing → NOT_FOUND
- PermissionError: not executable / not permitted → PERMISSION_DENIED
- subprocess.TimeoutExpired: caller timeout, child killed → TIMEOUT
- Other OSError: → LAUNCH_ERROR
"""

import subprocess
from typing import Optional, Union

from infrastructure.execution.models import ExitOutcome


def _as_text(value: Optional[Union[str, bytes]]) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


def classify_launch_error(exc: BaseException) -> ExitOutcome:
    """Classify a launch exception into an ExitOutcome.

    Args:
        exc: Exception raised by subprocess or os.execve

    Returns:
        ExitOutcome with LAUNCH_FAILED status and an error code
    """
    if isinstance(exc, subprocess.TimeoutExpired):
        return ExitOutcome.launch_failure(
            f"Command timed out after {exc.timeout} seconds",
            error_code="TIMEOUT",
            stdout=_as_text(exc.stdout),
            stderr=_as_text(exc.stderr),
        )

    if isinstance(exc, FileNotFoundError):
        target = exc.filename or "program"
        return ExitOutcome.launch_failure(
            f"Not found: {target}",
            error_code="NOT_FOUND",
        )

    if isinstance(exc, PermissionError):
        target = exc.filename or "program"
        return ExitOutcome.launch_failure(
            f"Permission denied: {target}",
            error_code="PERMISSION_DENIED",
        )

    return ExitOutcome.launch_failure(
        f"Launch error: {type(exc).__name__}: {str(exc)}",
        error_code="LAUNCH_ERROR",
    )
