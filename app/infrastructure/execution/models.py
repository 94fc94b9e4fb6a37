"""Process specification and exit outcome models."""

import sys
from dataclasses import dataclass
from typing import Optional, Tuple

from infrastructure.execution.errors import LaunchError
from infrastructure.execution.status import ExecutionStatus


@dataclass(frozen=True)
class ProcessSpec:
    """What to launch.

    Attributes:
        program: Program name or path; bare names are looked up on the
            target environment's PATH.
        args: Arguments after the program name.
        replace_current: Replace the current process instead of running a
            child. Only used to re-invoke the current program.
    """

    program: str
    args: Tuple[str, ...] = ()
    replace_current: bool = False

    @property
    def argv(self) -> Tuple[str, ...]:
        return (self.program,) + tuple(self.args)

    @classmethod
    def command(cls, program: str, *args: str) -> "ProcessSpec":
        """Run one external command."""
        return cls(program=program, args=tuple(args))

    @classmethod
    def shell_script(cls, path: str, *args: str) -> "ProcessSpec":
        """Run a bash script without profile or rc processing."""
        return cls(program="bash", args=("--noprofile", "--norc", path) + tuple(args))

    @classmethod
    def current_program(cls) -> "ProcessSpec":
        """Re-invoke the running interpreter with its original arguments.

        ``sys.orig_argv`` keeps interpreter options such as ``-m package``
        that ``sys.argv`` drops.
        """
        original = getattr(sys, "orig_argv", None) or [sys.executable] + sys.argv
        return cls(
            program=sys.executable,
            args=tuple(original[1:]),
            replace_current=True,
        )


@dataclass(frozen=True)
class ExitOutcome:
    """Result of one command launch.

    Attributes:
        status: COMPLETED or LAUNCH_FAILED
        returncode: Child exit code, or None when the child never ran to exit
        stdout: Captured standard output ("" when not captured)
        stderr: Captured standard error ("" when not captured)
        message: Human-friendly message for logs/troubleshooting
        error_code: Machine error code for launch failures
    """

    status: ExecutionStatus
    returncode: Optional[int] = None
    stdout: str = ""
    stderr: str = ""
    message: str = "ok"
    error_code: Optional[str] = None

    @property
    def launched(self) -> bool:
        """True if the child ran to exit, whatever its exit code."""
        return self.status == ExecutionStatus.COMPLETED

    @property
    def succeeded(self) -> bool:
        """True if the child ran and exited 0."""
        return self.launched and self.returncode == 0

    @classmethod
    def completed(
        cls, returncode: int, stdout: str = "", stderr: str = ""
    ) -> "ExitOutcome":
        """Create a COMPLETED outcome carrying the child's exit data."""
        return cls(
            status=ExecutionStatus.COMPLETED,
            returncode=returncode,
            stdout=stdout,
            stderr=stderr,
            message=f"exited with status {returncode}",
        )

    @classmethod
    def launch_failure(
        cls,
        message: str,
        error_code: Optional[str] = None,
        stdout: str = "",
        stderr: str = "",
    ) -> "ExitOutcome":
        """Create a LAUNCH_FAILED outcome.

        Args:
            message: Human-friendly error message
            error_code: Machine error code (NOT_FOUND, PERMISSION_DENIED,
                TIMEOUT, LAUNCH_ERROR)
            stdout: Output produced before a timeout, if any
            stderr: Error output produced before a timeout, if any
        """
        return cls(
            status=ExecutionStatus.LAUNCH_FAILED,
            message=message,
            error_code=error_code,
            stdout=stdout,
            stderr=stderr,
        )

    def raise_for_launch(self) -> "ExitOutcome":
        """Raise LaunchError if the command was not launched.

        Returns:
            self, so calls can be chained.
        """
        if not self.launched:
            raise LaunchError(self.message, error_code=self.error_code)
        return self
