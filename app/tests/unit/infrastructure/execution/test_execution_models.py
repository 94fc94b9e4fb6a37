"""Unit tests for execution models.

Tests cover:
- ProcessSpec constructors and argv
- ExitOutcome factories and predicates
- LaunchError propagation via raise_for_launch()
"""

import sys

import pytest

from infrastructure.execution import (
    ExecutionStatus,
    ExitOutcome,
    LaunchError,
    ProcessSpec,
)


@pytest.mark.unit
class TestProcessSpec:
    """Tests for ProcessSpec."""

    def test_command(self):
        spec = ProcessSpec.command("atopsar", "-A", "-b", "10:00")
        assert spec.program == "atopsar"
        assert spec.args == ("-A", "-b", "10:00")
        assert spec.argv == ("atopsar", "-A", "-b", "10:00")
        assert spec.replace_current is False

    def test_command_without_args(self):
        assert ProcessSpec.command("date").argv == ("date",)

    def test_shell_script_disables_startup_files(self):
        spec = ProcessSpec.shell_script("/opt/audit/collect.sh", "--fast")
        assert spec.argv == (
            "bash",
            "--noprofile",
            "--norc",
            "/opt/audit/collect.sh",
            "--fast",
        )

    def test_current_program_uses_interpreter(self, monkeypatch):
        monkeypatch.setattr(sys, "orig_argv", ["python3", "-m", "main", "show"], raising=False)
        spec = ProcessSpec.current_program()
        assert spec.program == sys.executable
        assert spec.args == ("-m", "main", "show")
        assert spec.replace_current is True

    def test_is_frozen(self):
        spec = ProcessSpec.command("date")
        with pytest.raises(AttributeError):
            spec.program = "ls"


@pytest.mark.unit
class TestExitOutcome:
    """Tests for ExitOutcome."""

    def test_completed_success(self):
        outcome = ExitOutcome.completed(0, stdout="out\n")
        assert outcome.status == ExecutionStatus.COMPLETED
        assert outcome.returncode == 0
        assert outcome.stdout == "out\n"
        assert outcome.launched
        assert outcome.succeeded
        assert outcome.error_code is None

    def test_completed_nonzero_is_launched_not_succeeded(self):
        outcome = ExitOutcome.completed(3, stderr="boom")
        assert outcome.launched
        assert not outcome.succeeded
        assert outcome.returncode == 3
        assert outcome.message == "exited with status 3"

    def test_launch_failure(self):
        outcome = ExitOutcome.launch_failure("Not found: nope", error_code="NOT_FOUND")
        assert outcome.status == ExecutionStatus.LAUNCH_FAILED
        assert outcome.returncode is None
        assert not outcome.launched
        assert not outcome.succeeded
        assert outcome.error_code == "NOT_FOUND"

    def test_raise_for_launch_returns_self_when_launched(self):
        outcome = ExitOutcome.completed(1)
        assert outcome.raise_for_launch() is outcome

    def test_raise_for_launch_raises_with_code(self):
        outcome = ExitOutcome.launch_failure("Permission denied: x", error_code="PERMISSION_DENIED")
        with pytest.raises(LaunchError) as exc_info:
            outcome.raise_for_launch()
        assert exc_info.value.error_code == "PERMISSION_DENIED"
        assert str(exc_info.value) == "Permission denied: x"
