"""Sterile execution wrapper.

Launches commands, or re-launches the current program, in a minimal and
reproducible environment seeded with a LocaleSelection.

Main components:
- environment: build_environment, overlay_locale, is_sterile
- runner: run_sterile, with_locale, ensure_sterile
- models: ProcessSpec, ExitOutcome
- classifiers: launch exception → ExitOutcome
"""

from infrastructure.execution.classifiers import classify_launch_error
from infrastructure.execution.environment import (
    build_environment,
    configuration_environment,
    is_contaminated,
    is_sterile,
    overlay_locale,
)
from infrastructure.execution.errors import LaunchError
from infrastructure.execution.models import ExitOutcome, ProcessSpec
from infrastructure.execution.runner import ensure_sterile, run_sterile, with_locale
from infrastructure.execution.status import ExecutionStatus

__all__ = [
    "ProcessSpec",
    "ExitOutcome",
    "ExecutionStatus",
    "LaunchError",
    "classify_launch_error",
    "build_environment",
    "configuration_environment",
    "overlay_locale",
    "is_sterile",
    "is_contaminated",
    "ensure_sterile",
    "run_sterile",
    "with_locale",
]
