"""Execution status enumeration.

Status codes for command launches. A child that exits non-zero still
COMPLETED: its exit code is data for the caller, not a launch error.
"""

from enum import Enum


class ExecutionStatus(Enum):
    """Status codes for command launches.

    Attributes:
        COMPLETED: The child ran and exited (any exit code)
        LAUNCH_FAILED: The child could not be started, or was killed by a
            caller-imposed timeout
    """

    COMPLETED = "completed"
    LAUNCH_FAILED = "launch_failed"
