"""Error model and exit code contract for ghostmux."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes returned by the CLI."""

    SUCCESS = 0
    RUNTIME_ERROR = 1
    INVALID_ARGS = 2
    CONFIG_ERROR = 3
    DRIVER_ERROR = 4


@dataclass
class GhostmuxError(Exception):
    """Base error carrying a user-facing message and exit code."""

    message: str
    code: ExitCode = ExitCode.RUNTIME_ERROR
    hint: str = ""

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message} Hint: {self.hint}"
        return self.message


@dataclass
class InvalidSpecError(GhostmuxError):
    """Window configuration is unusable; raised before anything is launched."""

    code: ExitCode = ExitCode.CONFIG_ERROR


@dataclass
class DriverError(GhostmuxError):
    """An automation call against the terminal application failed."""

    code: ExitCode = ExitCode.DRIVER_ERROR


@dataclass
class WindowError(GhostmuxError):
    """Orchestration of a window stopped at a failed driver call.

    Already-created splits are left in place.
    """

    code: ExitCode = ExitCode.DRIVER_ERROR
    window: str = ""
    phase: str = ""
    pane: int = 0
    step: int = 0
    operation: str = ""

    def __str__(self) -> str:
        location = f"window '{self.window}', {self.phase} pane {self.pane}, step {self.step} ({self.operation})"
        return f"{location}: {self.message}"
