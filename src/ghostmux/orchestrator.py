"""Window orchestration: splits, rewind, and per-pane command dispatch.

A window is turned into a flat list of ``Instruction``s by ``plan_window``
(pure, no driver involved), then ``WindowOrchestrator`` executes that list
one call at a time, waiting a fixed settle delay after every call so the
terminal's UI can catch up.
"""

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from ghostmux.config import WindowSpec
from ghostmux.driver import Driver
from ghostmux.errors import DriverError, InvalidSpecError, WindowError
from ghostmux.layouts import LayoutStrategy, Orientation, plan_splits
from ghostmux.navigation import NavigationStep, plan_navigation

logger = logging.getLogger(__name__)

# Settle delays after each driver call (seconds)
SETTLE_SPLIT = 0.4
SETTLE_NAVIGATE = 0.2
SETTLE_ACTIVATE = 0.3
SETTLE_COMMAND = 0.2
SETTLE_PANE_CD = 0.1
SETTLE_WINDOW_CD = 0.2
SETTLE_CLEAR = 0.1


class Phase(StrEnum):
    """Orchestration state of a window."""

    IDLE = "idle"
    ROOT_CHANGED = "root-changed"
    SPLITTING = "splitting"
    REWINDING = "rewinding"
    DISPATCHING = "dispatching"
    FOCUSING = "focusing"
    DONE = "done"


class Action(StrEnum):
    """Driver call made by an instruction. Values are the driver method names."""

    ACTIVATE = "activate"
    SPLIT_HORIZONTAL = "split_horizontal"
    SPLIT_VERTICAL = "split_vertical"
    NAVIGATE_PREVIOUS = "navigate_previous"
    NAVIGATE_NEXT = "navigate_next"
    SEND_TEXT = "send_text"


_SPLIT_ACTIONS: dict[Orientation, Action] = {
    Orientation.HORIZONTAL: Action.SPLIT_HORIZONTAL,
    Orientation.VERTICAL: Action.SPLIT_VERTICAL,
}

_STEP_ACTIONS: dict[NavigationStep, Action] = {
    NavigationStep.PREVIOUS: Action.NAVIGATE_PREVIOUS,
    NavigationStep.NEXT: Action.NAVIGATE_NEXT,
}


@dataclass(frozen=True)
class Instruction:
    """One driver call, tagged with the phase and the pane it concerns."""

    action: Action
    phase: Phase
    pane: int
    text: str = ""
    settle: float = 0.0

    def describe(self) -> str:
        if self.action is Action.SEND_TEXT:
            return f"{self.action.value} {self.text!r}"
        return self.action.value


def effective_root(window: WindowSpec, pane: int) -> str | None:
    """Working directory for a pane: its own root, else the window root."""
    return window.panes[pane].root or window.root


def plan_window(window: WindowSpec) -> list[Instruction]:
    """Plan every driver call needed to build ``window``.

    Args:
        window: The window to build.

    Returns:
        Instructions in execution order.

    Raises:
        InvalidSpecError: If the window has no panes.
    """
    total = len(window.panes)
    splits = plan_splits(total, LayoutStrategy.for_window(window.layout, total))
    navigation = plan_navigation(total, window.focus_index)

    instructions: list[Instruction] = []

    if window.root:
        instructions.append(
            Instruction(Action.SEND_TEXT, Phase.ROOT_CHANGED, 0, f"cd {window.root}", SETTLE_WINDOW_CD)
        )
        instructions.append(Instruction(Action.SEND_TEXT, Phase.ROOT_CHANGED, 0, "clear", SETTLE_CLEAR))

    for op in splits:
        instructions.append(Instruction(_SPLIT_ACTIONS[op.orientation], Phase.SPLITTING, op.index, settle=SETTLE_SPLIT))

    # Focus sits on the newest pane; each step lands one pane earlier.
    pane = total - 1
    for step in navigation.rewind:
        pane -= 1
        instructions.append(Instruction(_STEP_ACTIONS[step], Phase.REWINDING, pane, settle=SETTLE_NAVIGATE))

    for pane in navigation.visit_order:
        steps = navigation.steps_before(pane)
        if steps:
            instructions.append(Instruction(Action.ACTIVATE, Phase.DISPATCHING, pane, settle=SETTLE_ACTIVATE))
        for step in steps:
            instructions.append(Instruction(_STEP_ACTIONS[step], Phase.DISPATCHING, pane, settle=SETTLE_NAVIGATE))

        # Pane 0 already sits in the window root.
        root = effective_root(window, pane)
        if pane > 0 and root:
            instructions.append(Instruction(Action.SEND_TEXT, Phase.DISPATCHING, pane, f"cd {root}", SETTLE_PANE_CD))

        for command in window.panes[pane].commands:
            instructions.append(Instruction(Action.SEND_TEXT, Phase.DISPATCHING, pane, command, SETTLE_COMMAND))

    if navigation.focus_return:
        pane = total - 1
        instructions.append(Instruction(Action.ACTIVATE, Phase.FOCUSING, pane, settle=SETTLE_ACTIVATE))
        for step in navigation.focus_return:
            pane -= 1
            instructions.append(Instruction(_STEP_ACTIONS[step], Phase.FOCUSING, pane, settle=SETTLE_NAVIGATE))

    return instructions


def execute_instruction(driver: Driver, instruction: Instruction) -> None:
    """Make the driver call described by ``instruction``."""
    method = getattr(driver, instruction.action.value)
    if instruction.action is Action.SEND_TEXT:
        method(instruction.text)
    else:
        method()


class WindowOrchestrator:
    """Builds windows against one driver, one call at a time.

    The only state kept is the phase of the window being built.
    """

    def __init__(self, driver: Driver) -> None:
        self.driver = driver
        self.phase = Phase.IDLE

    def run(self, window: WindowSpec) -> list[Instruction]:
        """Plan and build ``window``.

        Returns:
            The instructions that were executed.

        Raises:
            InvalidSpecError: If the window has no panes. Nothing is executed.
            WindowError: If a driver call fails. Earlier calls are not undone.
        """
        return self.execute(window, plan_window(window))

    def execute(self, window: WindowSpec, instructions: Sequence[Instruction]) -> list[Instruction]:
        """Execute planned ``instructions`` for ``window``."""
        logger.debug("Creating window '%s' (%d panes, %s)", window.name, len(window.panes), window.layout.value)
        self.phase = Phase.IDLE

        for step, instruction in enumerate(instructions):
            self.phase = instruction.phase
            logger.debug("[%s] pane %d: %s", instruction.phase.value, instruction.pane, instruction.describe())
            try:
                execute_instruction(self.driver, instruction)
            except DriverError as e:
                raise WindowError(
                    e.message,
                    hint=e.hint,
                    window=window.name,
                    phase=instruction.phase.value,
                    pane=instruction.pane,
                    step=step,
                    operation=instruction.describe(),
                ) from e
            time.sleep(instruction.settle)

        self.phase = Phase.DONE
        logger.debug("Window '%s' complete", window.name)
        return list(instructions)


def run_windows(windows: Sequence[WindowSpec], driver: Driver) -> list[list[Instruction]]:
    """Build ``windows`` in order, stopping at the first failure.

    Every window is planned before the first driver call, so an invalid
    window is rejected before anything happens.

    Args:
        windows: Windows in declaration order.
        driver: The driver shared by all windows.

    Returns:
        The executed instructions, one list per window.

    Raises:
        InvalidSpecError: If there are no windows or a window has no panes.
        WindowError: If a driver call fails. Completed windows are kept.
    """
    if not windows:
        raise InvalidSpecError("No windows to create", hint="Add at least one window to the config.")

    plans = [plan_window(window) for window in windows]
    orchestrator = WindowOrchestrator(driver)
    executed: list[list[Instruction]] = []
    for index, (window, plan) in enumerate(zip(windows, plans, strict=True)):
        logger.info("Creating window %d/%d: %s", index + 1, len(windows), window.name)
        executed.append(orchestrator.execute(window, plan))
    return executed
