"""Relative navigation planning across the panes of a window.

The terminal exposes no absolute pane addressing, only "previous" and "next".
After the last split the newest pane (N-1) is active, so the plan rewinds to
pane 0 once and then walks forward one pane at a time. Commands therefore run
in declaration order and the last declared pane is the last one touched.
"""

from dataclasses import dataclass
from enum import StrEnum

from ghostmux.errors import InvalidSpecError


class NavigationStep(StrEnum):
    """Move focus by one pane relative to the active pane."""

    PREVIOUS = "previous"
    NEXT = "next"


@dataclass(frozen=True)
class NavigationPlan:
    """Visitation plan for a window with ``total_panes`` panes."""

    total_panes: int
    rewind: tuple[NavigationStep, ...]
    visit_order: tuple[int, ...]
    focus_return: tuple[NavigationStep, ...] = ()

    def steps_before(self, pane: int) -> tuple[NavigationStep, ...]:
        """Steps to issue before dispatching to ``pane`` during the forward walk."""
        if not 0 <= pane < self.total_panes:
            raise IndexError(f"pane {pane} out of range for {self.total_panes} panes")
        if pane == 0:
            return ()
        return (NavigationStep.NEXT,)


def plan_navigation(total_panes: int, focus: int | None = None) -> NavigationPlan:
    """Plan the rewind, forward walk and optional focus return.

    Args:
        total_panes: Number of panes in the window.
        focus: Pane that should hold focus once every pane is dispatched.
            None leaves focus on the last pane.

    Returns:
        The navigation plan.

    Raises:
        InvalidSpecError: If ``total_panes`` is less than one.
        IndexError: If ``focus`` is outside the window.
    """
    if total_panes < 1:
        raise InvalidSpecError(f"Invalid pane count: {total_panes}", hint="A window needs at least one pane.")

    last = total_panes - 1
    focus_return: tuple[NavigationStep, ...] = ()
    if focus is not None:
        if not 0 <= focus < total_panes:
            raise IndexError(f"focus pane {focus} out of range for {total_panes} panes")
        focus_return = (NavigationStep.PREVIOUS,) * (last - focus)

    return NavigationPlan(
        total_panes=total_panes,
        rewind=(NavigationStep.PREVIOUS,) * last,
        visit_order=tuple(range(total_panes)),
        focus_return=focus_return,
    )
