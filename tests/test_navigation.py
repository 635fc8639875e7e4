"""Tests for ghostmux.navigation module."""

import pytest

from ghostmux.errors import InvalidSpecError
from ghostmux.navigation import NavigationStep, plan_navigation

PREV = NavigationStep.PREVIOUS
NEXT = NavigationStep.NEXT


class TestPlanNavigation:
    """Tests for plan_navigation function."""

    @pytest.mark.parametrize("total", [1, 2, 3, 6, 10])
    def test_rewind_length(self, total: int) -> None:
        """Should rewind N-1 panes, all previous."""
        plan = plan_navigation(total)
        assert len(plan.rewind) == total - 1
        assert set(plan.rewind) <= {PREV}

    def test_visit_order_is_declaration_order(self) -> None:
        """Should visit panes 0..N-1."""
        assert plan_navigation(4).visit_order == (0, 1, 2, 3)

    def test_single_pane(self) -> None:
        """Should need no navigation at all."""
        plan = plan_navigation(1)
        assert plan.rewind == ()
        assert plan.visit_order == (0,)
        assert plan.steps_before(0) == ()
        assert plan.focus_return == ()

    def test_zero_panes_rejected(self) -> None:
        """Should reject a window without panes."""
        with pytest.raises(InvalidSpecError):
            plan_navigation(0)


class TestStepsBefore:
    """Tests for NavigationPlan.steps_before."""

    def test_first_pane_needs_no_step(self) -> None:
        """Should dispatch to pane 0 without moving."""
        assert plan_navigation(3).steps_before(0) == ()

    def test_later_panes_take_one_next(self) -> None:
        """Should move one pane forward before each later pane."""
        plan = plan_navigation(3)
        assert plan.steps_before(1) == (NEXT,)
        assert plan.steps_before(2) == (NEXT,)

    def test_walk_ends_on_last_pane(self) -> None:
        """Rewind plus forward walk should land back on the newest pane."""
        total = 5
        plan = plan_navigation(total)
        offset = total - 1
        offset -= len(plan.rewind)
        assert offset == 0
        for pane in plan.visit_order:
            offset += len(plan.steps_before(pane))
            assert offset == pane
        assert offset == total - 1

    def test_out_of_range(self) -> None:
        """Should reject panes outside the window."""
        with pytest.raises(IndexError):
            plan_navigation(2).steps_before(2)


class TestFocusReturn:
    """Tests for the focus return steps."""

    def test_focus_on_first_pane(self) -> None:
        """Should step back to pane 0 from the last pane."""
        assert plan_navigation(4, focus=0).focus_return == (PREV, PREV, PREV)

    def test_focus_on_last_pane(self) -> None:
        """Should not move when the last pane wants focus."""
        assert plan_navigation(4, focus=3).focus_return == ()

    def test_focus_does_not_change_rewind(self) -> None:
        """Should leave the rewind untouched."""
        assert plan_navigation(4, focus=1).rewind == plan_navigation(4).rewind

    def test_focus_out_of_range(self) -> None:
        """Should reject a focus pane outside the window."""
        with pytest.raises(IndexError):
            plan_navigation(2, focus=5)
