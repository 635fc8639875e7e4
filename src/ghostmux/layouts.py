"""Layout strategies and split planning for ghostmux windows."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from ghostmux.errors import InvalidSpecError


class LayoutKind(StrEnum):
    """Available window layouts."""

    ALTERNATING = "alternating"  # zig-zag, odd splits horizontal, even vertical
    TILED = "tiled"  # front half vertical, back half horizontal
    EVEN_HORIZONTAL = "even-horizontal"  # every split horizontal
    EVEN_VERTICAL = "even-vertical"  # every split vertical


class Orientation(StrEnum):
    """Axis of a split applied to the active pane."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


# Type alias for split policies: (pane index, total panes) -> orientation
SplitPolicy = Callable[[int, int], Orientation]


def _alternating(index: int, total_panes: int) -> Orientation:
    _ = total_panes  # unused
    if index % 2 == 0:
        return Orientation.VERTICAL
    return Orientation.HORIZONTAL


def _even_horizontal(index: int, total_panes: int) -> Orientation:
    _ = index, total_panes  # unused
    return Orientation.HORIZONTAL


def _even_vertical(index: int, total_panes: int) -> Orientation:
    _ = index, total_panes  # unused
    return Orientation.VERTICAL


def _tiled(index: int, total_panes: int) -> Orientation:
    if index <= total_panes // 2:
        return Orientation.VERTICAL
    return Orientation.HORIZONTAL


# Dictionary dispatch for split policies
_SPLIT_POLICIES: dict[LayoutKind, SplitPolicy] = {
    LayoutKind.ALTERNATING: _alternating,
    LayoutKind.TILED: _tiled,
    LayoutKind.EVEN_HORIZONTAL: _even_horizontal,
    LayoutKind.EVEN_VERTICAL: _even_vertical,
}

# Layout descriptions for dry-run output
LAYOUT_DESCRIPTIONS: dict[LayoutKind, str] = {
    LayoutKind.ALTERNATING: "Alternate horizontal and vertical splits",
    LayoutKind.TILED: "Vertical splits for the first half, horizontal for the rest",
    LayoutKind.EVEN_HORIZONTAL: "Stack panes top-to-bottom",
    LayoutKind.EVEN_VERTICAL: "Stack panes side-by-side",
}


def is_known_layout(value: str) -> bool:
    """Check whether a string names a built-in layout kind."""
    return value in {kind.value for kind in LayoutKind}


def resolve_layout_kind(value: LayoutKind | str | None) -> LayoutKind:
    """Resolve a layout name, falling back to alternating.

    Args:
        value: A LayoutKind, a layout name, or None.

    Returns:
        The matching LayoutKind; ALTERNATING for absent, empty or unknown names.
    """
    if isinstance(value, LayoutKind):
        return value
    if value and is_known_layout(value):
        return LayoutKind(value)
    return LayoutKind.ALTERNATING


@dataclass(frozen=True)
class LayoutStrategy:
    """Split orientation policy for one window."""

    kind: LayoutKind
    total_panes: int

    @classmethod
    def for_window(cls, layout: LayoutKind | str | None, total_panes: int) -> "LayoutStrategy":
        """Build a strategy from a (possibly unknown) layout name."""
        return cls(kind=resolve_layout_kind(layout), total_panes=total_panes)

    def next_split(self, index: int) -> Orientation:
        """Orientation of the split that creates pane ``index`` (1-based)."""
        return _SPLIT_POLICIES[self.kind](index, self.total_panes)


@dataclass(frozen=True)
class SplitOp:
    """A split that creates pane ``index`` from the active pane."""

    orientation: Orientation
    index: int

    def __str__(self) -> str:
        return f"{self.orientation.value}({self.index})"


def plan_splits(total_panes: int, strategy: LayoutStrategy) -> list[SplitOp]:
    """Plan the splits that grow one pane into ``total_panes``.

    Panes are created in declaration order. Each split acts on the active pane,
    which is always the pane created by the previous split.

    Args:
        total_panes: Number of panes the window must end up with.
        strategy: Orientation policy.

    Returns:
        ``total_panes - 1`` split operations with indices 1..N-1.

    Raises:
        InvalidSpecError: If ``total_panes`` is less than one.
    """
    if total_panes < 1:
        raise InvalidSpecError(f"Invalid pane count: {total_panes}", hint="A window needs at least one pane.")
    return [SplitOp(orientation=strategy.next_split(index), index=index) for index in range(1, total_panes)]
