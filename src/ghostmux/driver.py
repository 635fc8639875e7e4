"""Driver capability consumed by the orchestrator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


class Driver(Protocol):
    """Relative automation primitives against a single terminal instance.

    Every method acts on the currently active pane and raises
    ``DriverError`` on failure. Implementations are not safe for
    concurrent use.
    """

    def activate(self) -> None: ...

    def split_horizontal(self) -> None: ...

    def split_vertical(self) -> None: ...

    def navigate_previous(self) -> None: ...

    def navigate_next(self) -> None: ...

    def send_text(self, text: str) -> None: ...


@dataclass
class RecordingDriver:
    """Driver that records calls instead of automating anything.

    Used for dry runs and tests. Each entry is ``(method, text)``, with an
    empty text for methods that take no argument.
    """

    calls: list[tuple[str, str]] = field(default_factory=list)

    def activate(self) -> None:
        self.calls.append(("activate", ""))

    def split_horizontal(self) -> None:
        self.calls.append(("split_horizontal", ""))

    def split_vertical(self) -> None:
        self.calls.append(("split_vertical", ""))

    def navigate_previous(self) -> None:
        self.calls.append(("navigate_previous", ""))

    def navigate_next(self) -> None:
        self.calls.append(("navigate_next", ""))

    def send_text(self, text: str) -> None:
        self.calls.append(("send_text", text))

    @property
    def sent_text(self) -> list[str]:
        """Every text sent, in order."""
        return [text for method, text in self.calls if method == "send_text"]
