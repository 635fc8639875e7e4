"""Tests for ghostmux.errors and ghostmux.log modules."""

import io
import logging

from rich.console import Console

from ghostmux.errors import DriverError, ExitCode, GhostmuxError, InvalidSpecError, WindowError
from ghostmux.log import LOGGER_NAME, configure_logging


class TestErrors:
    """Tests for the error model."""

    def test_str_with_hint(self) -> None:
        """Should append the hint."""
        assert str(GhostmuxError("bad", hint="fix it")) == "bad Hint: fix it"

    def test_str_without_hint(self) -> None:
        """Should show only the message."""
        assert str(GhostmuxError("bad")) == "bad"

    def test_default_codes(self) -> None:
        """Should carry the exit code of each error kind."""
        assert InvalidSpecError("x").code == ExitCode.CONFIG_ERROR
        assert DriverError("x").code == ExitCode.DRIVER_ERROR
        assert GhostmuxError("x").code == ExitCode.RUNTIME_ERROR

    def test_window_error_location(self) -> None:
        """Should name window, phase, pane, step and operation."""
        error = WindowError("boom", window="dev", phase="splitting", pane=2, step=1, operation="split_vertical")
        assert str(error) == "window 'dev', splitting pane 2, step 1 (split_vertical): boom"
        assert isinstance(error, GhostmuxError)


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_info_by_default(self) -> None:
        """Should log at INFO without debug."""
        logger = configure_logging(console=Console(file=io.StringIO()))
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_debug(self) -> None:
        """Should log debug messages to the console."""
        buffer = io.StringIO()
        configure_logging(debug=True, console=Console(file=buffer, width=200))
        logging.getLogger("ghostmux.orchestrator").debug("pane 1: send_text")
        assert "pane 1: send_text" in buffer.getvalue()

    def test_reconfigure_replaces_handler(self) -> None:
        """Should not stack handlers across calls."""
        configure_logging(console=Console(file=io.StringIO()))
        logger = configure_logging(console=Console(file=io.StringIO()))
        assert len(logger.handlers) == 1
