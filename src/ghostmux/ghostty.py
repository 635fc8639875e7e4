"""AppleScript automation backend for Ghostty."""

import logging
import subprocess
import time

from ghostmux.errors import DriverError

logger = logging.getLogger(__name__)

APP_NAME = "Ghostty"

# Timeout for every osascript call (seconds)
_SCRIPT_TIMEOUT = 10

# Wait for the app window after launching (seconds)
_LAUNCH_WAIT = 1.5

# macOS virtual key codes
_KEY_RETURN = 36
_KEY_LEFT_BRACKET = 33
_KEY_RIGHT_BRACKET = 30

_COMMAND = "command down"
_SHIFT = "shift down"


def escape_applescript(text: str) -> str:
    """Escape text for use inside an AppleScript string literal.

    Args:
        text: Raw text.

    Returns:
        Text with backslashes and double quotes escaped.
    """
    return text.replace("\\", "\\\\").replace('"', '\\"')


def _using(modifiers: list[str]) -> str:
    if not modifiers:
        return ""
    return f" using {{{', '.join(modifiers)}}}"


def _system_events(body: str) -> str:
    return f"""
tell application "System Events"
    tell process "{APP_NAME}"
{body}
    end tell
end tell
"""


class GhosttyDriver:
    """Drive Ghostty through System Events keystrokes.

    Splits and pane navigation use Ghostty's default keybindings:
    Cmd+D / Cmd+Shift+D to split, Cmd+[ / Cmd+] for goto_split previous/next.
    """

    def run_script(self, script: str) -> str:
        """Run an AppleScript through osascript.

        Args:
            script: The AppleScript source.

        Returns:
            Standard output of the script, stripped.

        Raises:
            DriverError: If osascript is missing, times out, or fails.
        """
        script = script.strip()
        logger.debug("AppleScript:\n%s", script)
        try:
            result = subprocess.run(
                ["osascript", "-e", script],
                capture_output=True,
                text=True,
                check=True,
                timeout=_SCRIPT_TIMEOUT,
            )
        except FileNotFoundError as e:
            raise DriverError("osascript not found", hint="ghostmux drives Ghostty on macOS only.") from e
        except subprocess.TimeoutExpired as e:
            raise DriverError(f"AppleScript timed out after {_SCRIPT_TIMEOUT}s") from e
        except subprocess.CalledProcessError as e:
            output = (e.stderr or e.stdout or "").strip()
            raise DriverError(f"AppleScript failed: {output or e}") from e

        output = (result.stdout or "").strip()
        if output:
            logger.debug("Output: %s", output)
        return output

    def launch(self) -> None:
        """Open Ghostty, wait for its window, then bring it to the front."""
        cmd = ["open", "-a", APP_NAME]
        logger.debug("Launching: %s", " ".join(cmd))
        try:
            subprocess.run(cmd, check=True, capture_output=True, timeout=_SCRIPT_TIMEOUT)
        except (FileNotFoundError, subprocess.CalledProcessError, subprocess.TimeoutExpired) as e:
            raise DriverError(f"launching {APP_NAME}: {e}") from e
        time.sleep(_LAUNCH_WAIT)
        self.activate()

    def keystroke(self, key: str, modifiers: list[str] | None = None) -> None:
        """Send a character keystroke."""
        self.run_script(_system_events(f'        keystroke "{escape_applescript(key)}"{_using(modifiers or [])}'))

    def key_code(self, code: int, modifiers: list[str] | None = None) -> None:
        """Send a virtual key code."""
        self.run_script(_system_events(f"        key code {code}{_using(modifiers or [])}"))

    def activate(self) -> None:
        self.run_script(f'tell application "{APP_NAME}" to activate')

    def split_horizontal(self) -> None:
        self.keystroke("d", [_COMMAND])

    def split_vertical(self) -> None:
        self.keystroke("d", [_COMMAND, _SHIFT])

    def navigate_previous(self) -> None:
        self.key_code(_KEY_LEFT_BRACKET, [_COMMAND])

    def navigate_next(self) -> None:
        self.key_code(_KEY_RIGHT_BRACKET, [_COMMAND])

    def send_text(self, text: str) -> None:
        """Type ``text`` into the active pane and press Return."""
        body = f'        keystroke "{escape_applescript(text)}"\n        key code {_KEY_RETURN}'
        self.run_script(_system_events(body))
