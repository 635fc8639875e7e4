"""Window configuration loading for ghostmux."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import cast

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ghostmux.errors import InvalidSpecError
from ghostmux.layouts import LayoutKind, is_known_layout, resolve_layout_kind
from ghostmux.xdg_paths import get_configs_dir, get_named_config_path

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = ".ghostmux.yml"
CONFIG_SUFFIXES = (".yml", ".yaml")


class PaneSpec(BaseModel):
    """Commands and working directory for one pane.

    Accepts the compact form (a single command string, or null for an empty
    pane) as well as the expanded mapping.
    """

    model_config = ConfigDict(frozen=True)

    commands: tuple[str, ...] = ()
    root: str | None = None
    focus: bool = False

    @model_validator(mode="before")
    @classmethod
    def _expand_compact(cls, data: object) -> object:
        if data is None:
            return {}
        if isinstance(data, str):
            return {"commands": [data]}
        return data

    @field_validator("commands", mode="before")
    @classmethod
    def _single_command(cls, value: object) -> object:
        if value is None:
            return ()
        if isinstance(value, str):
            return (value,)
        return value

    @field_validator("root", mode="before")
    @classmethod
    def _blank_root(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class WindowSpec(BaseModel):
    """A window: its panes, layout and root directory."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    root: str | None = None
    layout: LayoutKind = LayoutKind.ALTERNATING
    panes: tuple[PaneSpec, ...] = Field(min_length=1)

    @field_validator("layout", mode="before")
    @classmethod
    def _fallback_layout(cls, value: object) -> object:
        if value is None or isinstance(value, str):
            return resolve_layout_kind(value)
        return value

    @field_validator("root", mode="before")
    @classmethod
    def _blank_root(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def focus_index(self) -> int | None:
        """Index of the first pane marked ``focus``, if any."""
        for index, pane in enumerate(self.panes):
            if pane.focus:
                return index
        return None


class GhostmuxConfig(BaseModel):
    """A config file: the windows to create, in order."""

    model_config = ConfigDict(frozen=True)

    windows: tuple[WindowSpec, ...] = Field(min_length=1)


@dataclass
class ConfigWarning:
    """A config validation warning."""

    file: str
    field_name: str
    message: str
    value: object = field(default=None, repr=False)


def _format_validation_error(error: ValidationError) -> str:
    parts: list[str] = []
    for item in error.errors():
        field_path = ".".join(str(loc) for loc in item["loc"]) or "(root)"
        parts.append(f"{field_path}: {item['msg']}")
    return "; ".join(parts)


def _layout_warnings(raw: dict[str, object], source: str) -> list[ConfigWarning]:
    """Collect warnings for layout names that will fall back to alternating."""
    warnings: list[ConfigWarning] = []
    windows = raw.get("windows")
    if not isinstance(windows, list):
        return warnings
    for index, window in enumerate(windows):
        if not isinstance(window, dict):
            continue
        layout = window.get("layout")
        if isinstance(layout, str) and layout and not is_known_layout(layout):
            warnings.append(
                ConfigWarning(
                    file=source,
                    field_name=f"windows.{index}.layout",
                    message=f"unknown layout, using {LayoutKind.ALTERNATING.value}",
                    value=layout,
                )
            )
    return warnings


def parse_config(raw: object, source: str = "<config>") -> tuple[GhostmuxConfig, list[ConfigWarning]]:
    """Validate an already-parsed config document.

    Args:
        raw: The document, normally a dict loaded from YAML.
        source: Name used in warnings and errors.

    Returns:
        Tuple of (validated config, list of warnings).

    Raises:
        InvalidSpecError: If the document is not a mapping or fails validation.
    """
    if not isinstance(raw, dict):
        raise InvalidSpecError(f"{source}: config must be a mapping with a 'windows' list")
    data = cast(dict[str, object], raw)

    warnings = _layout_warnings(data, source)
    try:
        config = GhostmuxConfig.model_validate(data)
    except ValidationError as e:
        raise InvalidSpecError(
            f"{source}: {_format_validation_error(e)}",
            hint="Each window needs a name and at least one pane.",
        ) from e

    for warning in warnings:
        logger.debug("%s: %s %s (%r)", warning.file, warning.field_name, warning.message, warning.value)
    return config, warnings


def load_config(path: Path) -> tuple[GhostmuxConfig, list[ConfigWarning]]:
    """Load and validate a window config file.

    Args:
        path: Path to the YAML file.

    Returns:
        Tuple of (validated config, list of warnings).

    Raises:
        InvalidSpecError: If the file is missing, unreadable, not valid YAML,
            or fails validation.
    """
    if not path.exists():
        raise InvalidSpecError(f"Config file not found: {path}", hint="Use --list to see available configs.")
    try:
        with path.open(encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise InvalidSpecError(f"{path}: YAML parse error: {e}") from e
    except OSError as e:
        raise InvalidSpecError(f"{path}: file read error: {e}") from e

    logger.debug("Loaded config file %s", path)
    return parse_config(raw, source=str(path))


def resolve_config_path(
    config_path: Path | None = None,
    name: str | None = None,
    configs_dir: Path | None = None,
) -> Path:
    """Work out which config file to load.

    A name wins over an explicit path; with neither, ``.ghostmux.yml`` in the
    current directory is used.

    Args:
        config_path: Explicit config file path.
        name: Name of a config in the configs directory.
        configs_dir: Directory holding named configs. Uses default if None.

    Returns:
        The config file path.
    """
    if name:
        return get_named_config_path(name, configs_dir)
    if config_path:
        return config_path
    return Path(DEFAULT_CONFIG_FILE)


def list_configs(configs_dir: Path | None = None) -> list[str]:
    """List the names of configs in the configs directory.

    Args:
        configs_dir: Directory to scan. Uses default if None.

    Returns:
        Sorted config names (file stems), without duplicates.
    """
    directory = configs_dir or get_configs_dir()
    if not directory.is_dir():
        return []
    names = {path.stem for path in directory.iterdir() if path.is_file() and path.suffix in CONFIG_SUFFIXES}
    return sorted(names)


def display_config_warnings(warnings: list[ConfigWarning], console: Console) -> None:
    """Display config warnings using Rich formatting.

    Args:
        warnings: List of warnings to display.
        console: Rich console to output to.
    """
    if not warnings:
        return

    text = Text()
    for i, warning in enumerate(warnings):
        if i > 0:
            text.append("\n")
        text.append(f"  {warning.file}", style="dim")
        text.append(": ", style="dim")
        text.append(warning.field_name, style="bold")
        text.append(f" - {warning.message}", style="yellow")
        if warning.value is not None:
            text.append(f" (got: {warning.value!r})", style="dim")

    console.print(Panel(text, title="[yellow]Config Warnings[/]", border_style="yellow"))
