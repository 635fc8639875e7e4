"""XDG-compliant path management for ghostmux."""

from pathlib import Path

from xdg_base_dirs import xdg_config_home

APP_NAME = "ghostmux"


def get_configs_dir() -> Path:
    """Get the directory holding named window configs."""
    return xdg_config_home() / APP_NAME


def get_named_config_path(name: str, configs_dir: Path | None = None) -> Path:
    """Get the path of a named config.

    Prefers ``<name>.yml`` and falls back to an existing ``<name>.yaml``.
    """
    directory = configs_dir or get_configs_dir()
    path = directory / f"{name}.yml"
    alt = directory / f"{name}.yaml"
    if not path.exists() and alt.exists():
        return alt
    return path
