"""CLI entry point for ghostmux."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ghostmux import __version__
from ghostmux.config import (
    GhostmuxConfig,
    display_config_warnings,
    list_configs,
    load_config,
    resolve_config_path,
)
from ghostmux.errors import GhostmuxError, WindowError
from ghostmux.ghostty import GhosttyDriver
from ghostmux.layouts import LAYOUT_DESCRIPTIONS
from ghostmux.log import configure_logging
from ghostmux.orchestrator import plan_window, run_windows
from ghostmux.xdg_paths import get_configs_dir

app = typer.Typer(
    name="ghostmux",
    help="Open Ghostty and split it into the panes described by a YAML config.",
    no_args_is_help=False,
)

console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"ghostmux {__version__}")
        raise typer.Exit()


def _fail(error: GhostmuxError) -> typer.Exit:
    message = str(error) if isinstance(error, WindowError) else error.message
    err_console.print(f"[red]Error:[/] {escape(message)}")
    if error.hint:
        err_console.print(f"[dim]{escape(error.hint)}[/]")
    return typer.Exit(int(error.code))


def _print_available_configs(configs_dir: Path) -> None:
    names = list_configs(configs_dir)
    if not names:
        console.print(f"No configs found in {configs_dir}")
        console.print("\nCreate one with:")
        console.print(f"  mkdir -p {configs_dir}")
        console.print(f"  $EDITOR {configs_dir}/my-project.yml")
        return

    console.print("[bold]Available configs:[/]")
    for name in names:
        console.print(f"  • {name}")
    console.print("\nLaunch with: [cyan]ghostmux <config-name>[/]")


def _print_plan(config: GhostmuxConfig, config_file: Path) -> None:
    console.print(f"[green]✓[/] Config valid: {config_file}")
    for index, window in enumerate(config.windows):
        table = Table(title=f"Window {index + 1}: {window.name} ({len(window.panes)} panes)")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Phase", style="cyan")
        table.add_column("Pane", justify="right")
        table.add_column("Action")
        for step, instruction in enumerate(plan_window(window)):
            table.add_row(str(step), instruction.phase.value, str(instruction.pane), escape(instruction.describe()))
        console.print(table)
        console.print(f"[dim]Layout: {window.layout.value} - {LAYOUT_DESCRIPTIONS[window.layout]}[/]")


@app.command()
def main(
    name_arg: Annotated[
        str | None,
        typer.Argument(metavar="NAME", help="Name of a config in the configs directory."),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Config file path."),
    ] = None,
    name: Annotated[
        str | None,
        typer.Option("--name", "-N", help="Name of a config in the configs directory."),
    ] = None,
    list_available: Annotated[
        bool,
        typer.Option("--list", "-l", help="List available configs."),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", "-n", help="Validate the config and show the plan without launching."),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", "-D", help="Enable debug output."),
    ] = False,
    configs_dir: Annotated[
        Path | None,
        typer.Option("--configs-dir", help="Directory holding named configs.", hidden=True),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show version."),
    ] = None,
) -> None:
    """Launch Ghostty and build the windows described by a config."""
    configure_logging(debug, err_console)
    directory = configs_dir or get_configs_dir()

    if list_available:
        _print_available_configs(directory)
        raise typer.Exit()

    # Support positional argument: ghostmux <name>
    if not name and not config_path and name_arg:
        name = name_arg

    config_file = resolve_config_path(config_path, name, directory)

    try:
        config, warnings = load_config(config_file)
    except GhostmuxError as e:
        raise _fail(e) from None

    display_config_warnings(warnings, err_console)

    if debug:
        console.print(f"[dim]Loaded config: {config_file} ({len(config.windows)} window(s))[/]")

    if dry_run:
        _print_plan(config, config_file)
        raise typer.Exit()

    driver = GhosttyDriver()
    try:
        if debug:
            console.print("[dim]Launching Ghostty...[/]")
        driver.launch()
        run_windows(config.windows, driver)
    except GhostmuxError as e:
        raise _fail(e) from None

    if debug:
        console.print("[green]✨ Done![/]")


if __name__ == "__main__":
    app()
