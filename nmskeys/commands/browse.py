"""Interactive browser and settings directory commands."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from nmskeys.config.settings import get_settings_dir
from nmskeys.exceptions import ConfigurationError
from nmskeys.utils.cli import handle_cli_errors
from nmskeys.utils.output import console

from ._helpers import resolve_settings_file

app = typer.Typer()


@app.command()
@handle_cli_errors("starting browser")
def browse(
    settings_file: Optional[Path] = typer.Argument(
        None, help="Path to TKGAMESETTINGS.MXML (default: last used directory)"
    ),
):
    """Browse key bindings in an interactive table."""
    from nmskeys.ui.binding_browser import run_browser
    from nmskeys.utils.logging_utils import setup_tui_logging

    path = resolve_settings_file(settings_file)
    setup_tui_logging(__name__)
    run_browser(path)


@app.command("open-dir")
@handle_cli_errors("opening settings directory")
def open_dir():
    """Open the last used settings directory in the file browser."""
    settings_dir = get_settings_dir()
    if settings_dir is None:
        raise ConfigurationError(
            "No settings directory remembered yet; load a settings file first",
            setting="settings_dir",
        )

    console.print(f"Opening [cyan]{escape(str(settings_dir))}[/cyan]")
    status = typer.launch(str(settings_dir))
    if status != 0:
        raise ConfigurationError("Directory view failed", path=str(settings_dir), status=status)
