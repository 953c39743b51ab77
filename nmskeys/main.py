#!/usr/bin/env python3
"""
Main CLI entry point for nmskeys
"""

import typer

from nmskeys import __version__
from nmskeys.commands.bindings import app as bindings_app
from nmskeys.commands.browse import app as browse_app
from nmskeys.utils.logging_utils import setup_cli_logging


# Version command
def version():
    """Show nmskeys version"""
    typer.echo(f"nmskeys version {__version__}")
    typer.echo("No Man's Sky key binding viewer")


# Callback for global options
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-error output"),
):
    """
    nmskeys - No Man's Sky key binding viewer

    Reads the key bindings from TKGAMESETTINGS.MXML and shows them as a
    filterable, sortable table. The settings file is never modified.

    [bold]Examples:[/bold]

    List every binding:
        [cyan]nmskeys list "<NMS>/Binaries/SETTINGS/TKGAMESETTINGS.MXML"[/cyan]

    Find what is bound to E, S, D or F:
        [cyan]nmskeys list --button "KeyE KeyS KeyD KeyF" --sort button[/cyan]

    Browse interactively (uses the last directory when no file is given):
        [cyan]nmskeys browse[/cyan]
    """
    if verbose and quiet:
        typer.echo("Error: --verbose and --quiet are mutually exclusive", err=True)
        raise typer.Exit(1)

    setup_cli_logging(verbose=verbose, quiet=quiet)


def create_app() -> typer.Typer:
    """Create and configure the main CLI application"""
    app = typer.Typer(rich_markup_mode="rich", no_args_is_help=True)
    app.callback()(main)

    for sub_app in (bindings_app, browse_app):
        for command in sub_app.registered_commands:
            app.registered_commands.append(command)

    app.command()(version)
    return app


# Create the app instance
app = create_app()


def run():
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    run()
