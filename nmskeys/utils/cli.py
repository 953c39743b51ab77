"""CLI utilities for error handling."""

import functools
import logging
from typing import Callable, TypeVar

import typer
from rich.markup import escape

from nmskeys.exceptions import NmsKeysError
from nmskeys.utils.output import console

F = TypeVar('F', bound=Callable)

logger = logging.getLogger(__name__)


def handle_cli_errors(action: str) -> Callable[[F], F]:
    """Decorator that catches exceptions and prints user-friendly errors.

    Args:
        action: Description of the action being performed (e.g., "loading bindings")

    Returns:
        Decorator function that wraps the target function with error handling.

    Example:
        @handle_cli_errors("loading bindings")
        def list_bindings(settings_file: Path):
            # code that might raise exceptions
            pass
    """
    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except typer.Exit:
                raise
            except NmsKeysError as e:
                logger.debug(f"{action} failed", exc_info=True)
                console.print(f"[red]Error {action}: {escape(str(e))}[/red]")
                raise typer.Exit(1) from e
        return wrapper  # type: ignore[return-value]
    return decorator
