"""Binding listing commands for nmskeys."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from nmskeys.config.constants import ALL_GROUPS_SENTINEL, COLUMN_TITLES, DEFAULT_LIST_LIMIT
from nmskeys.config.settings import remember_settings_dir
from nmskeys.models.bindings import (
    BindingRecord,
    FilterCriteria,
    SortColumn,
    SortDirective,
    SortOrder,
)
from nmskeys.services.document_loader import load_bindings
from nmskeys.services.view_filter import apply_view
from nmskeys.utils.cli import handle_cli_errors
from nmskeys.utils.output import console, print_json

from ._helpers import resolve_settings_file

app = typer.Typer()


def _parse_sort(sort: str, descending: bool) -> SortDirective:
    try:
        column = SortColumn.from_name(sort)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--sort") from e
    order = SortOrder.DESCENDING if descending else SortOrder.ASCENDING
    return SortDirective(column, order)


def _group_filter(action_set: Optional[str], groups: List[str]) -> str:
    """Map the --set value to a group filter; "" means every action set.

    The sentinel is matched case-insensitively, unless the document has
    a real action set spelled the same way.
    """
    value = (action_set or "").strip()
    if value.casefold() != ALL_GROUPS_SENTINEL.casefold():
        return value
    if any(group.casefold() == value.casefold() for group in groups):
        return value
    return ""


def _bindings_table(rows: List[BindingRecord], directive: SortDirective) -> Table:
    table = Table(show_header=True, header_style="bold")
    for column in SortColumn:
        title = COLUMN_TITLES[column]
        if column == directive.column:
            title += " ▼" if directive.descending else " ▲"
        table.add_column(title, style="cyan" if column == SortColumn.BUTTON else None)
    for record in rows:
        table.add_row(*(Text(value) for value in record.as_row()))
    return table


@app.command("list")
@handle_cli_errors("listing bindings")
def list_bindings(
    settings_file: Optional[Path] = typer.Argument(
        None, help="Path to TKGAMESETTINGS.MXML (default: last used directory)"
    ),
    action_set: Optional[str] = typer.Option(
        None, "--set", "-s", help="Only show this action set (case-insensitive)"
    ),
    action: Optional[str] = typer.Option(
        None, "--action", "-a", help="Space separated action terms, any may match"
    ),
    button: Optional[str] = typer.Option(
        None, "--button", "-b", help="Space separated button terms, any may match"
    ),
    sort: str = typer.Option("group", "--sort", help="Sort column: group, action or button"),
    descending: bool = typer.Option(False, "--desc", "-d", help="Sort descending"),
    limit: int = typer.Option(DEFAULT_LIST_LIMIT, "--limit", "-n", help="Maximum rows to show (0 = all)"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
):
    """
    List key bindings, filtered and sorted.

    Bindings without a button are never shown.
    """
    directive = _parse_sort(sort, descending)
    path = resolve_settings_file(settings_file)

    result = load_bindings(path)
    remember_settings_dir(path)

    criteria = FilterCriteria.from_text(
        _group_filter(action_set, result.groups), action, button
    )
    rows = apply_view(result.records, criteria, directive)
    shown = rows[:limit] if limit > 0 else rows

    if json_output:
        print_json([record.to_dict() for record in shown])
        return

    if not rows:
        console.print("[yellow]No bindings match the current filters[/yellow]")
        return

    console.print(_bindings_table(shown, directive))
    summary = f"{len(rows)}/{len(result.records)} bindings"
    if len(shown) < len(rows):
        summary += f" (showing first {len(shown)})"
    console.print(f"[dim]{summary} from {escape(str(path))}[/dim]")


@app.command("sets")
@handle_cli_errors("listing action sets")
def list_sets(
    settings_file: Optional[Path] = typer.Argument(
        None, help="Path to TKGAMESETTINGS.MXML (default: last used directory)"
    ),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
):
    """List the action sets in discovery order."""
    path = resolve_settings_file(settings_file)
    result = load_bindings(path)
    remember_settings_dir(path)

    if json_output:
        print_json(result.groups)
        return

    if not result.groups:
        console.print("[yellow]No action sets found[/yellow]")
        return

    counts = {group: 0 for group in result.groups}
    for record in result.records:
        if record.group_label in counts:
            counts[record.group_label] += 1

    table = Table(show_header=True, header_style="bold")
    table.add_column(COLUMN_TITLES[SortColumn.GROUP])
    table.add_column("Bindings", justify="right")
    for group in result.groups:
        table.add_row(Text(group), str(counts[group]))
    console.print(table)
    if _group_filter(ALL_GROUPS_SENTINEL, result.groups):
        console.print("[dim]Use --set with any of these[/dim]")
    else:
        console.print(
            f"[dim]Use --set with any of these; '{ALL_GROUPS_SENTINEL}' means no set filter[/dim]"
        )
