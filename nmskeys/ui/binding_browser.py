"""Binding Browser: filterable, sortable table of key bindings.

Top: action set selector, action / button filter inputs, apply + clear
Middle: DataTable with ActionSet / Action / Button columns (click a
header to sort, click again to reverse)
Bottom: status bar with the source file and visible count
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from rich.markup import escape
from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, DataTable, Footer, Header, Input, Select, Static

from nmskeys.config.constants import ALL_GROUPS_SENTINEL, COLUMN_TITLES
from nmskeys.exceptions import DocumentLoadError
from nmskeys.models.bindings import SortColumn, SortDirective

from .presenters import BindingBrowserPresenter
from .viewmodels import BindingListVM

logger = logging.getLogger(__name__)

COLUMN_KEYS = ("group", "action", "button")
SORT_ARROWS = {False: " ▲", True: " ▼"}

# Selector value for "every action set"; real names can never be empty
ALL_GROUPS_VALUE = ""


def _column_label(column: SortColumn, sort: SortDirective) -> Text:
    """Column title, with an arrow on the sorted column."""
    label = Text(COLUMN_TITLES[column])
    if column == sort.column:
        label.append(SORT_ARROWS[sort.descending], style="bold")
    return label


def _selector_options(catalogue: List[str]) -> List[Tuple[str, str]]:
    """Selector options; the leading sentinel maps to the empty value."""
    return [(ALL_GROUPS_SENTINEL, ALL_GROUPS_VALUE), *((label, label) for label in catalogue[1:])]


class BindingBrowser(App[None]):
    """Interactive key binding viewer."""

    TITLE = "NMS Keybindings View"

    BINDINGS = [
        # Plain letters belong to the filter inputs
        ("escape", "clear_filters", "Clear Filters"),
        ("ctrl+r", "apply_filters", "Apply Filters"),
        ("ctrl+q", "quit", "Quit"),
    ]

    CSS = """
    #filter-bar {
        height: 3;
        padding: 0 1;
    }

    #filter-set {
        width: 28;
    }

    #filter-action, #filter-button {
        width: 1fr;
    }

    #binding-table {
        height: 1fr;
    }

    #status-bar {
        height: 1;
        background: $boost;
        padding: 0 1;
    }
    """

    def __init__(self, settings_file: Optional[Path] = None, *, remember_dir: bool = True):
        super().__init__()
        self.settings_file = settings_file
        self.presenter = BindingBrowserPresenter(
            self._on_list_update, remember_dir=remember_dir
        )
        self.vm = BindingListVM()
        self.load_error: Optional[str] = None
        self._catalogue: List[str] = [ALL_GROUPS_SENTINEL]

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="filter-bar"):
            yield Select(
                [(ALL_GROUPS_SENTINEL, ALL_GROUPS_VALUE)],
                allow_blank=False,
                value=ALL_GROUPS_VALUE,
                id="filter-set",
            )
            yield Input(placeholder="Action (space separated)", id="filter-action")
            yield Input(placeholder="Button (space separated)", id="filter-button")
            yield Button("Apply Filters", id="apply-filters", variant="primary")
            yield Button("Clear Filters", id="clear-filters")
        yield DataTable(id="binding-table", cursor_type="row", zebra_stripes=True)
        yield Static("", id="status-bar")
        yield Footer()

    def on_mount(self) -> None:
        if self.settings_file is not None:
            self.load(self.settings_file)
        else:
            self.presenter.refresh()

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, path: Path) -> bool:
        """Load a settings file; errors are reported, not raised."""
        self.load_error = None
        try:
            self.presenter.load_file(path)
        except DocumentLoadError as e:
            logger.warning(f"Failed to load {path}: {e}")
            self.load_error = str(e)
            self.notify(
                str(e),
                title="We had a small problem opening that file",
                severity="error",
            )
            self._set_status(f"[red]{escape(str(e))}[/red]")
            return False
        self.sub_title = str(path)
        return True

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _on_list_update(self, vm: BindingListVM) -> None:
        self.vm = vm
        self._update_selector(vm)
        self._populate_table(vm)
        self._set_status(vm.status_text)

    def _update_selector(self, vm: BindingListVM) -> None:
        select = self.query_one("#filter-set", Select)
        with select.prevent(Select.Changed):
            if vm.catalogue != self._catalogue:
                self._catalogue = list(vm.catalogue)
                select.set_options(_selector_options(vm.catalogue))
            known = vm.selected_group == ALL_GROUPS_VALUE or vm.selected_group in vm.catalogue[1:]
            if known and select.value != vm.selected_group:
                select.value = vm.selected_group

    def _populate_table(self, vm: BindingListVM) -> None:
        table = self.query_one("#binding-table", DataTable)
        table.clear(columns=True)
        for column, key in zip(SortColumn, COLUMN_KEYS):
            table.add_column(_column_label(column, vm.sort), key=key)
        for index, record in enumerate(vm.rows):
            table.add_row(*(Text(value) for value in record.as_row()), key=str(index))

    def _set_status(self, text: str) -> None:
        self.query_one("#status-bar", Static).update(text)

    # ------------------------------------------------------------------
    # Filtering and sorting
    # ------------------------------------------------------------------

    def action_apply_filters(self) -> None:
        select = self.query_one("#filter-set", Select)
        group = select.value if isinstance(select.value, str) else ALL_GROUPS_VALUE
        self.presenter.set_filters(
            group=group,
            action_text=self.query_one("#filter-action", Input).value,
            button_text=self.query_one("#filter-button", Input).value,
        )

    def action_clear_filters(self) -> None:
        for input_id in ("#filter-action", "#filter-button"):
            filter_input = self.query_one(input_id, Input)
            with filter_input.prevent(Input.Changed):
                filter_input.value = ""
        self.presenter.clear_filters()

    def sort_column(self, column_index: int) -> SortDirective:
        return self.presenter.sort_by(column_index)

    def on_data_table_header_selected(self, event: DataTable.HeaderSelected) -> None:
        event.stop()
        self.sort_column(event.column_index)

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id == "filter-set":
            self.action_apply_filters()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.action_apply_filters()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "apply-filters":
            self.action_apply_filters()
        elif event.button.id == "clear-filters":
            self.action_clear_filters()


def run_browser(settings_file: Optional[Path] = None) -> None:
    """Run the binding browser."""
    BindingBrowser(settings_file).run()
