"""
Presenter for the BindingBrowser app.

Owns the presentation state the pipeline itself does not keep:

- the loaded record collection and its action set catalogue
- the current filter text and selected action set
- the sticky sort (column clicks toggle / reset it)

Every change runs the records through ``apply_view`` and hands a
BindingListVM to the view callback.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List, Optional

from nmskeys.config.constants import ALL_GROUPS_SENTINEL
from nmskeys.config.settings import remember_settings_dir
from nmskeys.models.bindings import (
    BindingRecord,
    FilterCriteria,
    SortColumn,
    SortDirective,
    SortState,
)
from nmskeys.services.document_loader import load_bindings
from nmskeys.services.view_filter import apply_view

from ..viewmodels import BindingListVM

logger = logging.getLogger(__name__)


class BindingBrowserPresenter:
    """Presenter for binding browser state."""

    def __init__(
        self,
        on_list_update: Callable[[BindingListVM], None],
        *,
        remember_dir: bool = True,
    ):
        """Initialize the presenter.

        Args:
            on_list_update: Callback when the visible list changes
            remember_dir: Persist the directory of each loaded file
        """
        self.on_list_update = on_list_update
        self.remember_dir = remember_dir

        self._records: List[BindingRecord] = []
        self._catalogue: List[str] = [ALL_GROUPS_SENTINEL]
        self._visible: List[BindingRecord] = []
        self._source_path: Optional[Path] = None

        # "" means no action set filter
        self._selected_group: str = ""
        self._action_text: str = ""
        self._button_text: str = ""
        self.sort_state = SortState()

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def records(self) -> List[BindingRecord]:
        return list(self._records)

    @property
    def catalogue(self) -> List[str]:
        return list(self._catalogue)

    @property
    def visible(self) -> List[BindingRecord]:
        return list(self._visible)

    @property
    def source_path(self) -> Optional[Path]:
        return self._source_path

    @property
    def criteria(self) -> FilterCriteria:
        return FilterCriteria.from_text(
            self._selected_group, self._action_text, self._button_text
        )

    @property
    def sort(self) -> SortDirective:
        return self.sort_state.directive

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_file(self, path: Path | str) -> None:
        """Load a settings file, replacing the current collection.

        The view is cleared before the load starts so a failed load
        leaves it empty.

        Raises:
            DocumentLoadError: If the file cannot be read or parsed
        """
        path = Path(path).expanduser()
        self.set_bindings([], [], source_path=None)

        result = load_bindings(path)
        if self.remember_dir:
            remember_settings_dir(path)
        logger.info(f"Loaded {len(result.records)} bindings from {path}")
        self.set_bindings(result.records, result.groups, source_path=path)

    def set_bindings(
        self,
        records: List[BindingRecord],
        groups: List[str],
        *,
        source_path: Optional[Path] = None,
    ) -> None:
        """Replace records and catalogue together and refresh the view."""
        self._records = list(records)
        self._catalogue = [ALL_GROUPS_SENTINEL, *groups]
        self._selected_group = ""
        self._source_path = source_path
        self.refresh()

    # ------------------------------------------------------------------
    # Filtering and sorting
    # ------------------------------------------------------------------

    def set_filters(
        self,
        group: Optional[str] = None,
        action_text: Optional[str] = None,
        button_text: Optional[str] = None,
    ) -> None:
        """Update filter values and refresh.

        None leaves a value unchanged; an empty group selects every
        action set.
        """
        if group is not None:
            self._selected_group = group.strip()
        if action_text is not None:
            self._action_text = action_text
        if button_text is not None:
            self._button_text = button_text
        self.refresh()

    def clear_filters(self) -> None:
        """Reset every filter; the sort is kept."""
        self._selected_group = ""
        self._action_text = ""
        self._button_text = ""
        self.refresh()

    def sort_by(self, column: SortColumn | int) -> SortDirective:
        """Handle a column click and refresh."""
        directive = self.sort_state.select(column)
        logger.debug(f"Sorting by {directive.column.name} {directive.order.value}")
        self.refresh()
        return directive

    def refresh(self) -> None:
        """Re-run filter and sort and notify the view."""
        self._visible = apply_view(self._records, self.criteria, self.sort)
        self.on_list_update(self._create_list_vm())

    def _create_list_vm(self) -> BindingListVM:
        """Create current list ViewModel."""
        total = len(self._records)
        shown = len(self._visible)

        if self._source_path is None and not self._records:
            status_text = "No settings file loaded"
        elif shown == total:
            status_text = f"{total} bindings"
        else:
            status_text = f"{shown}/{total} bindings"

        return BindingListVM(
            rows=list(self._visible),
            catalogue=list(self._catalogue),
            selected_group=self._selected_group,
            total_count=total,
            filtered_count=shown,
            sort=self.sort,
            source_path=str(self._source_path) if self._source_path else None,
            status_text=status_text,
        )
