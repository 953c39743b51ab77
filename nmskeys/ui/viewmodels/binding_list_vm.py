"""
ViewModel for the binding list.

A lightweight data transfer object with everything the table, the
action set selector and the status bar need to render.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from nmskeys.config.constants import ALL_GROUPS_SENTINEL
from nmskeys.models.bindings import BindingRecord, SortDirective


@dataclass
class BindingListVM:
    """ViewModel for the binding list."""

    rows: List[BindingRecord] = field(default_factory=list)
    catalogue: List[str] = field(default_factory=lambda: [ALL_GROUPS_SENTINEL])
    selected_group: str = ""  # "" when every action set is shown
    total_count: int = 0
    filtered_count: int = 0
    sort: SortDirective = field(default_factory=SortDirective)
    source_path: Optional[str] = None
    status_text: str = ""
