"""
Binding records and the values that drive the filtered view.

BindingRecord, FilterCriteria and SortDirective are immutable values.
SortState is the one mutable piece: it lives in the presentation layer
and turns repeated column selections into a SortDirective.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any


@dataclass(frozen=True)
class BindingRecord:
    """A single (action set, action, button) mapping."""

    group_label: str = ""  # e.g. "FRONTEND"
    action_name: str = ""  # e.g. "BaseBuilding_ToggleWiring"
    button_name: str = ""  # e.g. "KeyQ"

    def value_for(self, column: SortColumn) -> str:
        """Return the value displayed in the given column."""
        if column is SortColumn.GROUP:
            return self.group_label
        if column is SortColumn.ACTION:
            return self.action_name
        return self.button_name

    def as_row(self) -> tuple[str, str, str]:
        return (self.group_label, self.action_name, self.button_name)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "action_set": self.group_label,
            "action": self.action_name,
            "button": self.button_name,
        }


class SortColumn(IntEnum):
    """Table columns, in display order."""

    GROUP = 0
    ACTION = 1
    BUTTON = 2

    @classmethod
    def from_name(cls, name: str) -> SortColumn:
        """Parse a column name as typed on the command line."""
        aliases = {
            "group": cls.GROUP,
            "set": cls.GROUP,
            "actionset": cls.GROUP,
            "action": cls.ACTION,
            "button": cls.BUTTON,
            "key": cls.BUTTON,
        }
        try:
            return aliases[name.strip().lower()]
        except KeyError:
            raise ValueError(
                f"Unknown column '{name}'. Valid columns: group, action, button"
            ) from None


class SortOrder(Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"

    def reversed(self) -> SortOrder:
        if self is SortOrder.ASCENDING:
            return SortOrder.DESCENDING
        return SortOrder.ASCENDING


@dataclass(frozen=True)
class SortDirective:
    """Which column to order by and in which direction."""

    column: SortColumn = SortColumn.GROUP
    order: SortOrder = SortOrder.ASCENDING

    @property
    def descending(self) -> bool:
        return self.order is SortOrder.DESCENDING


@dataclass(frozen=True)
class FilterCriteria:
    """Filter values supplied by the UI for one view refresh.

    An empty group label and empty term tuples mean the corresponding
    predicate is inactive. Any non-empty group label is a real action
    set name, including one spelled "All".
    """

    group_label: str = ""
    action_terms: tuple[str, ...] = ()
    button_terms: tuple[str, ...] = ()

    @classmethod
    def from_text(
        cls,
        group_label: str | None = None,
        action_text: str | None = None,
        button_text: str | None = None,
    ) -> FilterCriteria:
        """Build criteria from raw filter text, splitting terms on whitespace."""
        return cls(
            group_label=(group_label or "").strip(),
            action_terms=tuple((action_text or "").split()),
            button_terms=tuple((button_text or "").split()),
        )

    @property
    def group_active(self) -> bool:
        return bool(self.group_label)

    @property
    def is_empty(self) -> bool:
        return not (self.group_active or self.action_terms or self.button_terms)


class SortState:
    """Sticky sort owned by the presentation layer.

    Selecting the active column flips its direction; selecting another
    column makes it active in ascending order.
    """

    def __init__(self, directive: SortDirective | None = None):
        self.directive = directive or SortDirective()

    @property
    def column(self) -> SortColumn:
        return self.directive.column

    @property
    def order(self) -> SortOrder:
        return self.directive.order

    def select(self, column: SortColumn | int) -> SortDirective:
        """Apply a column click and return the resolved directive."""
        column = SortColumn(column)
        if column == self.directive.column:
            self.directive = SortDirective(column, self.directive.order.reversed())
        else:
            self.directive = SortDirective(column, SortOrder.ASCENDING)
        return self.directive

    def reset(self) -> None:
        self.directive = SortDirective()

    def __repr__(self) -> str:
        return f"SortState({self.directive.column.name}, {self.directive.order.value})"
