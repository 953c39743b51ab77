"""Data models for nmskeys.

- bindings: binding records, filter criteria and sort directives
"""

from .bindings import (
    BindingRecord,
    FilterCriteria,
    SortColumn,
    SortDirective,
    SortOrder,
    SortState,
)

__all__ = [
    "BindingRecord",
    "FilterCriteria",
    "SortColumn",
    "SortDirective",
    "SortOrder",
    "SortState",
]
