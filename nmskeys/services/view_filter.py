"""
Filter and sort binding records for display.

Everything here is a pure function of its arguments: the caller owns
the record list and the sort state and gets a new list back.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from nmskeys.models.bindings import BindingRecord, FilterCriteria, SortDirective


def split_terms(text: str | None) -> tuple[str, ...]:
    """Split filter text on whitespace, dropping empty fragments."""
    return tuple((text or "").split())


def _contains_any(value: str, terms: Sequence[str]) -> bool:
    folded = value.casefold()
    return any(term.casefold() in folded for term in terms if term)


def matches(record: BindingRecord, criteria: FilterCriteria) -> bool:
    """Check a record against every active predicate.

    Fields are ANDed together; terms within a field are ORed.
    """
    if criteria.group_active:
        if record.group_label.casefold() != criteria.group_label.casefold():
            return False
    if criteria.action_terms and not _contains_any(record.action_name, criteria.action_terms):
        return False
    if criteria.button_terms and not _contains_any(record.button_name, criteria.button_terms):
        return False
    return True


def filter_records(
    records: Iterable[BindingRecord], criteria: FilterCriteria
) -> list[BindingRecord]:
    """Return the records passing ``criteria``, in their original order."""
    if criteria.is_empty:
        return list(records)
    return [record for record in records if matches(record, criteria)]


def sort_records(
    records: Iterable[BindingRecord], directive: SortDirective
) -> list[BindingRecord]:
    """Stable case-insensitive sort on the directive's column.

    sorted() keeps equal keys in input order even with reverse=True.
    """
    column = directive.column
    return sorted(
        records,
        key=lambda record: record.value_for(column).casefold(),
        reverse=directive.descending,
    )


def apply_view(
    records: Iterable[BindingRecord],
    criteria: FilterCriteria,
    directive: SortDirective,
) -> list[BindingRecord]:
    """Filter then sort ``records`` for display."""
    return sort_records(filter_records(records, criteria), directive)
