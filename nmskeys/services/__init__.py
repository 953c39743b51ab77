"""Service layer for nmskeys.

- document_loader: read and parse TKGAMESETTINGS.MXML
- extractor: flatten the KeyMapping properties into binding records
- view_filter: filter and sort binding records for display
"""

from .document_loader import load_bindings, load_document, parse_document
from .extractor import ExtractionResult, extract
from .view_filter import apply_view, filter_records, matches, sort_records, split_terms

__all__ = [
    "ExtractionResult",
    "apply_view",
    "extract",
    "filter_records",
    "load_bindings",
    "load_document",
    "matches",
    "parse_document",
    "sort_records",
    "split_terms",
]
