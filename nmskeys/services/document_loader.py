"""Read TKGAMESETTINGS.MXML into an element tree."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from nmskeys.exceptions import DocumentLoadError

from .extractor import ExtractionResult, extract

logger = logging.getLogger(__name__)


def parse_document(text: str, *, source: str | None = None) -> ET.Element:
    """Parse MXML text and return the document element.

    Raises:
        DocumentLoadError: If the text is not well-formed XML
    """
    try:
        return ET.fromstring(text)
    except ET.ParseError as e:
        raise DocumentLoadError(f"Not a well-formed settings document: {e}", path=source) from e


def load_document(path: Path | str) -> ET.Element:
    """Read and parse a settings file.

    Raises:
        DocumentLoadError: If the file is missing, unreadable or malformed
    """
    path = Path(path).expanduser()
    if not path.is_file():
        raise DocumentLoadError("Settings file not found", path=str(path))

    try:
        tree = ET.parse(path)
    except ET.ParseError as e:
        raise DocumentLoadError(f"Not a well-formed settings document: {e}", path=str(path)) from e
    except OSError as e:
        raise DocumentLoadError(f"Could not read settings file: {e.strerror or e}", path=str(path)) from e

    logger.debug(f"Parsed {path}")
    return tree.getroot()


def load_bindings(path: Path | str) -> ExtractionResult:
    """Load a settings file and extract its key bindings."""
    return extract(load_document(path))
