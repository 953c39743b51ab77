"""
Flatten the key mapping section of a settings document.

The bindings live two levels below the document element:

    <Data template="GcUserSettingsData">
      <Property name="KeyMapping" />
      <Property name="KeyMapping2">
        <Property name="KeyMapping2" value="GcInputActionMapping2.xml">
          <Property name="ActionSet" value="FRONTEND" />
          <Property name="Action" value="BaseBuilding_ToggleWiring" />
          <Property name="Button" value="KeyQ" />
          <Property name="Axis" value="None" />
        </Property>
        ...
      </Property>
    </Data>

Some files carry an empty "KeyMapping" next to the populated
"KeyMapping2", so the first KeyMap* container with children wins.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Iterable, NamedTuple, Optional

from nmskeys.config.constants import (
    ACTION_PROPERTY,
    ACTION_SET_PROPERTY,
    ALL_GROUPS_SENTINEL,
    BUTTON_PROPERTY,
    KEYMAP_PREFIX,
    NAME_ATTRIBUTE,
    VALUE_ATTRIBUTE,
)
from nmskeys.models.bindings import BindingRecord

logger = logging.getLogger(__name__)

PROPERTY_TAG = "Property"


class ExtractionResult(NamedTuple):
    """Binding records plus the action sets seen, in discovery order."""

    records: list[BindingRecord]
    groups: list[str]

    def catalogue(self) -> list[str]:
        """Group choices for a filter selector, led by the "All" sentinel."""
        return [ALL_GROUPS_SENTINEL, *self.groups]


def _properties(element: ET.Element) -> Iterable[ET.Element]:
    return element.iterfind(PROPERTY_TAG)


def find_keymap_container(root: ET.Element) -> Optional[ET.Element]:
    """Return the first top-level KeyMap* property that has children."""
    container = None
    for prop in _properties(root):
        name = prop.get(NAME_ATTRIBUTE, "")
        if not name.startswith(KEYMAP_PREFIX) or len(prop) == 0:
            continue
        if container is None:
            container = prop
            logger.debug(f"Using key map container '{name}' ({len(prop)} entries)")
        else:
            logger.debug(f"Ignoring additional key map container '{name}'")
    return container


def _child_value(candidate: ET.Element, property_name: str) -> str:
    """Value of the first direct Property child named ``property_name``."""
    for prop in _properties(candidate):
        if prop.get(NAME_ATTRIBUTE) == property_name:
            return prop.get(VALUE_ATTRIBUTE, "")
    return ""


def read_binding(candidate: ET.Element) -> BindingRecord:
    """Build a record from one binding element; missing fields stay empty."""
    return BindingRecord(
        group_label=_child_value(candidate, ACTION_SET_PROPERTY),
        action_name=_child_value(candidate, ACTION_PROPERTY),
        button_name=_child_value(candidate, BUTTON_PROPERTY),
    )


def extract(root: ET.Element) -> ExtractionResult:
    """Extract the key bindings from a parsed settings document.

    Only bindings with a button assigned are kept. Returns empty results
    when the document has no populated KeyMap* container.
    """
    container = find_keymap_container(root)
    if container is None:
        logger.info("No populated key map container found")
        return ExtractionResult([], [])

    records: list[BindingRecord] = []
    groups: list[str] = []
    seen: set[str] = set()
    dropped = 0

    for candidate in container:
        record = read_binding(candidate)
        if not record.button_name:
            dropped += 1
            continue

        if record.group_label and record.group_label not in seen:
            seen.add(record.group_label)
            groups.append(record.group_label)
        records.append(record)

    if dropped:
        logger.debug(f"Skipped {dropped} bindings without a button")
    logger.info(f"Extracted {len(records)} bindings in {len(groups)} action sets")
    return ExtractionResult(records, groups)
