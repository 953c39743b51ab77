"""Factories for settings documents and binding records used in tests."""

from typing import Iterable, List, Optional, Tuple
from xml.sax.saxutils import quoteattr

from nmskeys.models.bindings import BindingRecord

# (action set, action, button); None leaves the property out entirely
BindingSpec = Tuple[Optional[str], Optional[str], Optional[str]]

SCENARIO_BINDINGS: List[BindingSpec] = [
    ("FRONTEND", "ToggleMap", "KeyM"),
    ("FRONTEND", "Pause", ""),
    ("SHIP", "Boost", "KeyW"),
]


def make_binding_xml(binding: BindingSpec, entry_name: str = "KeyMapping2") -> str:
    """Render one binding entry the way the game writes it."""
    lines = [f'    <Property name="{entry_name}" value="GcInputActionMapping2.xml">']
    for prop_name, value in zip(("ActionSet", "Action", "Button"), binding):
        if value is not None:
            lines.append(f'      <Property name="{prop_name}" value={quoteattr(value)} />')
    lines.append('      <Property name="Axis" value="None" />')
    lines.append("    </Property>")
    return "\n".join(lines)


def make_settings_xml(
    bindings: Iterable[BindingSpec] = (),
    container: str = "KeyMapping2",
    empty_sibling: bool = True,
    extra: str = "",
) -> str:
    """Build a TKGAMESETTINGS.MXML document."""
    body = "\n".join(make_binding_xml(binding, container) for binding in bindings)
    parts = ['<?xml version="1.0" encoding="utf-8"?>', '<Data template="GcUserSettingsData">']
    parts.append('  <Property name="Version" value="42" />')
    if empty_sibling:
        parts.append('  <Property name="KeyMapping" />')
    if body:
        parts.append(f'  <Property name="{container}">\n{body}\n  </Property>')
    if extra:
        parts.append(extra)
    parts.append("</Data>")
    return "\n".join(parts)


def make_record(group: str = "FRONTEND", action: str = "Action", button: str = "KeyA") -> BindingRecord:
    return BindingRecord(group_label=group, action_name=action, button_name=button)
