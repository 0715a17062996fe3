"""In-memory model behind the settings panel.

Super admins can change the page colour, toggle the AI assistant and keep
lists of named API keys and spreadsheet ids. Nothing is persisted; the object
lives in the Streamlit session.
"""
from __future__ import annotations

import re
import time
from dataclasses import dataclass, field
from typing import List, Optional

HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")
SECRET_MASK = "••••••••"


@dataclass
class Credential:
    """A named secret or identifier entered in the settings panel."""
    id: int
    name: str
    value: str

    def display_value(self, masked: bool) -> str:
        """Text shown in the settings table; secrets never leave the server."""
        return SECRET_MASK if masked else self.value


def _timestamp_ms() -> int:
    return int(time.time() * 1000)


def _next_id(items: List[Credential]) -> int:
    """Millisecond timestamp, bumped past any id already in *items*."""
    candidate = _timestamp_ms()
    taken = {item.id for item in items}
    while candidate in taken:
        candidate += 1
    return candidate


def _add(items: List[Credential], name: str, value: str) -> Optional[Credential]:
    if not (name or "").strip() or not (value or "").strip():
        return None
    credential = Credential(id=_next_id(items), name=name.strip(), value=value.strip())
    items.append(credential)
    return credential


def _remove(items: List[Credential], credential_id: int) -> bool:
    before = len(items)
    items[:] = [item for item in items if item.id != credential_id]
    return len(items) != before


@dataclass
class AppSettings:
    background_color: str = "#FFFFFF"
    api_keys: List[Credential] = field(default_factory=list)
    sheet_ids: List[Credential] = field(default_factory=list)
    is_chat_enabled: bool = True

    def set_background_color(self, color: str) -> None:
        if not HEX_COLOR.match(color or ""):
            raise ValueError(f"Expected a #RRGGBB colour, got {color!r}")
        self.background_color = color

    def add_api_key(self, name: str, value: str) -> Optional[Credential]:
        """Store a named API key; blank name or value is ignored."""
        return _add(self.api_keys, name, value)

    def remove_api_key(self, credential_id: int) -> bool:
        return _remove(self.api_keys, credential_id)

    def add_sheet_id(self, name: str, value: str) -> Optional[Credential]:
        """Store a named spreadsheet id; blank name or value is ignored."""
        return _add(self.sheet_ids, name, value)

    def remove_sheet_id(self, credential_id: int) -> bool:
        return _remove(self.sheet_ids, credential_id)

    def api_key_for(self, name: str) -> Optional[str]:
        """Value of the first API key called *name* (case-insensitive)."""
        wanted = name.strip().lower()
        for credential in self.api_keys:
            if credential.name.lower() == wanted:
                return credential.value
        return None
