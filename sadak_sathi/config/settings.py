"""Runtime configuration for the Sadak Sathi dashboard.

Values come from the environment (a local ``.env`` is loaded first):
• SADAK_SHEET_ID / SADAK_*_GID – spreadsheet and tab ids of the live data.
• SHEET_FETCH_TIMEOUT          – seconds before a CSV export request gives up.
• AUTH_LATENCY_SEC             – simulated delay of the mock credential store.
• GEMINI_API_KEY[_N]           – keys for the AI assistant (``API_KEY`` also works).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import List

from dotenv import load_dotenv  # type: ignore

# Load variables from .env if present
load_dotenv()


def _get_multiple_keys(prefix: str) -> List[str]:
    """Extract multiple API keys from environment variables with numbered suffixes."""
    keys = []

    base_key = os.getenv(prefix)
    if base_key:
        keys.append(base_key)

    counter = 1
    while True:
        key = os.getenv(f"{prefix}_{counter}")
        if key:
            keys.append(key)
            counter += 1
        else:
            break

    return keys


def _gemini_keys() -> List[str]:
    keys = _get_multiple_keys("GEMINI_API_KEY")
    legacy = os.getenv("API_KEY")
    if legacy and legacy not in keys:
        keys.append(legacy)
    return keys


@dataclass(frozen=True)
class DashboardSettings:
    """Immutable container for runtime parameters."""

    # --- Spreadsheet ------------------------------------------------------
    spreadsheet_id: str = os.getenv(
        "SADAK_SHEET_ID", "1gfbACf6IkjNhrC_xUDuiFPUyOmgqsuU8mqKVED7Gook"
    )
    road_sheet_gid: str = os.getenv("SADAK_ROAD_GID", "1775100935")
    bridge_sheet_gid: str = os.getenv("SADAK_BRIDGE_GID", "0")
    superadmin_sheet_gid: str = os.getenv("SADAK_SUPERADMIN_GID", "143241838")
    admin_sheet_gid: str = os.getenv("SADAK_ADMIN_GID", "105429813")
    user_sheet_gid: str = os.getenv("SADAK_USER_GID", "1471371842")
    fetch_timeout_sec: float = float(os.getenv("SHEET_FETCH_TIMEOUT", "15"))

    # --- Simulated auth backend -----------------------------------------
    auth_latency_sec: float = float(os.getenv("AUTH_LATENCY_SEC", "0.5"))

    # --- AI assistant -----------------------------------------------------
    gemini_api_keys: List[str] = None  # Populated in __post_init__
    gemini_api_key: str | None = None
    gemini_chat_model: str = os.getenv("GEMINI_CHAT_MODEL", "gemini-2.5-flash")

    def __post_init__(self):
        # Use object.__setattr__ because dataclass is frozen
        if self.gemini_api_keys is None:
            object.__setattr__(self, "gemini_api_keys", _gemini_keys())
        if self.gemini_api_key is None:
            object.__setattr__(
                self,
                "gemini_api_key",
                self.gemini_api_keys[0] if self.gemini_api_keys else None,
            )


# Singleton used by most callers
SETTINGS = DashboardSettings()


def update_from_kwargs(**overrides) -> DashboardSettings:
    """Return a new DashboardSettings with supplied overrides."""

    return replace(SETTINGS, **overrides)
