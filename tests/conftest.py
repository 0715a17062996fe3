from __future__ import annotations

from typing import Dict, List

import pytest

from sadak_sathi.auth.users import UserStore

ROAD_CSV = (
    "id,HighwayName,Section,Status,Cause,Contact\n"
    "1,Prithvi Highway,Naubise-Mugling,Blocked,Landslide,9800000001\n"
    ",Araniko Highway,Dhulikhel-Kodari,One-lane,Road widening,9800000002\n"
    "\n"
    "3,BP Highway,Sindhuli-Bardibas,Resumed,,9800000003\n"
)

BRIDGE_CSV = (
    '"id","BridgeName","Location","Status","Cause","Contact"\n'
    '"b7","Karnali Bridge","Chisapani","Blocked","Flood damage","9800000004"\n'
)


class FakeResponse:
    def __init__(self, text: str = "", status_code: int = 200):
        self.text = text
        self.status_code = status_code

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400


class FakeSession:
    """Stands in for ``requests``; serves CSV by the ``gid`` in the URL."""

    def __init__(self, sheets: Dict[str, FakeResponse]):
        self.sheets = sheets
        self.calls: List[dict] = []

    def get(self, url: str, timeout=None):
        self.calls.append({"url": url, "timeout": timeout})
        gid = url.rsplit("gid=", 1)[1]
        return self.sheets.get(gid, FakeResponse("", 404))


class FakeLLM:
    def __init__(self, reply: str = "All clear.", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls: List[list] = []

    def chat(self, messages, **kwargs):
        self.calls.append(messages)
        if self.error:
            raise self.error
        return self.reply


@pytest.fixture
def store() -> UserStore:
    return UserStore(latency_sec=0)


@pytest.fixture
def road_records() -> List[dict]:
    return [
        {"type": "Road", "name": "Prithvi Highway", "Status": "Blocked", "unique_id": "road-1"},
        {"type": "Road", "name": "Araniko Highway", "Status": "One-lane", "unique_id": "road-1b"},
        {"type": "Bridge", "name": "Karnali Bridge", "Status": "resumed", "unique_id": "bridge-b7"},
        {"type": "Road", "name": None, "Status": "", "unique_id": "road-4"},
    ]
