"""Conversation state for the AI assistant.

A :class:`ChatSession` owns the message history shown in the chat window and
the LLM client configured with the current road and bridge data. It never
raises into the UI: failures become assistant messages.
"""
from __future__ import annotations

import itertools
import json
import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from sadak_sathi.llms.base import LLMClient
from sadak_sathi.prompts.assistant import build_route_prompt, build_system_instruction

logger = logging.getLogger(__name__)

GREETING = (
    "Hello! I'm Sadak Sathi's AI assistant. "
    "Ask me about the current road and bridge conditions."
)
INIT_FAILED = "Sorry, the AI assistant could not be initialized."
REPLY_FAILED = "Sorry, I encountered an error. Please try again."


@dataclass
class Message:
    id: int
    text: str
    sender: str  # "user" or "ai"
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())
    # Exchanges that never reached the model are not replayed to it
    failed: bool = False


class ChatSession:
    """Chat history plus a client grounded in *records*."""

    def __init__(
        self,
        records: List[Dict[str, Any]],
        client_factory: Callable[[], LLMClient],
        temperature: float = 0.7,
    ):
        self._ids = itertools.count(1)
        self.messages: List[Message] = []
        self.temperature = temperature
        self.client: Optional[LLMClient] = None
        self.system_instruction = ""
        self._add(GREETING, "ai")

        if not records:
            return

        self.system_instruction = build_system_instruction(records)
        try:
            self.client = client_factory()
        except Exception as exc:  # pylint: disable=broad-except
            logger.error("Failed to initialize Gemini AI: %s", exc)
            self._add(INIT_FAILED, "ai")

    @property
    def ready(self) -> bool:
        return self.client is not None

    def _add(self, text: str, sender: str, failed: bool = False) -> Message:
        message = Message(id=next(self._ids), text=text, sender=sender, failed=failed)
        self.messages.append(message)
        return message

    def _history(self) -> List[Dict[str, str]]:
        history = [{"role": "system", "content": self.system_instruction}]
        turns = [m for m in self.messages if not m.failed]
        # Gemini conversations must open with a user turn
        first_user = next(
            (i for i, m in enumerate(turns) if m.sender == "user"), len(turns)
        )
        for message in turns[first_user:]:
            role = "user" if message.sender == "user" else "assistant"
            history.append({"role": role, "content": message.text})
        return history

    def send(self, text: str) -> Optional[Message]:
        """Send *text* and return the assistant's reply message.

        Blank input, or a session without a client, is ignored.
        """
        if not (text or "").strip() or self.client is None:
            return None

        question = self._add(text, "user")
        try:
            reply = self.client.chat(self._history(), temperature=self.temperature)
        except Exception as exc:  # pylint: disable=broad-except
            logger.error("Gemini API error: %s", exc)
            question.failed = True
            return self._add(REPLY_FAILED, "ai", failed=True)
        return self._add(reply, "ai")

    def plan_route(self, origin: str, destination: str) -> Optional[Message]:
        if not origin.strip() or not destination.strip():
            return None
        return self.send(build_route_prompt(origin.strip(), destination.strip()))

    def clear(self) -> None:
        self._ids = itertools.count(1)
        self.messages = []
        self._add(GREETING, "ai")

    def export(self) -> str:
        """JSON document of the conversation for download."""
        return json.dumps(
            {
                "timestamp": datetime.now().isoformat(),
                "messages": [asdict(m) for m in self.messages],
            },
            indent=2,
        )
