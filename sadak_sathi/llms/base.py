from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List


class LLMClient(ABC):
    """Abstract interface for language model providers (chat focus)."""

    @abstractmethod
    def chat(self, messages: List[Dict[str, Any]], **kwargs: Any) -> str:  # noqa: D401
        """Send chat messages and return the assistant reply text."""


# ---------------------------------------------------------------------------
# Factory helper
# ---------------------------------------------------------------------------

def get_client(provider: str, api_key: str | None = None) -> "LLMClient":
    """Return an LLMClient for *provider* (only 'gemini' is available)."""

    provider = provider.lower().strip()
    if provider == "gemini":
        from .gemini import GeminiClient  # local import to avoid heavy deps

        return GeminiClient(api_key=api_key)

    raise ValueError(f"Unknown LLM provider: {provider}")
