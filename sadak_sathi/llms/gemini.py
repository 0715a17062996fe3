"""Google Gemini client using the official Google AI Python SDK.

Provides chat completions for the road-conditions assistant. Messages use the
OpenAI-style ``{"role", "content"}`` shape; system messages are passed to the
model as its system instruction.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Tuple

from .base import LLMClient
from sadak_sathi.config.settings import SETTINGS

logger = logging.getLogger(__name__)


class GeminiClient(LLMClient):
    """Wrapper for Google Gemini models via the Google AI Python SDK."""

    def __init__(self, api_key: str | None):
        if not api_key:
            raise ValueError("Gemini API key must be provided.")

        try:
            import google.generativeai as genai  # type: ignore
        except ImportError as exc:
            raise RuntimeError(
                "google-generativeai package not installed. "
                "Install with: pip install google-generativeai"
            ) from exc

        genai.configure(api_key=api_key)
        self._genai = genai

    def chat(self, messages: Any, model: str | None = None, **kwargs: Any) -> str:  # type: ignore[override]
        """Send chat messages and return the assistant reply text."""
        if model is None:
            model = SETTINGS.gemini_chat_model

        system_instruction, contents = self._convert_messages(messages)

        generation_config = {}
        if "temperature" in kwargs:
            generation_config["temperature"] = kwargs["temperature"]
        if "max_tokens" in kwargs:
            generation_config["max_output_tokens"] = kwargs["max_tokens"]

        try:
            gemini_model = self._genai.GenerativeModel(
                model, system_instruction=system_instruction or None
            )
            response = gemini_model.generate_content(
                contents,
                generation_config=generation_config if generation_config else None,
            )
            return response.text or ""

        except Exception as e:
            # Re-raise with provider context for better error handling
            error_msg = f"Gemini API error: {e}"
            logger.error(error_msg)
            raise RuntimeError(error_msg) from e

    @staticmethod
    def _convert_messages(
        messages: List[Dict[str, Any]],
    ) -> Tuple[str, List[Dict[str, Any]]]:
        """Split OpenAI-style messages into a system instruction and Gemini contents."""
        system_parts: List[str] = []
        contents: List[Dict[str, Any]] = []

        for msg in messages:
            role = msg.get("role", "user")
            content = msg.get("content", "")
            if role == "system":
                system_parts.append(content)
            elif role == "assistant":
                # Gemini uses "model" instead of "assistant"
                contents.append({"role": "model", "parts": [content]})
            else:
                contents.append({"role": "user", "parts": [content]})

        return "\n\n".join(system_parts), contents
