from .base import LLMClient, get_client  # noqa: F401
from .gemini import GeminiClient  # noqa: F401

__all__ = [
    "LLMClient",
    "GeminiClient",
    "get_client",
]
