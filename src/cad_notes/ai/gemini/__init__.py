"""Gemini AI integration package."""

from cad_notes.ai.gemini.client import GeminiClient
from cad_notes.ai.gemini.config import GeminiSettings, get_gemini_settings

__all__ = [
    "GeminiClient",
    "GeminiSettings",
    "get_gemini_settings",
]
