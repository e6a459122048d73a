"""Gemini API client for the classification fallback.

Uses the google-genai SDK. The client is only built when the LLM fallback
is enabled; the rule-based classifiers never need it.
"""

from typing import Optional

from google import genai

from filing_engine.config import Settings, get_settings


def get_gemini_client(settings: Optional[Settings] = None) -> genai.Client:
    """Initialize and return a Gemini API client.

    Raises:
        ValueError: If GEMINI_API_KEY is not set in environment.
    """
    settings = settings or get_settings()

    if not settings.gemini_api_key:
        raise ValueError(
            "GEMINI_API_KEY not set in environment. "
            "Please set this variable in your .env file or environment."
        )

    return genai.Client(api_key=settings.gemini_api_key)


def get_fallback_client(settings: Optional[Settings] = None) -> Optional[genai.Client]:
    """Client for the filing cascade, or None when the fallback is disabled."""
    settings = settings or get_settings()
    if not settings.enable_llm_fallback:
        return None
    return get_gemini_client(settings)
