"""Tests for Gemini API client initialization."""

from unittest.mock import MagicMock, patch

import pytest

from filing_engine.config import Settings
from filing_engine.services.gemini_client import get_fallback_client, get_gemini_client


class TestGeminiClient:
    """Test suite for Gemini client initialization."""

    def test_get_gemini_client_success(self, monkeypatch):
        """Client is built with the configured API key."""
        monkeypatch.setenv("GEMINI_API_KEY", "test-gemini-api-key")

        with patch("filing_engine.services.gemini_client.genai.Client") as mock_client:
            mock_client_instance = MagicMock()
            mock_client.return_value = mock_client_instance

            client = get_gemini_client()

            mock_client.assert_called_once_with(api_key="test-gemini-api-key")
            assert client == mock_client_instance

    def test_get_gemini_client_missing_api_key(self):
        with pytest.raises(ValueError, match="GEMINI_API_KEY not set"):
            get_gemini_client()

    def test_get_gemini_client_blank_api_key(self):
        with pytest.raises(ValueError, match="GEMINI_API_KEY not set"):
            get_gemini_client(Settings(gemini_api_key="   "))


class TestFallbackClient:

    def test_disabled_by_default(self):
        with patch("filing_engine.services.gemini_client.genai.Client") as mock_client:
            assert get_fallback_client(Settings(gemini_api_key="k")) is None
            mock_client.assert_not_called()

    def test_enabled(self):
        settings = Settings(gemini_api_key="k", enable_llm_fallback=True)

        with patch("filing_engine.services.gemini_client.genai.Client") as mock_client:
            client = get_fallback_client(settings)

        mock_client.assert_called_once_with(api_key="k")
        assert client is mock_client.return_value
