"""Configuration management for the document filing service.

This module uses Pydantic Settings to load configuration from environment
variables. All settings are validated at startup to catch configuration
errors early.
"""

import logging
from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    The rule-based classifiers need no configuration; the Gemini key is only
    required when the LLM fallback is switched on.
    """

    # Gemini API Configuration
    gemini_api_key: Optional[str] = Field(
        default=None,
        description="Google Gemini API key for the optional classification fallback"
    )
    model_name: str = Field(
        default="gemini-3-flash-preview",
        description="Gemini model used for the classification fallback"
    )

    # Feature Flags
    enable_llm_fallback: bool = Field(
        default=False,
        description="Ask Gemini when filename and content rules both miss"
    )

    # Filing thresholds
    review_confidence_threshold: float = Field(
        default=0.8,
        description="Decisions below this confidence are flagged for review"
    )
    checklist_match_threshold: float = Field(
        default=0.8,
        description="Minimum filename match score to count a checklist requirement as satisfied"
    )

    # HTTP layer
    trusted_proxies: str = Field(
        default="",
        description="Comma-separated proxy IPs whose X-Forwarded-For header is trusted"
    )
    log_level: str = Field(default="INFO", description="Root log level")

    # Model configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        protected_namespaces=(),
    )

    @field_validator("gemini_api_key")
    @classmethod
    def validate_gemini_api_key(cls, v: Optional[str]) -> Optional[str]:
        """Treat a blank key as unset."""
        if v is None or not v.strip():
            return None
        return v.strip()

    @field_validator("model_name")
    @classmethod
    def validate_model_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("MODEL_NAME must not be empty")
        return v.strip()

    @field_validator("review_confidence_threshold", "checklist_match_threshold")
    @classmethod
    def validate_threshold(cls, v: float) -> float:
        """Thresholds are compared against confidences and scores in [0, 1]."""
        if not 0.0 <= v <= 1.0:
            raise ValueError(f"Threshold must be between 0.0 and 1.0 (got: {v})")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = (v or "").strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)} (got: {v})")
        return level

    @model_validator(mode="after")
    def validate_llm_fallback(self) -> "Settings":
        if self.enable_llm_fallback and not self.gemini_api_key:
            raise ValueError(
                "ENABLE_LLM_FALLBACK requires GEMINI_API_KEY. "
                "Get your API key from https://ai.google.dev/"
            )
        return self

    @property
    def trusted_proxy_list(self) -> List[str]:
        return [ip.strip() for ip in self.trusted_proxies.split(",") if ip.strip()]

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


@lru_cache
def get_settings() -> Settings:
    """Get cached Settings instance.

    This function uses lru_cache to ensure settings are loaded only once
    and reused across the application lifetime.

    Returns:
        Settings: Validated application settings

    Raises:
        ValueError: If environment variables are invalid
    """
    return Settings()
