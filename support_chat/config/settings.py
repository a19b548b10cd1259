"""
Configuration settings for the ShopEase support chat.

Uses pydantic-settings for type-safe configuration with environment variable support.
"""

from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_MODEL_PRIORITY = [
    "gemini-2.5-flash-lite",
    "gemini-2.5-flash-tts",
    "gemini-2.5-flash",
    "gemini-3-flash",
    "gemini-robotics-er-1.5-preview",
    "gemma-3-12b",
    "gemma-3-1b",
    "gemma-3-27b",
    "gemma-3-2b",
    "gemma-3-4b",
]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SUPPORT_CHAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
        protected_namespaces=(),
    )

    # =========================================================================
    # Database
    # =========================================================================
    database_url: str = Field(
        default="",
        validation_alias=AliasChoices("SUPPORT_CHAT_DATABASE_URL", "DATABASE_URL", "database_url"),
        description="SQLAlchemy async connection string (e.g. postgresql+asyncpg://...)",
    )

    # =========================================================================
    # LLM Configuration
    # =========================================================================
    llm_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("SUPPORT_CHAT_LLM_API_KEY", "GEMINI_API_KEY", "llm_api_key"),
        description="Credential for the upstream LLM API. Empty means mock mode.",
    )
    llm_provider: Literal["openai", "anthropic"] = Field(
        default="openai",
        description="SDK used to reach the upstream models",
    )
    llm_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta/openai/",
        description="Base URL for the OpenAI-compatible endpoint",
    )
    model_priority: list[str] = Field(
        default_factory=lambda: list(DEFAULT_MODEL_PRIORITY),
        description="Model identifiers in trial order",
    )
    model_cooldown_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Suppression window applied to a model after any failure",
    )
    model_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Per-invocation timeout for an upstream model call",
    )
    llm_max_tokens: int = Field(
        default=500,
        description="Maximum tokens for LLM response",
    )
    llm_temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Temperature for LLM generation",
    )

    # =========================================================================
    # Chat Configuration
    # =========================================================================
    history_limit: int = Field(
        default=10,
        ge=0,
        le=50,
        description="Number of recent messages included in the prompt",
    )
    max_message_length: int = Field(
        default=1000,
        ge=1,
        description="Maximum accepted length of a user message",
    )

    # =========================================================================
    # Server
    # =========================================================================
    log_level: str = Field(
        default="INFO",
        description="Root log level",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:8501"],
        description="Origins allowed to call the HTTP API",
    )

    # =========================================================================
    # Helper Properties
    # =========================================================================
    @property
    def has_llm_credentials(self) -> bool:
        """Whether an upstream credential is configured."""
        return bool(self.llm_api_key.strip())


# Global settings instance (lazy loaded)
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global _settings
    _settings = Settings()
    return _settings
