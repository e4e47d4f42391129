"""
Application configuration settings.

Loads configuration from environment variables using pydantic-settings.
Provides a single shared instance for application-wide access.
"""

from typing import List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Loads and stores application configuration from environment variables."""

    # Application
    app_name: str = "Chat Relay API"
    environment: str = "development"
    debug: bool = False

    # HTTP
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: List[str] = ["*"]
    max_body_bytes: int = 1024 * 1024
    static_dir: Optional[str] = None

    # Groq (OpenAI-compatible endpoint)
    groq_api_key: str
    llm_base_url: str = "https://api.groq.com/openai/v1"
    llm_model: str = "llama-3.1-8b-instant"
    llm_temperature: float = 0.45
    llm_max_tokens: int = 900
    llm_top_p: float = 0.9
    llm_timeout_seconds: float = 60.0

    # Conversation
    memory_capacity: int = 6
    enforce_structure: bool = True

    # pydantic-settings configuration:
    # - Load variables from a .env file
    # - Ignore extra variables to avoid validation errors
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("groq_api_key")
    @classmethod
    def _validate_api_key(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("GROQ_API_KEY cannot be empty.")
        return v

    @field_validator("memory_capacity")
    @classmethod
    def _validate_capacity(cls, v: int) -> int:
        if v < 1:
            raise ValueError("MEMORY_CAPACITY must be at least 1.")
        return v


# Singleton settings instance for application-wide use
settings = Settings()
