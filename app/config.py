"""
Configuration settings for the discovery objections backend.
Loads environment variables and provides application-wide settings.
"""
from typing import List, Literal, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Completion endpoint (any OpenAI-compatible /chat/completions API)
    LLM_BASE_URL: str = "https://api.openai.com/v1"
    LLM_API_KEY: str = Field(
        default="",
        validation_alias=AliasChoices("LLM_API_KEY", "OPENAI_API_KEY"),
    )
    LLM_MODEL: str = "gpt-4"
    LLM_TEMPERATURE: float = 0.3  # low temp for consistent legal formatting
    # None = wait for the completion endpoint indefinitely
    LLM_TIMEOUT: Optional[float] = None

    # Output bounds per generation mode (tokens)
    OBJECTIONS_MAX_TOKENS: int = 2000
    ANSWERS_MAX_TOKENS: int = 3000
    COMBINED_MAX_TOKENS: int = 4000

    # "single":   one combined call, split at the section markers
    # "separate": two independent calls (objections, then answers)
    COMBINED_STRATEGY: Literal["single", "separate"] = "single"

    # Upload / download
    MAX_FILE_SIZE: int = 10 * 1024 * 1024  # 10 MB
    DEFAULT_DOCX_FILENAME: str = "objections.docx"

    # Server Configuration
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    ALLOWED_ORIGINS: str = "http://localhost:3000,http://localhost:8000"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    def get_allowed_origins(self) -> List[str]:
        """Parse ALLOWED_ORIGINS string into a list."""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]


# Global settings instance
settings = Settings()
