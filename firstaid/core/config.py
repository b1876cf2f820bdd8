"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application environment
    env: Literal["dev", "test", "staging", "prod"] = "dev"

    # Logging
    log_level: str = "INFO"

    # Languages
    default_language: str = "en"
    supported_languages: list[str] = ["en", "hi"]

    # Chat classification
    trigger_ruleset: str = "chat-triggers-v1.0.0.yaml"
    screening_recency_days: int = 60
    chat_history_window: int = 10
    chat_max_message_length: int = 1000

    # CORS (dev only)
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:8080"]

    # Safety banner configuration (shown alongside crisis responses)
    safety_banner_text: str = (
        "If you are in immediate danger or thinking about harming yourself, "
        "please contact your local emergency services or a crisis helpline now. "
        "In India you can call Tele-MANAS on 14416 (free, 24/7)."
    )
    safety_banner_enabled: bool = True

    @property
    def is_dev(self) -> bool:
        """Check if running in development mode."""
        return self.env == "dev"

    @property
    def is_prod(self) -> bool:
        """Check if running in production mode."""
        return self.env == "prod"

    def resolve_language(self, language: str | None) -> str:
        """Return the language if supported, otherwise the default."""
        if language and language in self.supported_languages:
            return language
        return self.default_language


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
