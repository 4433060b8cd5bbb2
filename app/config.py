"""Application settings loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strongly typed application configuration."""

    openai_api_key: str | None = Field(default=None, alias="OPENAI_API_KEY")
    chat_model: str = Field(default="gpt-4o-mini", alias="CHAT_MODEL")
    chat_temperature: float = Field(default=0.2, alias="CHAT_TEMPERATURE")
    chat_timeout: float = Field(default=20.0, alias="CHAT_TIMEOUT", description="Seconds")
    refine_enabled: bool = Field(default=True, alias="REFINE_ENABLED")
    max_text_length: int = Field(default=10_000, alias="MAX_TEXT_LENGTH")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    log_level: Literal["debug", "info", "warning", "error", "critical"] = Field(
        default="info", alias="LOG_LEVEL"
    )

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    @property
    def refinement_enabled(self) -> bool:
        """Whether letters are sent to the chat backend for rewriting."""

        return self.refine_enabled and bool(self.openai_api_key)


@lru_cache
def get_settings() -> Settings:
    """Return a cached instance of settings."""

    return Settings()
