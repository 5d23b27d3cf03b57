"""Configuration management using Pydantic Settings."""

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LYRICS_CONTAINER_SELECTOR = '[data-lyrics-container="true"]'


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GENIUSKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    genius_access_token: SecretStr = SecretStr("")
    request_timeout_ms: int = 5000
    timeout_jitter_ms: int = 400
    lyrics_container_selector: str = DEFAULT_LYRICS_CONTAINER_SELECTOR
    api_timeout: int = 15  # seconds

    @field_validator("request_timeout_ms", "api_timeout")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate timeouts are at least 1."""
        if v < 1:
            raise ValueError("timeout must be at least 1")
        return v

    @field_validator("timeout_jitter_ms")
    @classmethod
    def validate_timeout_jitter_ms(cls, v: int) -> int:
        """Validate jitter is not negative."""
        if v < 0:
            raise ValueError("timeout_jitter_ms must not be negative")
        return v

    @field_validator("lyrics_container_selector")
    @classmethod
    def validate_lyrics_container_selector(cls, v: str) -> str:
        """Validate the container selector is not blank."""
        if not v.strip():
            raise ValueError("lyrics_container_selector cannot be empty")
        return v.strip()

    def is_configured(self) -> bool:
        """Check if an access token is set."""
        return bool(self.genius_access_token.get_secret_value())

    def get_access_token(self) -> str:
        """Get the actual token value for API use."""
        return self.genius_access_token.get_secret_value()


settings = Settings()
