"""Application configuration."""

import os

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from joke_board.domain.auth import SessionConfig

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

SESSION_MAX_AGE_SECONDS = 60 * 60 * 24 * 30


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    session_secret: str = Field(min_length=1)
    session_previous_secrets: str | None = None
    session_cookie_name: str = "RJ_session"
    session_max_age_seconds: int = SESSION_MAX_AGE_SECONDS
    supabase_url: str
    supabase_service_key: str
    bcrypt_rounds: int = 12
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("session_secret")
    @classmethod
    def reject_blank_secret(cls, v: str) -> str:
        """Reject a whitespace-only signing secret."""
        if not v.strip():
            raise ValueError("SESSION_SECRET must not be blank")
        return v

    @property
    def is_production(self) -> bool:
        """Return True when running in a production deployment."""
        return self.environment == "production"

    def session_config(self) -> SessionConfig:
        """Build the immutable session configuration for the codec."""
        return SessionConfig(
            secrets=(
                self.session_secret,
                *parse_secret_list(self.session_previous_secrets),
            ),
            cookie_name=self.session_cookie_name,
            max_age_seconds=self.session_max_age_seconds,
            secure=self.is_production,
        )


def parse_secret_list(raw: str | None) -> tuple[str, ...]:
    """Parse a comma separated list of retired signing secrets."""
    if raw is None:
        return ()
    return tuple(chunk.strip() for chunk in raw.split(",") if chunk.strip())
