"""Application-wide configuration loading and validation."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralized environment configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["local", "dev", "prod"] = Field(default="local")
    log_level: str = Field(default="INFO")

    # Signing credentials (every issued token)
    account_sid: str | None = Field(default=None)
    api_key: str | None = Field(default=None, description="API key SID used as the JWT signing key id.")
    api_key_secret: str | None = Field(default=None)
    token_ttl_seconds: int = Field(default=3600, gt=0)

    # Voice tokens
    push_credential_sid_android: str | None = Field(default=None, description="Android FCM push credential.")
    push_credential_sid_sandbox: str | None = Field(default=None, description="iOS APN sandbox push credential.")
    push_credential_sid_production: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "push_credential_sid_production",
            # Older deployments spelled it this way.
            "push_credential_sid_prodcut",
        ),
        description="iOS APN production push credential.",
    )
    app_sid: str | None = Field(default=None, description="TwiML application used for outgoing calls.")
    default_identity: str = Field(default="alice", min_length=1)

    # Call routing
    caller_number: str | None = Field(
        default=None,
        description="Verified number presented as caller id when dialing phone numbers.",
    )
    recording_status_callback_url: str | None = Field(
        default=None,
        description="Notified when a recorded conference finishes recording.",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
