"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from photos_api.domain.photos import Principal

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    api_keys: str | None = None
    create_rate_limit: str = "10/minute"
    photos_topic: str = "/photos/websocket"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="PHOTOS_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_api_keys(raw: str | None) -> dict[str, Principal]:
    """Parse ``key=name[:role|role]`` entries into principals keyed by API key."""
    if raw is None:
        return {}
    principals: dict[str, Principal] = {}
    for chunk in raw.split(","):
        entry = chunk.strip()
        if not entry or "=" not in entry:
            continue
        key, _, identity = entry.partition("=")
        name, _, roles_raw = identity.partition(":")
        key = key.strip()
        name = name.strip()
        if not key or not name:
            continue
        roles = frozenset(
            role.strip() for role in roles_raw.split("|") if role.strip()
        )
        principals[key] = Principal(name=name, roles=roles)
    return principals
