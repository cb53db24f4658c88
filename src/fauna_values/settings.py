"""Settings for JSON text encoding."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class WireSettings(BaseSettings):
    """JSON text options, read from `FAUNA_WIRE_*` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FAUNA_WIRE_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    indent: int | None = Field(default=None, ge=0)
    """Indentation for `dumps`; `None` emits compact single-line JSON."""

    sort_keys: bool = False
    """Sort object keys in `dumps` output."""

    ensure_ascii: bool = False
    """Escape non-ASCII characters in `dumps` output."""


@lru_cache
def get_settings() -> WireSettings:
    """Get cached settings instance."""
    return WireSettings()
