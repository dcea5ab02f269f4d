"""Client configuration model."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class ClientConfig(BaseModel):
    """Settings for talking to a MyCoRe backend.

    Parameters:
        base_url: Root URL of the MyCoRe application, e.g.
            ``https://repo.example.org/mir/``.
        timeout: Request timeout in seconds.
        lang: Language code forwarded to translation requests. None lets
            the backend pick its current language.
        cache_ttl: Time-to-live of cached translations in seconds.
            ``0`` means cached translations never expire.
        cache_file: JSON file for a persistent translation cache. None keeps
            the cache in memory.
    """

    base_url: str
    timeout: float = Field(default=10.0, gt=0)
    lang: str | None = None
    cache_ttl: int = Field(default=0, ge=0)
    cache_file: Path | None = None

    @field_validator("base_url")
    @classmethod
    def _ensure_trailing_slash(cls, value: str) -> str:
        """Keep relative endpoint paths below the application root."""
        if not value.strip():
            msg = "base_url must not be empty"
            raise ValueError(msg)
        return value if value.endswith("/") else f"{value}/"
