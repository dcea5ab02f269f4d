"""Localization: the HTTP translation source and its caching layer."""

from .cached import (
    CachedLangService,
    FallbackTranslation,
    FetchedTranslation,
    fallback_text,
    is_group_marker,
)
from .lang_service import LangService

__all__ = [
    "CachedLangService",
    "FallbackTranslation",
    "FetchedTranslation",
    "LangService",
    "fallback_text",
    "is_group_marker",
]
