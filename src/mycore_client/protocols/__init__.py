"""Protocol definitions for mycore-client's pluggable parts."""

from .cache import Cache, KeyValueStorage
from .lang import TranslationSource

__all__ = [
    "Cache",
    "KeyValueStorage",
    "TranslationSource",
]
