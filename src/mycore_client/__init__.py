"""mycore-client: Python client for MyCoRe digital-repository backends.

Caching:
    MemoryCache, StorageCache, InMemoryStorage, JsonFileStorage, CacheEntry

Localization:
    LangService, CachedLangService, FetchedTranslation, FallbackTranslation

Protocols (extension points):
    Cache, KeyValueStorage, TranslationSource

Configuration:
    ClientConfig

Exceptions:
    MyCoReClientError, InvalidArgumentError, TransportError,
    UnauthorizedError, PermissionDeniedError, ResourceNotFoundError,
    DeserializationError
"""

from importlib.metadata import PackageNotFoundError, version

from mycore_client.cache import InMemoryStorage, JsonFileStorage, MemoryCache, StorageCache
from mycore_client.config import ClientConfig
from mycore_client.exceptions import (
    DeserializationError,
    InvalidArgumentError,
    MyCoReClientError,
    PermissionDeniedError,
    ResourceNotFoundError,
    TransportError,
    UnauthorizedError,
)
from mycore_client.i18n import (
    CachedLangService,
    FallbackTranslation,
    FetchedTranslation,
    LangService,
)
from mycore_client.models import CacheEntry
from mycore_client.protocols import Cache, KeyValueStorage, TranslationSource

try:
    __version__ = version("mycore-client")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "Cache",
    "CacheEntry",
    "CachedLangService",
    "ClientConfig",
    "DeserializationError",
    "FallbackTranslation",
    "FetchedTranslation",
    "InMemoryStorage",
    "InvalidArgumentError",
    "JsonFileStorage",
    "KeyValueStorage",
    "LangService",
    "MemoryCache",
    "MyCoReClientError",
    "PermissionDeniedError",
    "ResourceNotFoundError",
    "StorageCache",
    "TransportError",
    "TranslationSource",
    "UnauthorizedError",
    "__version__",
]
