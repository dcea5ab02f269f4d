"""Translation lookups cached per key and per prefix group."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from mycore_client.exceptions import InvalidArgumentError, TransportError
from mycore_client.protocols.cache import Cache
from mycore_client.protocols.lang import TranslationSource

logger = logging.getLogger(__name__)

GROUP_SUFFIX = "*"


def fallback_text(key: str) -> str:
    """Return the placeholder rendered when a translation cannot be fetched."""
    return f"??{key}??"


def is_group_marker(key: str) -> bool:
    """Return True if ``key`` is a group marker rather than a translation."""
    return key.endswith(GROUP_SUFFIX)


@dataclass(frozen=True, slots=True)
class FetchedTranslation:
    """Translation text returned by the source."""

    key: str
    text: str


@dataclass(frozen=True, slots=True)
class FallbackTranslation:
    """Placeholder used because the source failed."""

    key: str
    error: TransportError

    @property
    def text(self) -> str:
        return fallback_text(self.key)


TranslationOutcome = FetchedTranslation | FallbackTranslation


class CachedLangService:
    """Caches single translations and whole prefix groups in one flat cache.

    Single keys are stored under their own name.  After a group such as
    ``component.mods.*`` has been fetched, each member is stored under its
    key and the literal prefix is stored with an empty value as a *group
    marker*.  While the marker is live, the group is answered from the
    cache; once it expires the whole group is fetched again, even if some
    members are still live.

    Concurrent misses for the same key may each hit the source.

    Parameters:
        source: Supplier of uncached translations.
        cache: Cache for translation strings. None disables caching.
        ttl: Time-to-live in seconds for every entry written, markers
            included. ``0`` means entries never expire.
        lang: Language code forwarded to the source. None uses the
            backend default.
    """

    __slots__ = ("_cache", "_lang", "_source", "_ttl")

    def __init__(
        self,
        source: TranslationSource,
        cache: Cache[str] | None = None,
        *,
        ttl: int = 0,
        lang: str | None = None,
    ) -> None:
        if ttl < 0:
            msg = f"ttl must be >= 0, got {ttl}"
            raise ValueError(msg)
        self._source = source
        self._cache = cache
        self._ttl = ttl
        self._lang = lang

    @property
    def cache(self) -> Cache[str] | None:
        return self._cache

    async def translate(self, key: str) -> str:
        """Return the translation of ``key``.

        Never raises for transport failures: the key is rendered as
        ``??key??`` instead and nothing is cached, so the next call retries.

        Raises:
            InvalidArgumentError: If ``key`` ends in ``*``.
        """
        if is_group_marker(key):
            msg = f"Translation key must not end with '{GROUP_SUFFIX}': {key!r}"
            raise InvalidArgumentError(msg)
        if self._cache is None:
            return await self._source.translate(key, self._lang)

        cached = self._cache.get_item(key)
        if cached is not None:
            logger.debug("Translation cache hit for %r", key)
            return cached

        outcome = await self._fetch(key)
        if isinstance(outcome, FallbackTranslation):
            logger.warning("Failed to translate %r: %s", key, outcome.error)
            return outcome.text
        self._cache.set_item(key, outcome.text, self._ttl)
        return outcome.text

    async def get_translations(self, prefix: str) -> dict[str, str]:
        """Return every translation whose key starts with ``prefix`` minus ``*``.

        Transport failures propagate unchanged.

        Raises:
            InvalidArgumentError: If ``prefix`` does not end in ``*``.
        """
        if not is_group_marker(prefix):
            msg = f"Translation prefix must end with '{GROUP_SUFFIX}': {prefix!r}"
            raise InvalidArgumentError(msg)
        if self._cache is None:
            return await self._source.get_translations(prefix, self._lang)

        if self._cache.has_item(prefix):
            logger.debug("Translation group %r served from cache", prefix)
            return self._cached_group(prefix)

        translations = await self._source.get_translations(prefix, self._lang)
        for key, text in translations.items():
            self._cache.set_item(key, text, self._ttl)
        self._cache.set_item(prefix, "", self._ttl)
        logger.debug("Cached %d translations for group %r", len(translations), prefix)
        return translations

    async def _fetch(self, key: str) -> TranslationOutcome:
        try:
            text = await self._source.translate(key, self._lang)
        except TransportError as e:
            return FallbackTranslation(key=key, error=e)
        return FetchedTranslation(key=key, text=text)

    def _cached_group(self, prefix: str) -> dict[str, str]:
        stem = prefix[: -len(GROUP_SUFFIX)]
        return {
            key: text
            for key, text in self._cache.get_all_items().items()
            if key.startswith(stem) and not is_group_marker(key)
        }

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(source={self._source!r}, cache={self._cache!r}, "
            f"ttl={self._ttl}, lang={self._lang!r})"
        )
