"""Example: Cached Translations. Run with: python examples/translation_cache.py

Demonstrates CachedLangService on top of both cache stores:

* MemoryCache keeps translations for the lifetime of the process.
* StorageCache over a JsonFileStorage keeps them across restarts.

A stand-in translation source is used so the example runs offline.  Swap
it for ``LangService("https://your-repo/mir/")`` to talk to a real backend.
"""

from __future__ import annotations

import asyncio
import logging
import tempfile
from pathlib import Path

from mycore_client import (
    CachedLangService,
    JsonFileStorage,
    MemoryCache,
    StorageCache,
    TransportError,
)

# ---------------------------------------------------------------------------
# Offline translation source
# ---------------------------------------------------------------------------


class DemoSource:
    """Serves a handful of German labels and counts round-trips."""

    def __init__(self) -> None:
        self.round_trips = 0
        self._texts = {
            "component.mods.genre.article": "Artikel",
            "component.mods.genre.book": "Buch",
            "component.mods.genre.thesis": "Abschlussarbeit",
            "mir.welcome": "Willkommen",
        }

    async def translate(self, key: str, lang: str | None = None) -> str:
        self.round_trips += 1
        if key not in self._texts:
            raise TransportError(f"No translation for {key}", status=404)
        return self._texts[key]

    async def get_translations(self, prefix: str, lang: str | None = None) -> dict[str, str]:
        self.round_trips += 1
        stem = prefix[:-1]
        return {k: v for k, v in self._texts.items() if k.startswith(stem)}


async def main() -> None:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    # ------------------------------------------------------------------
    # 1. In-memory cache
    # ------------------------------------------------------------------
    source = DemoSource()
    i18n = CachedLangService(source, MemoryCache[str](), ttl=3600, lang="de")

    genres = await i18n.get_translations("component.mods.genre.*")
    print("Genres:", genres)
    print("Book (from group cache):", await i18n.translate("component.mods.genre.book"))
    print("Missing key renders as:", await i18n.translate("mir.unknown"))
    print("Round-trips so far:", source.round_trips)

    # ------------------------------------------------------------------
    # 2. Persistent cache shared by two "processes"
    # ------------------------------------------------------------------
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "translations.json"

        first = DemoSource()
        await CachedLangService(first, StorageCache[str](JsonFileStorage(path))).translate(
            "mir.welcome"
        )

        second = DemoSource()
        restarted = CachedLangService(second, StorageCache[str](JsonFileStorage(path)))
        print("After restart:", await restarted.translate("mir.welcome"))
        print("Round-trips after restart:", second.round_trips)


if __name__ == "__main__":
    asyncio.run(main())
