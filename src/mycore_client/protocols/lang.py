"""Protocol definition for translation sources."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TranslationSource(Protocol):
    """Supplier of raw, uncached localization strings.

    Both methods may raise :class:`~mycore_client.exceptions.TransportError`.
    """

    async def translate(self, key: str, lang: str | None = None) -> str:
        """Fetch the translation of a single key."""
        ...

    async def get_translations(
        self, prefix: str, lang: str | None = None
    ) -> dict[str, str]:
        """Fetch every translation whose key matches ``prefix`` (ending in ``*``)."""
        ...
