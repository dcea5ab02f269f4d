"""Shared fixtures for mycore-client tests."""

from __future__ import annotations

import pytest

from mycore_client.exceptions import TransportError


class FakeClock:
    """Manually advanced clock returning epoch milliseconds.

    Lets tests simulate the passage of time without sleeping.
    """

    def __init__(self, start: float = 1_700_000_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        """Move the clock forward by ``seconds``."""
        self.now += seconds * 1000


class FakeTranslationSource:
    """Translation source that serves canned data and records every call.

    Satisfies the TranslationSource protocol without any network access.
    Set ``fail`` to make every call raise :class:`TransportError`.
    """

    def __init__(
        self,
        translations: dict[str, str] | None = None,
        *,
        fail: bool = False,
    ) -> None:
        self.translations: dict[str, str] = dict(translations or {})
        self.fail = fail
        self.calls: list[tuple[str, str, str | None]] = []

    async def translate(self, key: str, lang: str | None = None) -> str:
        self.calls.append(("translate", key, lang))
        if self.fail:
            raise TransportError("Failed to load translation", status=503)
        return self.translations[key]

    async def get_translations(
        self, prefix: str, lang: str | None = None
    ) -> dict[str, str]:
        self.calls.append(("get_translations", prefix, lang))
        if self.fail:
            raise TransportError("Failed to load translations", status=503)
        stem = prefix[:-1]
        return {k: v for k, v in self.translations.items() if k.startswith(stem)}


@pytest.fixture
def clock() -> FakeClock:
    """Return a fresh FakeClock."""
    return FakeClock()


@pytest.fixture
def source() -> FakeTranslationSource:
    """Return a source serving a small ``common.*`` group plus one extra key."""
    return FakeTranslationSource(
        {
            "common.hello": "Hi",
            "common.bye": "Bye",
            "foo": "bar",
        }
    )
