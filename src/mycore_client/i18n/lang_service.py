"""HTTP client for the MyCoRe locale resource."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from mycore_client.exceptions import TransportError
from mycore_client.http import raise_for_response

logger = logging.getLogger(__name__)

API_PATH = "rsc/locale"

T = TypeVar("T")

_LANGUAGES = TypeAdapter(list[str])
_TRANSLATIONS = TypeAdapter(dict[str, str])


class LangService:
    """Fetches languages and translations from a MyCoRe backend.

    Implements the ``TranslationSource`` protocol.  Every call is a single
    request without retries; failures surface as
    :class:`~mycore_client.exceptions.TransportError` subclasses.

    Usage::

        async with LangService("https://repo.example.org/mir/") as service:
            title = await service.translate("component.mods.title", lang="de")

    Parameters:
        base_url: Root URL of the MyCoRe application.
        client: An existing ``httpx.AsyncClient``.  When omitted the service
            creates its own client and closes it in :meth:`aclose`.
        timeout: Request timeout in seconds for a self-created client.
    """

    __slots__ = ("_base_url", "_client", "_owns_client")

    def __init__(
        self,
        base_url: str | httpx.URL,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._base_url = httpx.URL(str(base_url))
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def get_current_language(self) -> str:
        """Return the backend's current language as an ISO 639 two-letter code."""
        response = await self._get(self._url("language"), "Failed to load current language")
        return response.text

    async def get_languages(self) -> list[str]:
        """Return every language the backend offers."""
        response = await self._get(self._url("languages"), "Failed to load languages")
        return self._parse(response, _LANGUAGES)

    async def translate(self, key: str, lang: str | None = None) -> str:
        """Fetch a single translation.

        Parameters:
            key: The translation key, e.g. ``component.mods.title``.
            lang: Optional language code. None uses the backend default.

        Returns:
            The translated text.
        """
        response = await self._get(
            self._translation_url(key, lang), "Failed to load translation"
        )
        return response.text

    async def get_translations(
        self, prefix: str, lang: str | None = None
    ) -> dict[str, str]:
        """Fetch every translation matching a key prefix.

        Parameters:
            prefix: Key prefix ending in ``*``, e.g. ``component.mods.*``.
            lang: Optional language code. None uses the backend default.

        Returns:
            Mapping of translation key to translated text.
        """
        response = await self._get(
            self._translation_url(prefix, lang), "Failed to load translations"
        )
        return self._parse(response, _TRANSLATIONS)

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this service created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> LangService:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _url(self, path: str | None = None) -> httpx.URL:
        return self._base_url.join(f"{API_PATH}/{path}" if path else API_PATH)

    def _translation_url(self, name: str, lang: str | None) -> httpx.URL:
        return self._url(f"translate/{lang}/{name}" if lang else f"translate/{name}")

    async def _get(self, url: httpx.URL, message: str) -> httpx.Response:
        logger.debug("GET %s", url)
        try:
            response = await self._client.get(url)
        except httpx.HTTPError as e:
            raise TransportError(f"{message}: {e}") from e
        raise_for_response(response, message)
        return response

    @staticmethod
    def _parse(response: httpx.Response, adapter: TypeAdapter[T]) -> T:
        try:
            return adapter.validate_json(response.content)
        except ValidationError as e:
            msg = f"Invalid response body from {response.request.url}"
            raise TransportError(msg, status=response.status_code) from e

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={str(self._base_url)!r})"
