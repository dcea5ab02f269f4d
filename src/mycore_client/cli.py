"""CLI interface for mycore-client.

Requires the 'cli' extra: pip install mycore-client[cli]
"""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Coroutine, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any, TypeVar

try:
    import typer
    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table
except ImportError:
    print(
        "CLI dependencies not installed. Install with: pip install mycore-client[cli]",
        file=sys.stderr,
    )
    sys.exit(1)

import httpx
from pydantic import ValidationError

from mycore_client import __version__
from mycore_client.cache import JsonFileStorage, MemoryCache, StorageCache
from mycore_client.config import ClientConfig
from mycore_client.exceptions import MyCoReClientError
from mycore_client.i18n import CachedLangService, LangService
from mycore_client.protocols.cache import Cache

app = typer.Typer(
    name="mycore-client",
    help="Client for MyCoRe digital-repository backends.",
    add_completion=False,
)
console = Console()

T = TypeVar("T")

BASE_URL_OPTION = typer.Option(
    ..., "--base-url", "-u", envvar="MYCORE_BASE_URL", help="MyCoRe application URL"
)
LANG_OPTION = typer.Option(None, "--lang", "-l", help="Language code, e.g. 'de'")
CACHE_FILE_OPTION = typer.Option(
    None, "--cache-file", help="JSON file for a persistent translation cache"
)
TTL_OPTION = typer.Option(0, "--ttl", help="Cache time-to-live in seconds (0 = forever)")


@app.callback()
def main(
    version: bool = typer.Option(False, "--version", "-v", help="Show version"),
) -> None:
    if version:
        console.print(f"mycore-client {__version__}")
        raise typer.Exit()


@app.command()
def info() -> None:
    """Show information about the mycore-client installation."""
    table = Table(title="mycore-client info")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Version", __version__)
    table.add_row("Python", sys.version.split()[0])

    for dep_name in ["httpx", "pydantic"]:
        try:
            mod = __import__(dep_name)
            ver = getattr(mod, "__version__", "installed")
            table.add_row(dep_name, str(ver))
        except ImportError:
            table.add_row(dep_name, "[red]not installed[/red]")

    console.print(table)


@app.command()
def translate(
    key: str = typer.Argument(..., help="Translation key"),
    base_url: str = BASE_URL_OPTION,
    lang: str | None = LANG_OPTION,
    cache_file: Path | None = CACHE_FILE_OPTION,  # noqa: B008
    ttl: int = TTL_OPTION,
) -> None:
    """Translate a single key."""
    config = _load_config(base_url=base_url, lang=lang, cache_file=cache_file, cache_ttl=ttl)
    text = _run(_translate(config, key))
    console.print(text, markup=False)


@app.command()
def group(
    prefix: str = typer.Argument(..., help="Key prefix ending in '*'"),
    base_url: str = BASE_URL_OPTION,
    lang: str | None = LANG_OPTION,
    cache_file: Path | None = CACHE_FILE_OPTION,  # noqa: B008
    ttl: int = TTL_OPTION,
) -> None:
    """Show every translation of a prefix group."""
    config = _load_config(base_url=base_url, lang=lang, cache_file=cache_file, cache_ttl=ttl)
    translations = _run(_group(config, prefix))

    table = Table(title=f"Translations for {prefix}")
    table.add_column("Key", style="cyan")
    table.add_column("Text", style="green")
    for key in sorted(translations):
        table.add_row(escape(key), escape(translations[key]))
    console.print(table)


@app.command()
def languages(base_url: str = BASE_URL_OPTION) -> None:
    """List the languages offered by the backend."""
    config = _load_config(base_url=base_url)
    for code in _run(_languages(config)):
        console.print(code)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load_config(**kwargs: object) -> ClientConfig:
    try:
        return ClientConfig.model_validate(kwargs)
    except ValidationError as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
        raise typer.Exit(code=2) from e


def _run(coro: Coroutine[Any, Any, T]) -> T:
    try:
        return asyncio.run(coro)
    except MyCoReClientError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


def _create_client(config: ClientConfig) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=config.timeout)


@contextmanager
def _open_cache(config: ClientConfig) -> Iterator[Cache[str]]:
    """Yield the translation cache; a file cache is written once on exit."""
    if config.cache_file is None:
        yield MemoryCache[str]()
        return
    storage = JsonFileStorage(config.cache_file)
    with storage.batch():
        yield StorageCache[str](storage)


async def _translate(config: ClientConfig, key: str) -> str:
    async with _create_client(config) as client:
        with _open_cache(config) as cache:
            service = CachedLangService(
                LangService(config.base_url, client=client),
                cache,
                ttl=config.cache_ttl,
                lang=config.lang,
            )
            return await service.translate(key)


async def _group(config: ClientConfig, prefix: str) -> dict[str, str]:
    async with _create_client(config) as client:
        with _open_cache(config) as cache:
            service = CachedLangService(
                LangService(config.base_url, client=client),
                cache,
                ttl=config.cache_ttl,
                lang=config.lang,
            )
            return await service.get_translations(prefix)


async def _languages(config: ClientConfig) -> list[str]:
    async with _create_client(config) as client:
        return await LangService(config.base_url, client=client).get_languages()


if __name__ == "__main__":
    app()
