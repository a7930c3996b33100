# quotedoc/engine/assets.py
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import httpx

from .config import TemplatePaths
from .errors import TemplateLoadError


@dataclass(frozen=True)
class LoadedTemplates:
    """Both partials, fetched once. Only load_templates() builds these, so both are non-empty."""

    quote_template: str
    detailed_item_list: str


def _is_url(location: str) -> bool:
    return location.startswith(("http://", "https://"))


async def fetch_text(location: str, client: httpx.AsyncClient, timeout: float = 10.0) -> str:
    if _is_url(location):
        try:
            r = await client.get(location, timeout=timeout)
            r.raise_for_status()
        except httpx.HTTPError as e:
            raise TemplateLoadError(location, f"{type(e).__name__}: {e}") from e
        text = r.text
    else:
        try:
            text = await asyncio.to_thread(Path(location).read_text, encoding="utf-8")
        except OSError as e:
            raise TemplateLoadError(location, f"{type(e).__name__}: {e}") from e

    if not text or not text.strip():
        raise TemplateLoadError(location, "empty template")
    return text


async def load_templates(
    paths: TemplatePaths,
    *,
    timeout: float = 10.0,
    client: Optional[httpx.AsyncClient] = None,
) -> LoadedTemplates:
    """Fetch the quote partial and the detailed item list partial concurrently."""
    if client is None:
        async with httpx.AsyncClient() as own_client:
            return await load_templates(paths, timeout=timeout, client=own_client)

    quote_template, detailed_item_list = await asyncio.gather(
        fetch_text(paths.quote_template, client, timeout),
        fetch_text(paths.detailed_item_list, client, timeout),
    )
    return LoadedTemplates(quote_template=quote_template, detailed_item_list=detailed_item_list)
