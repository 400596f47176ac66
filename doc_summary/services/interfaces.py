"""Shared interfaces used across the summarizer services."""

from __future__ import annotations

from typing import Any, Mapping, Protocol

import httpx


class HttpClient(Protocol):
    """Subset of `httpx.AsyncClient` used by the remote backends."""

    async def post(
        self,
        url: str,
        *,
        params: Mapping[str, str] | None = None,
        json: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response: ...


class SummaryProvider(Protocol):
    """A remote AI service able to turn a prompt into a summary."""

    name: str

    async def summarize(self, prompt: str) -> str: ...


class DocumentTextExtractor(Protocol):
    """Capability converting a word-processing document into plain text."""

    async def extract(
        self,
        data: bytes,
        *,
        mime_type: str,
        preserve_line_breaks: bool = True,
    ) -> str: ...


__all__ = ["HttpClient", "SummaryProvider", "DocumentTextExtractor"]
