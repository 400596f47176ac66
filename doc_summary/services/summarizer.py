"""Summarizer: validates input, extracts text, and delegates to a provider backend."""

from __future__ import annotations

from typing import Any

from ..config import AppConfig, get_config
from ..errors import EmptyContentError, InvalidContentTypeError, NoExtractableTextError
from ..logging_setup import request_context
from ..models import DocumentFormat, Provider, SummarizationRequest
from .extraction import ExtractionDispatcher
from .interfaces import HttpClient
from .prompting import build_prompt, log_text_preview
from .providers import create_provider
from .word_extractor import WordDocumentExtractor


class Summarizer:
    """Turns one document into one summary; holds no per-call state."""

    def __init__(
        self,
        config: AppConfig,
        *,
        http_client: HttpClient | None = None,
        dispatcher: ExtractionDispatcher | None = None,
    ) -> None:
        self.config = config
        self.http_client = http_client
        self.dispatcher = dispatcher or ExtractionDispatcher(
            word_extractor=WordDocumentExtractor(antiword_command=config.antiword_command)
        )

    @staticmethod
    def _build_request(
        content: Any,
        provider: Provider | str,
        format: DocumentFormat | str | None,
    ) -> SummarizationRequest:
        resolved = Provider.parse(provider)
        if isinstance(content, str):
            return SummarizationRequest(content=content, provider=resolved)
        if not isinstance(content, (bytes, bytearray, memoryview)):
            raise InvalidContentTypeError("Invalid content type. Must be string or bytes.")
        return SummarizationRequest(
            content=content,
            provider=resolved,
            format=DocumentFormat.parse(format),
        )

    async def summarize(
        self,
        content: Any,
        provider: Provider | str,
        format: DocumentFormat | str | None = DocumentFormat.TXT,
    ) -> str:
        if not content:
            raise EmptyContentError("Content to summarize cannot be empty.")
        # Provider failures surface before any extraction work.
        backend = create_provider(provider, self.config, http_client=self.http_client)
        request = self._build_request(content, provider, format)

        text = await self.dispatcher.extract(request.content, request.format)
        log_text_preview(text, self.config.preview_chars)
        if not text.strip():
            if request.is_binary:
                raise NoExtractableTextError(
                    "No extractable text found in the document. "
                    "Please ensure the document contains readable text."
                )
            raise EmptyContentError("Content to summarize cannot be blank.")

        prompt = build_prompt(
            text,
            max_length=self.config.max_text_length,
            style=self.config.prompt_style,
        )
        return await backend.summarize(prompt.text)


async def summarize(
    content: Any,
    provider: Provider | str,
    format: DocumentFormat | str | None = DocumentFormat.TXT,
    *,
    config: AppConfig | None = None,
    http_client: HttpClient | None = None,
    request_id: str | None = None,
) -> str:
    """Summarise text or a TXT/PDF/DOC/DOCX buffer with the chosen provider.

    `request_id`, when given, is stamped on every JSON log record of the call.
    """
    summarizer = Summarizer(config or get_config(), http_client=http_client)
    if request_id is None:
        return await summarizer.summarize(content, provider, format)
    with request_context(request_id):
        return await summarizer.summarize(content, provider, format)


__all__ = ["Summarizer", "summarize"]
