"""Extraction dispatcher: normalises text and binary documents into plain text."""

from __future__ import annotations

import asyncio
import io
import logging
from typing import Any

from pypdf import PdfReader

from ..errors import ExtractionFailureError, InvalidContentTypeError
from ..models import WORD_MIME_TYPES, DocumentFormat
from ..utils.logging_utils import stage_marker, structured_log
from .interfaces import DocumentTextExtractor
from .word_extractor import WordDocumentExtractor

LOG = logging.getLogger(__name__)


def _pdf_to_text(data: bytes) -> tuple[str, int]:
    reader = PdfReader(io.BytesIO(data))
    pages = [page.extract_text() or "" for page in reader.pages]
    return "\n\n".join(pages), len(pages)


class ExtractionDispatcher:
    """Routes content to the extraction capability matching its declared format."""

    def __init__(self, *, word_extractor: DocumentTextExtractor | None = None) -> None:
        self.word_extractor = word_extractor or WordDocumentExtractor()

    async def extract(
        self,
        content: Any,
        format: DocumentFormat | str | None = DocumentFormat.TXT,
    ) -> str:
        if isinstance(content, str):
            return content
        if not isinstance(content, (bytes, bytearray, memoryview)):
            raise InvalidContentTypeError("Invalid content type. Must be string or bytes.")

        data = bytes(content)
        document_format = DocumentFormat.parse(format)
        async with stage_marker(
            LOG, stage="extraction", format=document_format.value, bytes=len(data)
        ) as marker:
            text = await self._extract_binary(data, document_format)
            marker.record(text_length=len(text))
        return text

    async def _extract_binary(self, data: bytes, fmt: DocumentFormat) -> str:
        if fmt is DocumentFormat.TXT:
            return data.decode("utf-8", errors="replace")
        if fmt is DocumentFormat.PDF:
            return await self._extract_pdf(data)
        return await self.word_extractor.extract(
            data,
            mime_type=WORD_MIME_TYPES[fmt],
            preserve_line_breaks=True,
        )

    async def _extract_pdf(self, data: bytes) -> str:
        # A whitespace-only buffer carries no text layer to parse.
        if not data.strip():
            return ""
        try:
            text, pages = await asyncio.to_thread(_pdf_to_text, data)
        except Exception as exc:  # noqa: BLE001 - pypdf raises a wide range of errors
            structured_log(
                LOG,
                logging.ERROR,
                "document_extraction_failed",
                format=DocumentFormat.PDF.value,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            raise ExtractionFailureError(DocumentFormat.PDF.value, str(exc) or type(exc).__name__) from exc
        LOG.debug("pdf_text_extracted", extra={"pages": pages, "text_length": len(text)})
        return text


__all__ = ["ExtractionDispatcher"]
