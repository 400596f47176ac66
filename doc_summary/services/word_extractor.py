"""Awaitable text extraction for legacy and modern Word documents.

DOCX packages are parsed in-process with python-docx on a worker thread.
Legacy DOC files need the external `antiword` converter, which is spawned as
an asyncio subprocess. Both paths sit behind one `extract()` coroutine and
any failure is reported as `ExtractionFailureError` naming the format.
"""

from __future__ import annotations

import asyncio
import io
import logging
import re
import tempfile
from pathlib import Path
from typing import Awaitable, Callable, Dict

import docx

from ..errors import ExtractionFailureError
from ..models import WORD_MIME_TYPES, DocumentFormat
from ..utils.logging_utils import structured_log

LOG = logging.getLogger(__name__)

_FORMAT_BY_MIME: Dict[str, str] = {mime: fmt.value for fmt, mime in WORD_MIME_TYPES.items()}
_PARAGRAPH_BREAK_RE = re.compile(r"\n\s*\n")
_LINE_BREAK_RE = re.compile(r"[ \t]*\n[ \t]*")


def collapse_line_breaks(text: str) -> str:
    """Join wrapped lines inside each paragraph while keeping paragraph breaks."""
    paragraphs = _PARAGRAPH_BREAK_RE.split(text)
    joined = (_LINE_BREAK_RE.sub(" ", paragraph).strip() for paragraph in paragraphs)
    return "\n\n".join(p for p in joined if p)


def _docx_to_text(data: bytes) -> str:
    document = docx.Document(io.BytesIO(data))
    blocks: list[str] = [paragraph.text for paragraph in document.paragraphs]
    for table in document.tables:
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells]
            line = "\t".join(cell for cell in cells if cell)
            if line:
                blocks.append(line)
    return "\n".join(blocks)


class WordDocumentExtractor:
    """Extracts text from DOC/DOCX buffers identified by MIME type."""

    def __init__(self, *, antiword_command: str = "antiword") -> None:
        self.antiword_command = antiword_command
        self._handlers: Dict[str, Callable[[bytes], Awaitable[str]]] = {
            WORD_MIME_TYPES[DocumentFormat.DOCX]: self._extract_docx,
            WORD_MIME_TYPES[DocumentFormat.DOC]: self._extract_doc,
        }

    async def extract(
        self,
        data: bytes,
        *,
        mime_type: str,
        preserve_line_breaks: bool = True,
    ) -> str:
        fmt = _FORMAT_BY_MIME.get(mime_type, mime_type)
        handler = self._handlers.get(mime_type)
        if handler is None:
            raise ExtractionFailureError(fmt, f"no extractor registered for MIME type {mime_type}")
        try:
            text = await handler(bytes(data))
        except Exception as exc:  # noqa: BLE001 - translated into a domain error
            structured_log(
                LOG,
                logging.ERROR,
                "document_extraction_failed",
                format=fmt,
                mime_type=mime_type,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            raise ExtractionFailureError(fmt, str(exc) or type(exc).__name__) from exc
        if not preserve_line_breaks:
            text = collapse_line_breaks(text)
        return text

    async def _extract_docx(self, data: bytes) -> str:
        return await asyncio.to_thread(_docx_to_text, data)

    async def _extract_doc(self, data: bytes) -> str:
        with tempfile.NamedTemporaryFile(suffix=".doc", delete=False) as handle:
            handle.write(data)
            path = Path(handle.name)
        try:
            try:
                process = await asyncio.create_subprocess_exec(
                    self.antiword_command,
                    str(path),
                    stdout=asyncio.subprocess.PIPE,
                    stderr=asyncio.subprocess.PIPE,
                )
            except FileNotFoundError as exc:
                raise RuntimeError(
                    f"{self.antiword_command} is not installed or not on PATH"
                ) from exc
            try:
                stdout, stderr = await process.communicate()
            except asyncio.CancelledError:
                # The converter must be gone before its input file is removed.
                process.kill()
                await process.wait()
                raise
        finally:
            path.unlink(missing_ok=True)
        if process.returncode != 0:
            detail = stderr.decode("utf-8", errors="replace").strip()
            raise RuntimeError(detail or f"{self.antiword_command} exited with status {process.returncode}")
        return stdout.decode("utf-8", errors="replace")


__all__ = ["WordDocumentExtractor", "collapse_line_breaks"]
