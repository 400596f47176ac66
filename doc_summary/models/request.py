"""Typed request values shared by the extraction and summarisation stages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from ..errors import InvalidProviderError, UnsupportedFormatError

BytesLike = Union[bytes, bytearray, memoryview]
Content = Union[str, BytesLike]


class Provider(str, Enum):
    GEMINI = "gemini"
    OPENAI = "openai"
    CLAUDE = "claude"

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)

    @classmethod
    def parse(cls, value: "Provider | str") -> "Provider":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidProviderError(value, cls.names())


class DocumentFormat(str, Enum):
    TXT = "txt"
    PDF = "pdf"
    DOC = "doc"
    DOCX = "docx"

    @classmethod
    def parse(cls, value: "DocumentFormat | str | None") -> "DocumentFormat":
        """Normalise `".PDF"`, `" docx "` and friends to a known format.

        `None` means the caller left the format unset and falls back to `txt`.
        """
        if value is None:
            return cls.TXT
        if isinstance(value, cls):
            return value
        normalised = str(value).strip().lower().lstrip(".")
        try:
            return cls(normalised)
        except ValueError:
            raise UnsupportedFormatError(str(value)) from None


WORD_MIME_TYPES: dict[DocumentFormat, str] = {
    DocumentFormat.DOC: "application/msword",
    DocumentFormat.DOCX: "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


@dataclass(slots=True)
class SummarizationRequest:
    """One call's worth of input; never outlives the invocation."""

    content: Content
    provider: Provider
    format: DocumentFormat = DocumentFormat.TXT

    @property
    def is_binary(self) -> bool:
        return isinstance(self.content, (bytes, bytearray, memoryview))


@dataclass(slots=True, frozen=True)
class Prompt:
    """Instruction template wrapped around the (possibly truncated) text."""

    text: str
    original_length: int
    truncated: bool = False


__all__ = [
    "BytesLike",
    "Content",
    "DocumentFormat",
    "Prompt",
    "Provider",
    "SummarizationRequest",
    "WORD_MIME_TYPES",
]
