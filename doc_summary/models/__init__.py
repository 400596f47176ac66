"""Request and prompt models."""

from .request import (
    WORD_MIME_TYPES,
    BytesLike,
    Content,
    DocumentFormat,
    Prompt,
    Provider,
    SummarizationRequest,
)

__all__ = [
    "BytesLike",
    "Content",
    "DocumentFormat",
    "Prompt",
    "Provider",
    "SummarizationRequest",
    "WORD_MIME_TYPES",
]
