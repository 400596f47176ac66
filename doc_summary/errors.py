"""Custom exception hierarchy for the document summarizer.

These errors provide clear, typed failure modes so callers can tell a bad
input apart from an extraction problem or a remote API failure, and logs can
be structured consistently.
"""
from __future__ import annotations


class SummarizerError(Exception):
    """Base class for every failure raised by this package."""


class ValidationError(SummarizerError):
    """Raised when caller supplied input (content, format, provider) is invalid."""


class EmptyContentError(ValidationError):
    """Raised when the content to summarise is absent or blank."""


class InvalidContentTypeError(ValidationError):
    """Raised when content is neither text nor a bytes-like buffer."""


class UnsupportedFormatError(ValidationError):
    """Raised when binary content is tagged with an unrecognised format."""

    def __init__(self, fmt: str) -> None:
        super().__init__(f"Unsupported file type for summarization: {fmt}.")
        self.format = fmt


class InvalidProviderError(ValidationError):
    """Raised when the provider is not one of the recognised providers."""

    def __init__(self, provider: object, supported: tuple[str, ...]) -> None:
        names = ", ".join(f"'{name}'" for name in supported)
        super().__init__(f"Invalid AI provider: {provider}. Supported providers are {names}.")
        self.provider = provider
        self.supported = supported


class ExtractionError(SummarizerError):
    """Raised when text cannot be obtained from a binary document."""


class ExtractionFailureError(ExtractionError):
    """Raised when the underlying extraction capability reports an error."""

    def __init__(self, fmt: str, message: str) -> None:
        super().__init__(f"Text extraction failed for {fmt}: {message}")
        self.format = fmt


class NoExtractableTextError(ExtractionError):
    """Raised when extraction succeeds but yields only whitespace."""


class ProviderError(SummarizerError):
    """Base class for provider-side failures."""


class MissingCredentialError(ProviderError):
    """Raised when a provider needs an API credential that is not configured."""


class ProviderNotImplementedError(ProviderError, NotImplementedError):
    """Raised for providers that are recognised but not supported yet."""

    def __init__(self, provider: str, label: str | None = None) -> None:
        super().__init__(f"{label or provider} integration not yet implemented.")
        self.provider = provider


class SummarizationError(ProviderError):
    """Raised when the summarisation backend fails or returns unusable output."""


class RemoteAPIError(SummarizationError):
    """Raised when the remote API answers with a non-success status or is unreachable."""

    def __init__(
        self,
        status_code: int | None,
        reason: str,
        body: str = "",
    ) -> None:
        if status_code is None:
            message = f"Gemini API request failed: {reason}"
        else:
            message = f"Gemini API error: {status_code} {reason} - {body}"
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
        self.body = body


class UnexpectedResponseShapeError(SummarizationError):
    """Raised when a successful response lacks the expected summary text field."""


__all__ = [
    "SummarizerError",
    "ValidationError",
    "EmptyContentError",
    "InvalidContentTypeError",
    "UnsupportedFormatError",
    "InvalidProviderError",
    "ExtractionError",
    "ExtractionFailureError",
    "NoExtractableTextError",
    "ProviderError",
    "MissingCredentialError",
    "ProviderNotImplementedError",
    "SummarizationError",
    "RemoteAPIError",
    "UnexpectedResponseShapeError",
]
