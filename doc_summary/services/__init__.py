"""Extraction, prompting and provider services."""

from .extraction import ExtractionDispatcher
from .gemini_backend import GeminiBackend, extract_summary_text
from .providers import create_provider, register_provider, registered_providers
from .summarizer import Summarizer, summarize
from .word_extractor import WordDocumentExtractor

__all__ = [
    "ExtractionDispatcher",
    "GeminiBackend",
    "Summarizer",
    "WordDocumentExtractor",
    "create_provider",
    "extract_summary_text",
    "register_provider",
    "registered_providers",
    "summarize",
]
