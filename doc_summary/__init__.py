"""Summarise plain text or PDF/DOC/DOCX documents with a remote AI provider."""

from .config import AppConfig, get_config
from .models import DocumentFormat, Provider
from .services import Summarizer, summarize

__all__ = [
    "AppConfig",
    "DocumentFormat",
    "Provider",
    "Summarizer",
    "get_config",
    "summarize",
]
