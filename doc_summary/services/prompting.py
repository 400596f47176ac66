"""Prompt construction with a hard upper bound on the embedded text."""

from __future__ import annotations

import logging

from ..models import Prompt
from ..utils.logging_utils import structured_log

LOG = logging.getLogger(__name__)

PROMPT_TEMPLATES: dict[str, str] = {
    "concise": "Please provide a concise summary of the following text:",
    "academic": (
        "Summarize the following academic or technical content clearly and concisely. "
        "Highlight core ideas, objectives, and outcomes if present. "
        "Keep the tone informative, not promotional."
    ),
}


def truncate_text(text: str, max_length: int) -> tuple[str, bool]:
    """Cut `text` to at most `max_length` characters, logging when it happens."""
    if len(text) <= max_length:
        return text, False
    structured_log(
        LOG,
        logging.WARNING,
        "summary_text_truncated",
        original_length=len(text),
        max_text_length=max_length,
    )
    return text[:max_length], True


def build_prompt(text: str, *, max_length: int, style: str = "concise") -> Prompt:
    instruction = PROMPT_TEMPLATES[style]
    bounded, truncated = truncate_text(text, max_length)
    return Prompt(
        text=f"{instruction}\n\n{bounded}",
        original_length=len(text),
        truncated=truncated,
    )


def log_text_preview(text: str, preview_chars: int) -> None:
    structured_log(
        LOG,
        logging.DEBUG,
        "extracted_text_preview",
        preview=text[:preview_chars],
        preview_truncated=len(text) > preview_chars,
        text_length=len(text),
    )


__all__ = ["PROMPT_TEMPLATES", "build_prompt", "log_text_preview", "truncate_text"]
