"""Process-wide configuration for the document summarizer.

Values are read once from the environment (or a local `.env` file) and then
treated as immutable. A missing Gemini key never fails at load time; it only
makes the gemini provider raise `MissingCredentialError` when used.

Variables (env names in parentheses):
 - GEMINI_API_KEY (alias GOOGLE_API_KEY)
 - GEMINI_MODEL, GEMINI_API_BASE_URL, GEMINI_API_VERSION
 - TEMPERATURE, TOP_P, TOP_K, MAX_OUTPUT_TOKENS
 - MAX_TEXT_LENGTH, PREVIEW_CHARS, PROMPT_STYLE
 - REQUEST_TIMEOUT_SECONDS
 - ANTIWORD_COMMAND (external converter for legacy .doc files)
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    gemini_api_key: str | None = Field(
        None,
        validation_alias=AliasChoices('GEMINI_API_KEY', 'GOOGLE_API_KEY'),
    )
    gemini_model: str = Field('gemini-1.5-flash', validation_alias='GEMINI_MODEL')
    gemini_api_base_url: str = Field(
        'https://generativelanguage.googleapis.com',
        validation_alias='GEMINI_API_BASE_URL',
    )
    gemini_api_version: str = Field('v1beta', validation_alias='GEMINI_API_VERSION')
    # Decoding settings tuned for deterministic-leaning summaries.
    temperature: float = Field(0.4, validation_alias='TEMPERATURE')
    top_p: float = Field(0.9, validation_alias='TOP_P')
    top_k: int = Field(40, validation_alias='TOP_K')
    max_output_tokens: int = Field(300, validation_alias='MAX_OUTPUT_TOKENS')
    max_text_length: int = Field(10_000, gt=0, validation_alias='MAX_TEXT_LENGTH')
    preview_chars: int = Field(500, ge=0, validation_alias='PREVIEW_CHARS')
    prompt_style: Literal['concise', 'academic'] = Field('concise', validation_alias='PROMPT_STYLE')
    request_timeout_seconds: float = Field(60.0, gt=0, validation_alias='REQUEST_TIMEOUT_SECONDS')
    antiword_command: str = Field('antiword', validation_alias='ANTIWORD_COMMAND')

    model_config = SettingsConfigDict(
        env_file='.env',
        extra='ignore',
        case_sensitive=False,
        populate_by_name=True,
    )

    @field_validator('gemini_api_key')
    @classmethod
    def _blank_key_is_missing(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        return value or None

    @property
    def gemini_endpoint(self) -> str:
        base = self.gemini_api_base_url.rstrip('/')
        return f"{base}/{self.gemini_api_version}/models/{self.gemini_model}:generateContent"

    def generation_config(self) -> dict[str, float | int]:
        """Decoding parameters in the wire format expected by generateContent."""
        return {
            "temperature": self.temperature,
            "topP": self.top_p,
            "topK": self.top_k,
            "maxOutputTokens": self.max_output_tokens,
        }


@lru_cache
def get_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = ["AppConfig", "get_config"]
