"""Thin Gemini wrapper around the REST `generateContent` endpoint."""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import httpx

from ..errors import MissingCredentialError, RemoteAPIError, UnexpectedResponseShapeError
from ..utils.logging_utils import stage_marker, structured_log
from .interfaces import HttpClient

LOG = logging.getLogger(__name__)

# Longest slice of an error body copied into the log record.
_LOGGED_BODY_CHARS = 2000


def extract_summary_text(payload: Any) -> str:
    """Return `candidates[0].content.parts[0].text` or raise if any link is missing."""
    try:
        text = payload["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as exc:
        raise UnexpectedResponseShapeError("Unexpected response structure from Gemini API.") from exc
    if not isinstance(text, str):
        raise UnexpectedResponseShapeError("Unexpected response structure from Gemini API.")
    return text


class GeminiBackend:
    """Summary provider backed by Google Gemini over plain HTTP."""

    name = "gemini"

    def __init__(
        self,
        *,
        api_key: Optional[str],
        endpoint: str,
        generation_config: Mapping[str, Any],
        model: str = "",
        timeout: float = 60.0,
        http_client: HttpClient | None = None,
    ) -> None:
        if not api_key:
            raise MissingCredentialError(
                "Gemini API key is not configured. Please set GEMINI_API_KEY in your environment or .env file."
            )
        self.api_key = api_key
        self.endpoint = endpoint
        self.generation_config = dict(generation_config)
        self.model = model
        self.timeout = timeout
        self._http_client = http_client

    def build_payload(self, prompt: str) -> dict[str, Any]:
        return {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": dict(self.generation_config),
        }

    async def summarize(self, prompt: str) -> str:
        payload = self.build_payload(prompt)
        async with stage_marker(
            LOG,
            stage="summarisation",
            provider=self.name,
            model=self.model or None,
            prompt_length=len(prompt),
        ) as marker:
            response = await self._post(payload)
            summary = self._parse_response(response)
            marker.record(summary_length=len(summary))
        return summary

    async def _post(self, payload: dict[str, Any]) -> httpx.Response:
        params = {"key": self.api_key}
        headers = {"Content-Type": "application/json"}
        try:
            if self._http_client is not None:
                response = await self._http_client.post(
                    self.endpoint, params=params, json=payload, headers=headers
                )
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.post(
                        self.endpoint, params=params, json=payload, headers=headers
                    )
        except httpx.HTTPError as exc:
            structured_log(
                LOG,
                logging.ERROR,
                "remote_api_transport_failed",
                provider=self.name,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            raise RemoteAPIError(None, str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            body = response.text
            structured_log(
                LOG,
                logging.ERROR,
                "remote_api_error",
                provider=self.name,
                status_code=response.status_code,
                reason=response.reason_phrase,
                response_body=body[:_LOGGED_BODY_CHARS],
            )
            raise RemoteAPIError(response.status_code, response.reason_phrase, body)
        return response

    def _parse_response(self, response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError as exc:
            structured_log(
                LOG,
                logging.ERROR,
                "remote_api_unexpected_shape",
                provider=self.name,
                reason="invalid_json",
                status_code=response.status_code,
            )
            raise UnexpectedResponseShapeError("Gemini API returned a non-JSON response.") from exc
        try:
            return extract_summary_text(data)
        except UnexpectedResponseShapeError:
            structured_log(
                LOG,
                logging.ERROR,
                "remote_api_unexpected_shape",
                provider=self.name,
                reason="missing_candidate_text",
                status_code=response.status_code,
            )
            raise


__all__ = ["GeminiBackend", "extract_summary_text"]
