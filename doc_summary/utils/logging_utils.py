"""Helpers for emitting consistent structured logs and stage telemetry."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any, AsyncIterator, Dict

# Document text never leaves through these fields except the bounded preview.
STRUCTURED_LOG_ALLOWED_FIELDS: frozenset[str] = frozenset(
    {
        "bytes",
        "component",
        "duration_ms",
        "error",
        "error_type",
        "event",
        "format",
        "max_text_length",
        "mime_type",
        "model",
        "original_length",
        "pages",
        "preview",
        "preview_truncated",
        "prompt_length",
        "provider",
        "reason",
        "request_id",
        "response_body",
        "stage",
        "status",
        "status_code",
        "summary_length",
        "text_length",
    }
)


def _filter_structured_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {
        key: value
        for key, value in fields.items()
        if key in STRUCTURED_LOG_ALLOWED_FIELDS and value is not None
    }


def structured_log(
    logger: logging.Logger, level: int, event: str, **fields: Any
) -> None:
    """Emit a log record with an `event` attribute and structured extras."""
    payload: Dict[str, Any] = {"event": event, "_structured_log": True}
    payload.update(_filter_structured_fields(fields))
    logger.log(level, event, extra=payload)


@dataclass
class StageTimer:
    """Handle yielded by `stage_marker`; collects fields for the closing record."""

    fields: Dict[str, Any]
    started_at: float = field(default_factory=time.perf_counter)

    def record(self, **fields: Any) -> None:
        self.fields.update(_filter_structured_fields(fields))

    @property
    def duration_ms(self) -> int:
        return int((time.perf_counter() - self.started_at) * 1000)


@asynccontextmanager
async def stage_marker(
    logger: logging.Logger, *, stage: str, level: int = logging.INFO, **fields: Any
) -> AsyncIterator[StageTimer]:
    """Bracket an awaited stage with `started` and `completed`/`failed` records.

    The start record is DEBUG so a normal run logs one line per stage.
    """
    timer = StageTimer(fields=_filter_structured_fields({"stage": stage, **fields}))
    structured_log(logger, logging.DEBUG, "summary_stage", status="started", **timer.fields)
    try:
        yield timer
    except BaseException as exc:
        structured_log(
            logger,
            logging.ERROR,
            "summary_stage",
            status="failed",
            error_type=type(exc).__name__,
            duration_ms=timer.duration_ms,
            **timer.fields,
        )
        raise
    structured_log(
        logger,
        level,
        "summary_stage",
        status="completed",
        duration_ms=timer.duration_ms,
        **timer.fields,
    )


__all__ = [
    "StageTimer",
    "stage_marker",
    "structured_log",
    "STRUCTURED_LOG_ALLOWED_FIELDS",
]
