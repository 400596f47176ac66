"""JSON logging for the `doc_summary` logger tree.

The library never touches logging on import. Hosts that want the JSON output
call `configure_logging()`, which attaches one handler to the package logger
and leaves the root logger alone. Wrap a call in `request_context(id)` (or pass
`request_id=` to `summarize`) to stamp every record of that call.
"""

from __future__ import annotations

import json
import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import IO, Any, Dict, Iterator

PACKAGE_LOGGER = "doc_summary"

request_id_var: ContextVar[str | None] = ContextVar("doc_summary_request_id", default=None)

# Attributes every LogRecord carries; anything else arrived through `extra=`.
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per record: timestamp, level, logger, message and extras."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        data: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        rid = request_id_var.get()
        if rid:
            data["request_id"] = rid
        data.update(
            (key, value)
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        )
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data, ensure_ascii=False, default=str)


def configure_logging(
    level: int = logging.INFO,
    *,
    stream: IO[str] | None = None,
    propagate: bool = False,
) -> logging.Logger:
    """Send `doc_summary` records to `stream` (stdout by default) as JSON.

    Calling it again swaps the previously installed handler instead of stacking
    a second one.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in [h for h in logger.handlers if getattr(h, "_doc_summary_json", False)]:
        logger.removeHandler(handler)
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JsonFormatter())
    handler._doc_summary_json = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate
    # httpx logs full request URLs, which carry the API key as a query parameter.
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
    return logger


@contextmanager
def request_context(rid: str | None) -> Iterator[None]:
    token = request_id_var.set(rid)
    try:
        yield
    finally:
        request_id_var.reset(token)


__all__ = [
    "JsonFormatter",
    "PACKAGE_LOGGER",
    "configure_logging",
    "request_context",
    "request_id_var",
]
