"""Structured JSON log lines shared by engine and CLI loggers."""

from __future__ import annotations

import json
import logging
from typing import Any


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Log one compact JSON payload tagged with an event name."""

    if not logger.isEnabledFor(level):
        return
    payload = {"event": event, **fields}
    logger.log(level, _dump_json(payload))


def _dump_json(payload: dict[str, Any]) -> str:
    return json.dumps(payload, ensure_ascii=False, sort_keys=True, separators=(",", ":"))
