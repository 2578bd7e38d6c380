"""
Structured JSON log lines on stdout.

Keys: ts, level, message, request_id, event, module (+ extra fields).
"""
from __future__ import annotations

import datetime
import json
import logging
import os
from typing import Any, Dict, Optional

_log = logging.getLogger("arena_api")
if not logging.getLogger().handlers:
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))


def now_iso() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat()


def emit(level: str, event: str, message: str, request_id: Optional[str], module: str, **extra: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "ts": now_iso(),
        "level": level.lower(),
        "message": message,
        "request_id": request_id,
        "event": event,
        "module": module,
    }
    payload.update(extra)
    print(json.dumps(payload, ensure_ascii=False, default=str), flush=True)
    return payload


def audit(event: str, request_id: Optional[str], module: str, **extra: Any) -> Dict[str, Any]:
    """Audit line for state-changing procedures (stdout, capturable in uvicorn logs)."""
    _log.debug("audit %s %s", event, extra)
    return emit("audit", event, event, request_id, module, **extra)
