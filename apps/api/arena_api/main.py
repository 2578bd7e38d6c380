from fastapi import FastAPI
import os

APP_VERSION = os.getenv("APP_VERSION", "0.1.0")

app = FastAPI(title="Arena Chronicle API", version=APP_VERSION)

# === OBSERVABILITY FOUNDATIONS ===
# Contract locks:
# - /health keys: status, version, db, last_error_summary
# - X-Request-Id in/out (missing -> generated; always echoed back; also on errors)
# - Error envelope keys: error, message, request_id, details
import uuid
from typing import Any, Optional
from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from arena_api.core.db import db_health
from arena_api.core.logs import emit as _emit

_last_error_summary: Optional[str] = None


def _err_envelope(error: str, message: str, request_id: Optional[str], details: Any, status_code: int):
    headers = {}
    if request_id:
        headers["X-Request-Id"] = request_id
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "message": message,
            "request_id": request_id,
            "details": details,
        },
        headers=headers,
    )


@app.middleware("http")
async def _request_id_mw(request: Request, call_next):
    rid = request.headers.get("X-Request-Id") or uuid.uuid4().hex.upper()
    request.state.request_id = rid
    _emit("info", "http.request.start", f"{request.method} {request.url.path}", rid, __name__)
    try:
        resp = await call_next(request)
    except Exception as e:
        _emit("error", "http.request.exception", str(e), rid, __name__)
        raise
    resp.headers["X-Request-Id"] = rid
    _emit("info", "http.request.end", f"{request.method} {request.url.path} -> {getattr(resp,'status_code',None)}", rid, __name__)
    return resp


@app.exception_handler(StarletteHTTPException)
async def _http_exc_handler(request: Request, exc: StarletteHTTPException):
    rid = getattr(request.state, "request_id", None)
    return _err_envelope("http_error", str(exc.detail), rid, {"status_code": exc.status_code}, exc.status_code)


@app.exception_handler(RequestValidationError)
async def _validation_exc_handler(request: Request, exc: RequestValidationError):
    rid = getattr(request.state, "request_id", None)
    return _err_envelope("validation_error", "request validation failed", rid, exc.errors(), 422)


@app.exception_handler(IntegrityError)
async def _integrity_exc_handler(request: Request, exc: IntegrityError):
    # CHECK / FOREIGN KEY / NOT NULL failures and RAISE(ABORT, ...) from triggers;
    # the statement was rolled back
    global _last_error_summary
    rid = getattr(request.state, "request_id", None)
    message = str(exc.orig) if exc.orig is not None else str(exc)
    _last_error_summary = f"constraint_violation: {message}"
    _emit("warning", "db.constraint_violation", message, rid, __name__, path=request.url.path)
    return _err_envelope("constraint_violation", message, rid, {"type": type(exc.orig).__name__}, 409)


@app.exception_handler(Exception)
async def _unhandled_exc_handler(request: Request, exc: Exception):
    global _last_error_summary
    rid = getattr(request.state, "request_id", None)
    _last_error_summary = f"internal_error: {type(exc).__name__}"
    return _err_envelope("internal_error", "internal server error", rid, {"type": type(exc).__name__}, 500)
# === END OBSERVABILITY FOUNDATIONS ===


@app.get("/health")
def health():
    db = db_health()
    return {
        "status": "ok" if db.get("status") == "ok" else "degraded",
        "version": APP_VERSION,
        "db": db,
        "last_error_summary": _last_error_summary,
    }


from arena_api.modules.arenas.router import router as arenas_router  # noqa: E402
from arena_api.modules.battle_results.router import router as battle_results_router  # noqa: E402
from arena_api.modules.beasts.router import router as beasts_router  # noqa: E402
from arena_api.modules.events.router import router as events_router  # noqa: E402
from arena_api.modules.participants.router import router as participants_router  # noqa: E402
from arena_api.modules.seed.router import router as seed_router  # noqa: E402
from arena_api.modules.views.router import router as views_router  # noqa: E402

app.include_router(arenas_router)
app.include_router(events_router)
app.include_router(participants_router)
app.include_router(beasts_router)
app.include_router(battle_results_router)
app.include_router(views_router)
app.include_router(seed_router)
