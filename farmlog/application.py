# farmlog/application.py
from __future__ import annotations

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.sessions import SessionMiddleware

from farmlog.api import auth, chickens, export, financials, health, inventory, notes, production, tasks
from farmlog.config import settings
from farmlog.errors import FarmlogError
from farmlog.services.store import RecordStore

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("farmlog.access")


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=level or settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


# ---------- Middleware ----------

class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        if not request.url.path.startswith("/api"):
            return await call_next(request)
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        access_logger.info(
            "%s %s %s %.0fms", request.method, request.url.path, response.status_code, elapsed_ms
        )
        return response


# ---------- Error handlers ----------

def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        # drop the "body"/"query" prefix, keep the field path
        loc = [str(p) for p in err.get("loc", ())[1:]]
        field = ".".join(loc) if loc else "request"
        parts.append(f"{field}: {err.get('msg')}")
    return "Validation error: " + "; ".join(parts)


async def _farmlog_error(request: Request, exc: FarmlogError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def _request_validation_error(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"message": _validation_message(exc)})


async def _unhandled_error(request: Request, exc: Exception):
    logger.error("unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "Internal Server Error"})


# ---------- App factory ----------

def create_app(store: RecordStore, lifespan=None) -> FastAPI:
    """Builds the API around ``store``; the caller owns its lifetime (see ``lifespan``)."""
    app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION, lifespan=lifespan)
    app.state.store = store

    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.SECRET_KEY,
        session_cookie=settings.SESSION_COOKIE,
    )
    app.add_middleware(RequestLogMiddleware)

    app.add_exception_handler(FarmlogError, _farmlog_error)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.add_exception_handler(Exception, _unhandled_error)

    for module in (auth, financials, production, chickens, health, tasks, notes, inventory, export):
        app.include_router(module.router)

    @app.get("/healthz", include_in_schema=False)
    def healthz():
        return {"status": "ok"}

    return app
