"""
main.py
Backend entrypoint. Creates the FastAPI app and wires everything.
"""

from __future__ import annotations

import logging
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from . import __version__
from .config import Settings
from .db.mongo import create_client, get_db
from .deps import Clock
from .errors import FeedWatchError
from .routers import check, health

logger = logging.getLogger(__name__)


def system_clock(tz) -> datetime:
    return datetime.now(tz)


def create_app(
    settings: Settings | None = None,
    *,
    db=None,
    clock: Clock | None = None,
) -> FastAPI:
    settings = settings or Settings()
    app = FastAPI(title="feedwatch", version=__version__)

    client = None
    if db is None:
        client = create_client(settings)
        db = get_db(client, settings)

    # store shared objects for DI
    app.state.settings = settings
    app.state.db = db
    app.state.clock = clock or system_clock

    app.include_router(health.router)
    app.include_router(check.router)

    @app.exception_handler(FeedWatchError)
    async def feedwatch_error_handler(request: Request, exc: FeedWatchError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": {"type": type(exc).__name__, "message": exc.message}},
        )

    @app.on_event("shutdown")
    async def shutdown():
        if client is not None:
            client.close()

    return app


__all__ = ["create_app"]
