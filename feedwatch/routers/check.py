"""
check.py
POST /check: reads the feed document and reports whether it is still inside
its freshness window. 200 when fresh, 500 when stale, same body either way.
"""

import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ..config import Settings
from ..deps import Clock, get_clock, get_settings, get_updates_collection, require_basic_auth
from ..freshness import evaluate_freshness
from ..repos import updates_repo
from ..schemas import ErrorOut, FreshnessReport

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/check",
    response_model=FreshnessReport,
    responses={
        500: {"model": FreshnessReport, "description": "Feed is stale (or its timestamp is unreadable)"},
        502: {"model": ErrorOut},
        503: {"model": ErrorOut},
    },
    dependencies=[Depends(require_basic_auth)],
)
async def check_update(
    settings: Settings = Depends(get_settings),
    clock: Clock = Depends(get_clock),
    col=Depends(get_updates_collection),
):
    record = await updates_repo.get_update_record(col, settings.doc, settings.store_timeout_s)

    tz = settings.tz
    result = evaluate_freshness(
        record.updated_at,
        clock(tz),
        tz=tz,
        window=timedelta(minutes=settings.freshness_window_min),
    )
    report = result.report()

    if result.fresh:
        return JSONResponse(status_code=status.HTTP_200_OK, content=report.model_dump())

    logger.warning(
        "Feed %s/%s is stale: last update %s, expected by %s, now %s",
        settings.collection,
        settings.doc,
        report.lastupdate,
        report.nextupdate,
        report.now,
    )
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=report.model_dump())
