"""
health.py
Provides /health for container liveness checks.
Includes a store ping so a dead upstream shows up here too.
"""

import time

from fastapi import APIRouter, Depends
from pymongo.errors import PyMongoError

from ..deps import get_db
from ..errors import StoreUnavailableError

router = APIRouter()


def now_ms() -> int:
    return int(time.time() * 1000)


@router.get("/health")
async def health(db=Depends(get_db)):
    try:
        await db.command("ping")
    except PyMongoError as exc:
        raise StoreUnavailableError(f"store ping failed: {exc}") from exc
    return {"ok": True, "ts_ms": now_ms()}
