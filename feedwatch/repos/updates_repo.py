"""
updates_repo.py
- Reads the single "last update" document the feed publisher maintains.
- Turns driver failures into request-scoped errors instead of crashing the process.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict

from bson import ObjectId
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from ..errors import DocumentNotFoundError, MalformedDocumentError, StoreUnavailableError
from ..schemas import UpdateRecord

logger = logging.getLogger(__name__)


def doc_filter(doc_id: str) -> Dict[str, Any]:
    # Publishers may key the document by a plain string or an ObjectId.
    if ObjectId.is_valid(doc_id):
        return {"_id": {"$in": [doc_id, ObjectId(doc_id)]}}
    return {"_id": doc_id}


async def get_update_record(col, doc_id: str, timeout_s: float) -> UpdateRecord:
    try:
        d = await asyncio.wait_for(col.find_one(doc_filter(doc_id)), timeout=timeout_s)
    except asyncio.TimeoutError as exc:
        raise StoreUnavailableError(
            f"store read for {col.name}/{doc_id} timed out after {timeout_s}s"
        ) from exc
    except PyMongoError as exc:
        raise StoreUnavailableError(f"store read for {col.name}/{doc_id} failed: {exc}") from exc

    if d is None:
        raise DocumentNotFoundError(f"document {col.name}/{doc_id} not found")

    try:
        return UpdateRecord.model_validate(d)
    except ValidationError as exc:
        logger.debug("Rejected document %s/%s: %s", col.name, doc_id, exc)
        raise MalformedDocumentError(
            f"document {col.name}/{doc_id} has no valid 'Atualizado' field"
        ) from exc
