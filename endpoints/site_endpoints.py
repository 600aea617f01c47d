from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from endpoints import stores
from persistence.defaults import DOCUMENT_NAMES
from site_stats import process_uptime

router = APIRouter(prefix="/api", tags=["site"])
logger = logging.getLogger(__name__)

SERVICE_NAME = "DVX Studio API"
SERVICE_VERSION = "1.0.0"


def _iso_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("/health")
async def health():
    return JSONResponse(
        {
            "status": "ok",
            "service": SERVICE_NAME,
            "version": SERVICE_VERSION,
            "timestamp": _iso_now(),
            "uptime": process_uptime(),
        }
    )


@router.get("/data")
async def all_data():
    # Debug snapshot: only documents that are actually persisted.
    data = await asyncio.to_thread(stores.DOCUMENT_STORE.snapshot, DOCUMENT_NAMES)
    return JSONResponse(data)


@router.get("/posts")
async def list_posts(category: Optional[str] = None):
    posts = await stores.POST_REPO.list_posts(category=category or None)
    return JSONResponse({"posts": [p.to_disk_doc() for p in posts]})


@router.post("/orders")
async def create_order(body: dict[str, Any]):
    order = await stores.ORDER_REPO.add_order(body)
    logger.info("Order created: id=%s", order.id)
    return JSONResponse(
        {
            "success": True,
            "message": "Заказ создан",
            "order": order.to_disk_doc(),
        }
    )
