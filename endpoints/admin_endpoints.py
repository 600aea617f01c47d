from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from admin_auth import authenticate
from endpoints import stores
from persistence.errors import NotFound
from settings import get_settings

router = APIRouter(prefix="/api/admin", tags=["admin"])
logger = logging.getLogger(__name__)

AUTH_OK_MESSAGE = "Авторизация успешна"


def _auth_reply(candidate: Any) -> JSONResponse:
    # Settings are read per call so ADMIN_PASSWORD changes apply without a reload.
    token = authenticate(candidate, get_settings().admin_password)
    return JSONResponse({"success": True, "token": token, "message": AUTH_OK_MESSAGE})


# -------------------------------------------------------------------
# Auth gate (token is informational; no other route checks it)
# -------------------------------------------------------------------
@router.get("/auth")
async def admin_auth_query(request: Request):
    candidate: Optional[str] = request.query_params.get("pass")
    return _auth_reply(candidate)


@router.post("/auth")
async def admin_auth_body(request: Request):
    try:
        data = await request.json()
    except Exception:
        data = {}
    candidate = data.get("password") if isinstance(data, dict) else None
    return _auth_reply(candidate)


# -------------------------------------------------------------------
# Orders / settings / posts
# -------------------------------------------------------------------
@router.get("/orders")
async def list_orders():
    orders = await stores.ORDER_REPO.list_orders()
    return JSONResponse({"orders": [o.to_disk_doc() for o in orders]})


@router.get("/settings")
async def get_site_settings():
    return JSONResponse(await stores.SITE_SETTINGS_REPO.get())


@router.post("/settings")
async def replace_site_settings(body: dict[str, Any]):
    await stores.SITE_SETTINGS_REPO.replace(body)
    return JSONResponse({"success": True, "message": "Настройки сохранены"})


@router.post("/posts")
async def create_post(body: dict[str, Any]):
    post = await stores.POST_REPO.add_post(body)
    logger.info("Post created: id=%s category=%s", post.id, post.category)
    return JSONResponse({"success": True, "message": "Пост добавлен", "post": post.to_disk_doc()})


@router.delete("/posts/{post_id}")
async def delete_post(post_id: int):
    removed = await stores.POST_REPO.delete_post(post_id)
    if not removed:
        raise NotFound("Пост не найден")
    return JSONResponse({"success": True, "message": "Пост удален"})


# Short keys are what existing dashboard clients read.
STATS_WIRE_ALIASES = {
    "posts": "postsCount",
    "orders": "ordersCount",
    "uptime": "processUptime",
    "memory": "processMemory",
}


@router.get("/stats")
async def site_stats():
    stats = await stores.STATS.stats()
    stats.update({alias: stats[key] for alias, key in STATS_WIRE_ALIASES.items()})
    return JSONResponse(stats)
