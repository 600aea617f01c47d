from __future__ import annotations

import contextlib
import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from dotenv import load_dotenv

from persistence.errors import AuthFailure, StoreError
from persistence.paths import logs_dir
from settings import Settings, get_settings

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("access")

AVAILABLE_ENDPOINTS = [
    "GET  /api/health",
    "GET  /api/data",
    "GET  /api/posts?category=",
    "GET  /api/admin/auth?pass=пароль",
    "POST /api/admin/auth",
    "POST /api/orders",
    "GET  /api/admin/orders",
    "GET  /api/admin/settings",
    "POST /api/admin/settings",
    "POST /api/admin/posts",
    "DELETE /api/admin/posts/:id",
    "GET  /api/admin/stats",
]


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    from endpoints import stores
    from endpoints.site_endpoints import SERVICE_NAME, SERVICE_VERSION

    stores.DOCUMENT_STORE.initialize()
    logger.info(
        "%s %s serving data from %s", SERVICE_NAME, SERVICE_VERSION, stores.DOCUMENT_STORE.base_dir
    )
    yield


def _configure_access_log(settings: Settings) -> None:
    access_logger.setLevel(logging.INFO)
    if not settings.access_log_to_file:
        return
    log_path = (logs_dir() / "access.log").resolve()
    # At most one access-log file handler; a new LOG_DIR replaces the old one.
    current = None
    for handler in list(access_logger.handlers):
        if not isinstance(handler, logging.FileHandler):
            continue
        if current is None and Path(handler.baseFilename) == log_path:
            current = handler
            continue
        access_logger.removeHandler(handler)
        handler.close()
    if current is not None:
        return
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s | %(message)s"))
    access_logger.addHandler(handler)


def _not_found_body(path: str) -> dict:
    return {
        "error": "Не найдено",
        "message": f"Путь {path} не существует",
        "availableEndpoints": AVAILABLE_ENDPOINTS,
    }


def create_app() -> FastAPI:
    load_dotenv("local.env")
    settings = get_settings()
    _configure_access_log(settings)

    from endpoints.admin_endpoints import router as admin_router
    from endpoints.site_endpoints import router as site_router

    app = FastAPI(lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_request(request: Request, call_next):
        client = request.client.host if request.client else "-"
        url = request.url.path + (f"?{request.url.query}" if request.url.query else "")
        access_logger.info("%s %s | IP: %s", request.method, url, client)
        return await call_next(request)

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        body: dict = {"error": exc.message}
        if isinstance(exc, AuthFailure):
            body = {"success": False, "error": exc.message}
        elif exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(body, status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def unmatched_route_handler(request: Request, exc: StarletteHTTPException):
        # Unknown paths and unsupported methods both answer with the endpoint list.
        if exc.status_code in (404, 405):
            return JSONResponse(_not_found_body(request.url.path), status_code=404)
        return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=exc.headers)

    app.include_router(site_router)
    app.include_router(admin_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    uvicorn.run(app, host="0.0.0.0", port=get_settings().port)
