# -*- coding: utf-8 -*-
"""
NutriScan API

Accounts, food catalog, daily food logs, body metrics and nutrition analytics.
"""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from . import __version__
from .analytics.api import router as analytics_router
from .app_db import init_app_db
from .auth.api import router as auth_router
from .config import settings
from .errors import install_error_handlers
from .foods.api import router as foods_router
from .logs.api import router as logs_router
from .metrics.api import router as metrics_router
from .uploads.api import router as uploads_router
from .users.api import router as users_router

logger = logging.getLogger(__name__)
logging.getLogger("nutriscan").setLevel(settings.log_level)

app = FastAPI(
    title="NutriScan API",
    description="Diet tracking: food catalog, daily logs, nutrition targets and analytics",
    version=__version__,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_origins != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

install_error_handlers(app)


@app.on_event("startup")
def _startup_init_db() -> None:
    init_app_db(settings.db_path)


# Ensure the DB exists even when lifespan events are not triggered (e.g. some test clients).
init_app_db(settings.db_path)


@app.middleware("http")
async def _log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info("%s %s %s %.1fms", request.method, request.url.path, response.status_code, elapsed_ms)
    return response


app.include_router(auth_router)
app.include_router(users_router)
app.include_router(foods_router)
app.include_router(logs_router)
app.include_router(metrics_router)
app.include_router(analytics_router)
app.include_router(uploads_router)

if settings.dev_routes:
    from .dev.api import router as dev_router

    app.include_router(dev_router)

settings.upload_dir.mkdir(parents=True, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.upload_dir), name="uploads")


@app.get("/", include_in_schema=False)
def root():
    return {"message": "Welcome to NutriScan API"}


@app.get("/api", include_in_schema=False)
def api_root():
    return {"status": "success", "message": "NutriScan API is running"}


@app.get("/api/health")
def health_check():
    return {"ok": True}


def run() -> None:
    """Console entry point: serve the API with uvicorn using the configured host/port."""
    import uvicorn

    uvicorn.run("nutriscan.api:app", host=settings.host, port=settings.port, reload=False)
