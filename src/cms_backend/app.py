# src/cms_backend/app.py
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from cms_backend.config import settings
from cms_backend.utils.auth import bearer_guard
from cms_backend.utils.database import build_engine, build_sessionmaker, init_models
from cms_backend.utils.error_handler import register_exception_handlers
from cms_backend.utils.logger import log_requests, setup_logging

from cms_backend.routes.auth_api import auth_api
from cms_backend.routes.department_api import router as department_router
from cms_backend.routes.menu_api import router as menu_router
from cms_backend.routes.role_api import router as role_router
from cms_backend.routes.users_api import router as users_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.DB_AUTO_CREATE:
        await init_models(app.state.engine)
    logger.info("%s started", settings.APP_NAME)
    try:
        yield
    finally:
        await app.state.engine.dispose()
        logger.info("%s stopped", settings.APP_NAME)


def create_app(database_url: Optional[str] = None) -> FastAPI:
    """
    Build an application that owns its own engine and session factory.

    Each call gets a fresh engine, so tests can run apps side by side on
    separate in-memory databases.
    """
    setup_logging()

    app = FastAPI(title=settings.APP_NAME, version="1.0", lifespan=lifespan)

    engine = build_engine(database_url)
    app.state.engine = engine
    app.state.sessionmaker = build_sessionmaker(engine)

    # ----------------------------------------------------------
    # MIDDLEWARE (last registered runs first)
    # ----------------------------------------------------------
    app.middleware("http")(bearer_guard)
    app.middleware("http")(log_requests)
    # outermost, so preflight requests are answered before the bearer guard
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ----------------------------------------------------------
    # CUSTOM ERROR HANDLERS
    # ----------------------------------------------------------
    register_exception_handlers(app)

    # ----------------------------------------------------------
    # ROUTERS
    # ----------------------------------------------------------
    app.include_router(auth_api)
    app.include_router(menu_router)
    app.include_router(role_router)
    app.include_router(users_router)
    app.include_router(department_router)

    @app.get("/health", include_in_schema=False, response_class=PlainTextResponse)
    async def health():
        return "ok"

    return app
