# src/cms_backend/cli.py
from __future__ import annotations

import argparse
import asyncio
import logging
from typing import Optional, Sequence

import uvicorn

from cms_backend.config import settings
from cms_backend.utils.database import build_engine, init_models
from cms_backend.utils.logger import setup_logging

logger = logging.getLogger(__name__)


async def _migrate(database_url: Optional[str]) -> None:
    engine = build_engine(database_url)
    try:
        await init_models(engine)
    finally:
        await engine.dispose()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="cms-backend")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="run the HTTP server")
    serve.add_argument("--host", default=settings.HOST)
    serve.add_argument("--port", type=int, default=settings.PORT)
    serve.add_argument("--reload", action="store_true")

    migrate = sub.add_parser("migrate", help="create database tables and exit")
    migrate.add_argument("--database-url", default=None)

    args = parser.parse_args(argv)
    setup_logging()

    if args.command == "serve":
        uvicorn.run(
            "cms_backend.app:create_app",
            factory=True,
            host=args.host,
            port=args.port,
            reload=args.reload,
            log_level=settings.LOG_LEVEL.lower(),
        )
        return 0

    asyncio.run(_migrate(args.database_url))
    logger.info("migration finished")
    return 0
