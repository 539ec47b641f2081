"""Application entry point — initializes the store and serves the command surface."""

from __future__ import annotations

import json
import logging
import sys
from contextlib import asynccontextmanager

import uvicorn

from catalogdesk.config import load_config
from catalogdesk.storage import StoreHandle, StoreUnavailable
from catalogdesk.web.app import create_app

logger = logging.getLogger("catalogdesk")


def _setup_logging(log_level: str, log_format: str) -> None:
    """Configure root logger based on config."""
    level = getattr(logging, log_level.upper(), logging.INFO)

    if log_format == "json":
        formatter = logging.Formatter(
            json.dumps(
                {
                    "time": "%(asctime)s",
                    "level": "%(levelname)s",
                    "logger": "%(name)s",
                    "message": "%(message)s",
                }
            )
        )
    else:
        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def main() -> None:
    """Load config, set up logging, open the store, and serve until shutdown."""
    config = load_config()
    _setup_logging(config.log_level, config.log_format)

    logger.info(
        "catalogdesk starting (env=%s, db=%s)", config.app_env, config.database_path
    )

    store = StoreHandle(config.database_path)
    try:
        store.initialize()
    except StoreUnavailable:
        logger.exception("Database initialization failed; exiting")
        sys.exit(1)

    @asynccontextmanager
    async def lifespan(app):
        yield
        logger.info("Closing database")
        store.close()

    app = create_app(store, lifespan=lifespan)

    uvicorn.run(app, host=config.web_host, port=config.web_port)


if __name__ == "__main__":
    main()
