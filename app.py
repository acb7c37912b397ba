#!/usr/bin/env python3
"""
Main entry point for the short link service.

Concurrency: every request runs as its own task on the event loop and all of
them share one redis.asyncio client. No in-process lock guards redirect
records; Redis alone orders writes to a key. Set WORKERS > 1 for
multi-process scaling across CPU cores (each worker has its own client).

Usage:
    python app.py

Environment variables:
    SERVER_PORT - Port to listen on
    REDIS_URL - Redis connection URL, host:port, or a bare port
    PASSWORD - Password required to add or delete redirects (optional)
    ADMIN_PASSWORD - Password required to list redirects (defaults to PASSWORD)
    SERVER_HOSTNAME - Public base URL of the server
    MEMBER_FORMAT - 'json' or 'legacy' encoding of the redirect set
    WORKERS - Number of uvicorn worker processes (default 1)
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import load_config
from shortlinks.common.logging_config import setup_logging
from shortlinks.idgen import IdGenerator
from shortlinks.records import RedirectManager
from shortlinks.store.redis_store import RedisStore
from web_app import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting short link service...")

    redis_url = config.normalized_redis_url
    logger.info(f"Connecting to Redis at {redis_url}")
    store = RedisStore(redis_url=redis_url, logger=logger.getChild("store"))
    await store.connect()

    manager = RedirectManager(
        store=store,
        generator=IdGenerator(length=config.id_length),
        password=config.password,
        admin_password=config.admin_password,
        logger=logger.getChild("records"),
        member_format=config.member_format,
    )

    app.state.store = store
    app.state.manager = manager

    if config.password is None:
        logger.warning("No password configured: anyone can add and delete redirects")
    if config.admin_password is None:
        logger.info("No admin password configured: listing redirects is disabled")

    logger.info("Service started successfully")

    yield

    logger.info("Shutting down short link service...")
    await manager.close()
    logger.info("Service stopped")


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("Short Link Service")
    logger.info(f"Configuration: {config.public_dump()}")

    # Store and manager are created in the lifespan, inside the server's event loop
    app = create_app(
        store_instance=None,
        manager_instance=None,
        config=config,
    )
    app.state.logger = logger
    app.router.lifespan_context = lifespan

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.server_port,
        workers=config.workers,
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.server_port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
