#!/usr/bin/env python3
"""
Main entry point for the shortlink service.

Concurrency: a single uvicorn process serves all connections via async I/O
(FastAPI + asyncpg connection pool + redis.asyncio). The in-memory backend
lives inside that process, so it must not be run with multiple workers.

Usage:
    python app.py

Environment variables:
    STORAGE_BACKEND - 'memory' (default) or 'postgres'
    DATABASE_URL - PostgreSQL DSN (or DB_USER/DBUSER, DB_PASSWORD/DBPASS, DB_HOST, DB_PORT, DB_NAME)
    DATABASE_CREATE_TABLES - Set to 'true' to create the short_links table
    REDIS_URL - Redis connection URL (optional)
    BASE_URL - Base URL for short links
    PORT - Port to listen on
    REDIRECT_STATUS - Redirect status code (default 302 memory, 301 postgres)
    SHUTDOWN_TIMEOUT_SECONDS - Graceful shutdown window
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from shortlink.config import load_config
from shortlink.service import build_service
from shortlink.common.logging_config import setup_logging
from shortlink_web import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info(f"Starting shortlink service ({config.storage_backend} backend)...")

    # A StorageError here aborts startup; the server exits non-zero
    service = await build_service(config, logger)
    app.state.service = service

    logger.info("Service started successfully")

    try:
        yield
    finally:
        # Runs after uvicorn has drained in-flight requests
        logger.info("Shutting down shortlink service...")
        await service.close()
        logger.info("Service stopped")


def install_signal_handlers(server: uvicorn.Server, logger) -> None:
    """Route SIGINT/SIGTERM to ``server.should_exit``.

    While serving, uvicorn swaps in its own handlers and drains in-flight
    requests itself. On the way out it restores these and re-raises the
    signal it caught, so they also run after the drain. Without them that
    re-raise would end the process with KeyboardInterrupt or a signal
    exit instead of returning from ``main``.
    """

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, shutting down")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("shortlink service")
    logger.info(f"Configuration: {config.safe_dump()}")

    app = create_app(
        service_instance=None,  # Set in lifespan
        config=config,
        lifespan=lifespan,
        logger=logger,
    )

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=False,
        timeout_graceful_shutdown=config.shutdown_timeout_seconds,
    )

    server = uvicorn.Server(uvicorn_config)

    install_signal_handlers(server, logger)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)

    if not server.started:
        logger.error("Server failed to start")
        sys.exit(1)

    logger.info("Server exited gracefully")


if __name__ == "__main__":
    main()
