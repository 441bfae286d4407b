"""Threaded pounce server.

Runs the inkwell App on a fixed pool of pounce worker threads.  Each
worker handles a request to completion; file reads block only that
worker.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from inkwell.app import App

logger = logging.getLogger("inkwell.server")


def run_server(
    app: App,
    host: str = "127.0.0.1",
    port: int = 8000,
    workers: int = 10,
    *,
    log_level: str = "info",
) -> None:
    """Start a pounce server for *app*.

    Pounce's ``run()`` takes an import string (e.g., ``"myapp:app"``),
    but we hold a live ``App`` object, so ``pounce.Server`` is used
    directly with the ASGI callable.

    Args:
        app: The inkwell App (frozen before the first worker starts).
        host: Bind host address.
        port: Bind port number.
        workers: Number of worker threads.
        log_level: Log level (debug, info, warning, error, critical).
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=workers,
        log_level=log_level,
    )
    logger.debug("listening on %s:%d with %d workers", host, port, workers)
    server = Server(config, app)
    server.run()
