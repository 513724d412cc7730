"""Serve an onion App with pounce.

pounce is imported lazily so onion itself imports without it. Install
the ``server`` extra to use ``App.run()``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from onion.app import App

logger = logging.getLogger("onion.server")


def serve(
    app: App,
    host: str,
    port: int,
    *,
    workers: int = 1,
    reload: bool = False,
    log_level: str = "info",
) -> None:
    """Start a pounce server with the live App object.

    pounce's ``run()`` takes an import string, but here we already hold
    the ASGI callable, so ``pounce.Server`` is used directly.

    Args:
        app: The onion App (an ASGI callable).
        host: Bind host address.
        port: Bind port number.
        workers: Worker count.
        reload: Restart on file changes (development only).
        log_level: pounce log level.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=workers,
        reload=reload,
        log_level=log_level,
    )
    logger.info("Onion server running on %s:%d", host, port)
    Server(config, app).run()
