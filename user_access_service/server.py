"""Process entry point: wire the service together and run the HTTP listener.

:func:`main` is the composition root. It is only invoked by the
``user-access-service`` console script or ``python -m
user_access_service.server``; importing this module never starts a server.
"""

from __future__ import annotations

import logging
import signal
from contextlib import contextmanager
from typing import Any, Callable, Iterator, List, Optional

import uvicorn
from fastapi import FastAPI

from user_access_service.app import create_app
from user_access_service.config import DEFAULT_PORT, load_settings, setup_logging
from user_access_service.database import Database

logger = logging.getLogger(__name__)

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class Listener(uvicorn.Server):
    """uvicorn server whose shutdown signals are handled by :func:`serve`."""

    def install_signal_handlers(self) -> None:
        pass

    @contextmanager
    def capture_signals(self) -> Iterator[None]:
        yield

    async def startup(self, sockets: Optional[List[Any]] = None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            logger.info("listening on port %s", self.config.port)


def make_close_handler(server: uvicorn.Server) -> Callable[..., None]:
    """Return a signal handler that asks ``server`` to stop.

    The handler may run any number of times; ``Server closed`` is logged by
    :func:`serve` once the listener has actually shut down.
    """

    def close(signum: Optional[int] = None, frame: Any = None) -> None:
        server.should_exit = True
        logger.info("Shutdown requested by signal %s", signum)

    return close


def serve(app: FastAPI, host: str = "0.0.0.0", port: int = DEFAULT_PORT) -> None:
    """Run ``app`` until ``SIGINT`` or ``SIGTERM`` is received."""
    server = Listener(uvicorn.Config(app, host=host, port=port, log_config=None))
    close = make_close_handler(server)
    for signum in SHUTDOWN_SIGNALS:
        signal.signal(signum, close)
    server.run()
    logger.info("Server closed")


def main() -> None:
    settings = load_settings()
    setup_logging(settings.log_level)

    database = Database.from_settings(settings, pool_pre_ping=True)
    app = create_app(
        database, root_path=settings.root_path, on_shutdown=[database.dispose]
    )
    serve(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
