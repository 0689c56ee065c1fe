"""The burrow App: a filesystem-routed ASGI application.

The route table is built exactly once, before the first request is
served: during ASGI lifespan startup, on an explicit :meth:`App.build`,
or on the first HTTP request, whichever comes first.
"""

import logging
import threading
from pathlib import Path

from burrow._internal.types import Receive, Scope, Send
from burrow.config import AppConfig, configure_logging
from burrow.routing.loader import RouteLoader
from burrow.routing.resolver import Resolver
from burrow.routing.table import RouteTable, build_route_table
from burrow.server.handler import handle_request

logger = logging.getLogger("burrow.server")


class App:
    """A filesystem-routed ASGI application.

    Usage::

        from burrow import App

        app = App("routes")          # routes/users/[id].py -> /users/{id}
        app.run()

    Args:
        routes_dir: Directory scanned for route modules.
        config: Application configuration.
        loader: Route loader; defaults to importing Python modules.
    """

    __slots__ = ("_build_lock", "_loader", "_resolver", "config", "routes_dir")

    def __init__(
        self,
        routes_dir: str | Path,
        *,
        config: AppConfig | None = None,
        loader: RouteLoader | None = None,
    ) -> None:
        self.routes_dir = Path(routes_dir)
        self.config = config or AppConfig()
        self._loader = loader
        self._resolver: Resolver | None = None
        self._build_lock = threading.Lock()

    @property
    def routes(self) -> RouteTable:
        """The route table, building it first if necessary."""
        return self._ensure_built().table

    def build(self) -> RouteTable:
        """Build the route table now.

        Raises ``FileSystemError`` or ``RouteLoadError`` on a bad routes
        tree. Calling it again returns the existing table.
        """
        return self._ensure_built().table

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Configure logging, build the route table and serve the app with pounce.

        *host* and *port* override the config when given; ``port=0`` asks
        the OS for a free port.
        """
        from burrow.server.runner import run_server

        configure_logging(self.config.log_level)
        self._ensure_built()
        run_server(
            self,
            host if host is not None else self.config.host,
            port if port is not None else self.config.port,
        )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        resolver = self._ensure_built()
        await handle_request(scope, receive, send, resolver=resolver, debug=self.config.debug)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Build the route table at startup; report failure to the server."""
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    self._ensure_built()
                except Exception as exc:
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_built(self) -> Resolver:
        """Thread-safe one-time build with double-check locking."""
        resolver = self._resolver
        if resolver is not None:
            return resolver
        with self._build_lock:
            if self._resolver is None:
                table = build_route_table(
                    self.routes_dir,
                    extensions=self.config.extensions,
                    loader=self._loader,
                )
                self._resolver = Resolver(table, match_timeout=self.config.match_timeout)
            return self._resolver
