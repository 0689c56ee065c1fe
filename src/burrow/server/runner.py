"""Serve a burrow App with the pounce ASGI server.

pounce is an optional dependency (``pip install burrow[server]``); it
is imported only when a server is actually started.
"""

from burrow.errors import ConfigurationError


def run_server(
    app: object,
    host: str,
    port: int,
    *,
    workers: int = 1,
    app_path: str | None = None,
) -> None:
    """Start a pounce server with the given ASGI app.

    Args:
        app: ASGI callable (burrow App instance).
        host: Bind host address.
        port: Bind port number.
        workers: Worker count.
        app_path: Optional ``"module:attribute"`` import string, forwarded
            to pounce so each worker can import the app itself.
    """
    try:
        from pounce.config import ServerConfig
        from pounce.server import Server
    except ImportError:
        msg = (
            "burrow.server requires 'pounce' to serve HTTP. "
            "Install with: pip install burrow[server]"
        )
        raise ConfigurationError(msg) from None

    config = ServerConfig(host=host, port=port, workers=workers)
    server = Server(config, app, app_path=app_path)
    server.run()
