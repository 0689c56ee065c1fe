"""Burrow: filesystem-routed request dispatch.

Drop route modules into a directory and burrow maps each file to a URL::

    routes/
        index.py          -> /
        about.py          -> /about
        users/index.py    -> /users
        users/[id].py     -> /users/{id}

Each module exports method-named functions (``get``, ``post``, ...) or
a ``default`` handler::

    from burrow import App

    app = App("routes")
    app.run()
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "BurrowError",
    "CompiledRoute",
    "ConfigurationError",
    "FileSystemError",
    "HTTPError",
    "NotFound",
    "Request",
    "Resolver",
    "Response",
    "RouteLoadError",
    "RouteMatch",
    "RouteTable",
    "build_route_table",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import burrow`` fast while providing a clean top-level API.
    """
    if name == "App":
        from burrow.app import App

        return App

    if name == "AppConfig":
        from burrow.config import AppConfig

        return AppConfig

    if name == "Request":
        from burrow.http.request import Request

        return Request

    if name == "Response":
        from burrow.http.response import Response

        return Response

    if name in ("CompiledRoute", "RouteMatch"):
        from burrow.routing import route as _route

        return getattr(_route, name)

    if name in ("RouteTable", "build_route_table"):
        from burrow.routing import table as _table

        return getattr(_table, name)

    if name == "Resolver":
        from burrow.routing.resolver import Resolver

        return Resolver

    if name in (
        "BurrowError",
        "ConfigurationError",
        "FileSystemError",
        "HTTPError",
        "NotFound",
        "RouteLoadError",
    ):
        from burrow import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
