"""Route loading: turn a discovered file into a :class:`RouteDefinition`.

The table builder never imports modules itself. It asks a
:class:`RouteLoader`, so discovery and compilation can be exercised
with in-memory definitions and no module state.

A route source may take one of three shapes::

    # routes/users/[id].py: method-named functions
    def get(request, id): ...
    def delete(request, id): ...

    # routes/health.py: a default callable, used for every method
    def default(request): ...

    # any callable object handed to normalize_source()
    normalize_source(lambda request: "ok", origin="inline")

Optional ``path`` (str) and ``priority`` (number) exports override the
derived template and the default priority.
"""

import importlib.util
import logging
import re
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType, ModuleType
from typing import Any, Protocol

from burrow._internal.types import Handler
from burrow.errors import RouteLoadError
from burrow.routing.route import HTTP_METHODS, RouteDefinition, SourceKind

logger = logging.getLogger("burrow.routing")

_UNSAFE_NAME_RE = re.compile(r"\W")


class RouteLoader(Protocol):
    """Resolve a route file path to a route definition."""

    def load(self, file: Path) -> RouteDefinition: ...


def _export(source: object, name: str) -> Any:
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)


def normalize_source(source: object, origin: str | Path) -> RouteDefinition:
    """Inspect a route source once and normalise its handler bindings.

    *source* may be a module, any object with method attributes, a
    mapping of exports, or a callable.

    Raises:
        RouteLoadError: If the source exposes no usable handler, or its
            ``path``/``priority`` exports have the wrong type.
    """
    handlers: dict[str, Handler] = {}
    for method in sorted(HTTP_METHODS):
        func = _export(source, method)
        if func is not None and callable(func):
            handlers[method] = func

    fallback: Handler | None = None
    kind: SourceKind = "methods"
    if callable(source) and not isinstance(source, (ModuleType, type)):
        fallback = source
        kind = "callable"
    else:
        default = _export(source, "default")
        if default is not None and callable(default):
            fallback = default
            kind = "default"

    if not handlers and fallback is None:
        msg = (
            "exports no method handler ("
            + ", ".join(sorted(HTTP_METHODS))
            + "), no 'default' callable, and is not callable"
        )
        raise RouteLoadError(origin, msg)

    path = _export(source, "path")
    if path is not None and not isinstance(path, str):
        raise RouteLoadError(origin, f"'path' must be a string, got {type(path).__name__}")

    priority = _export(source, "priority")
    if priority is not None and (
        isinstance(priority, bool) or not isinstance(priority, (int, float))
    ):
        raise RouteLoadError(
            origin, f"'priority' must be a number, got {type(priority).__name__}"
        )

    return RouteDefinition(
        source=str(origin),
        kind=kind,
        handlers=MappingProxyType(handlers),
        fallback=fallback,
        path=path or None,
        priority=priority,
    )


class ModuleLoader:
    """Import route files as isolated Python modules.

    Each file is executed in its own module namespace (nothing is added
    to ``sys.modules``), so two ``index.py`` files never collide.
    """

    __slots__ = ("_count",)

    def __init__(self) -> None:
        self._count = 0

    def load(self, file: Path) -> RouteDefinition:
        definition = normalize_source(self._import(file), file)
        logger.debug(
            "Loaded %s: %s handlers %s",
            file,
            definition.kind,
            ", ".join(definition.handlers) or "-",
        )
        return definition

    def _import(self, file: Path) -> ModuleType:
        self._count += 1
        module_name = f"_burrow_route_{self._count}_{_UNSAFE_NAME_RE.sub('_', file.stem)}"
        spec = importlib.util.spec_from_file_location(module_name, file)
        if spec is None or spec.loader is None:
            raise RouteLoadError(file, "not an importable Python source file")

        module = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(module)
        except Exception as exc:
            raise RouteLoadError(file, f"import failed: {exc!r}") from exc
        return module
