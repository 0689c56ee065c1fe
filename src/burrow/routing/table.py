"""Route table construction.

Discovers route files, loads each one through a :class:`RouteLoader`,
compiles its template and orders the result by priority. Built once at
startup; the table is read-only afterwards.

Priority rules:

- an explicit, non-zero ``priority`` wins;
- otherwise an index route gets ``-1`` so its non-index siblings are
  preferred when both could answer the same URL;
- otherwise ``0``.

Higher priority sorts first. Equal priorities keep discovery order.
"""

import logging
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path
from typing import overload

from burrow.routing.discovery import DEFAULT_EXTENSIONS, discover_routes
from burrow.routing.loader import ModuleLoader, RouteLoader
from burrow.routing.pattern import compile_template
from burrow.routing.route import CompiledRoute, RouteDefinition, RouteMatch

logger = logging.getLogger("burrow.routing")

INDEX_PRIORITY = -1


def effective_priority(priority: int | float | None, *, is_index: bool) -> int | float:
    """Resolve a route's priority, treating ``None`` and ``0`` as unset."""
    if priority:
        return priority
    return INDEX_PRIORITY if is_index else 0


def derive_path(root: Path, file: Path) -> str:
    """Template for *file* relative to *root*: forward slashes, no extension.

    ``derive_path(Path("routes"), Path("routes/users/[id].py"))`` ->
    ``"/users/[id]"``
    """
    relative = file.relative_to(root).as_posix()
    if file.suffix:
        relative = relative.removesuffix(file.suffix)
    return "/" + relative


def compile_route(definition: RouteDefinition, template: str | None = None) -> CompiledRoute:
    """Compile *definition* into a :class:`CompiledRoute`.

    *template* is used when the definition declares no ``path`` of its own.
    """
    source_template = definition.path or template
    if source_template is None:
        msg = f"Route {definition.source!r} has no path and none was derived."
        raise ValueError(msg)

    compiled = compile_template(source_template)
    return CompiledRoute(
        path=compiled.path,
        pattern=compiled.regex,
        is_index=compiled.is_index,
        priority=effective_priority(definition.priority, is_index=compiled.is_index),
        param_names=compiled.param_names,
        handlers=definition.handlers,
        fallback=definition.fallback,
        source=definition.source,
        kind=definition.kind,
    )


class RouteTable(Sequence[CompiledRoute]):
    """Immutable, priority-ordered sequence of compiled routes.

    Routes passed in are sorted by descending priority; the sort is
    stable, so ties keep the order they were given in.

    Usage::

        table = build_route_table("routes")
        match = table.lookup("GET", "/users/42")
    """

    __slots__ = ("_routes",)

    def __init__(self, routes: Iterable[CompiledRoute] = ()) -> None:
        self._routes: tuple[CompiledRoute, ...] = tuple(
            sorted(routes, key=lambda route: -route.priority)
        )

    @overload
    def __getitem__(self, index: int) -> CompiledRoute: ...
    @overload
    def __getitem__(self, index: slice) -> tuple[CompiledRoute, ...]: ...
    def __getitem__(self, index: int | slice) -> CompiledRoute | tuple[CompiledRoute, ...]:
        return self._routes[index]

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[CompiledRoute]:
        return iter(self._routes)

    def __repr__(self) -> str:
        return f"RouteTable({[route.path for route in self._routes]!r})"

    @property
    def routes(self) -> tuple[CompiledRoute, ...]:
        return self._routes

    def lookup(self, method: str, url: str) -> RouteMatch | None:
        """First route, in table order, matching *url* with a handler for *method*.

        Sequential counterpart of :meth:`Resolver.resolve`; both select
        the same route for every request.
        """
        for route in self._routes:
            match = route.match(method, url)
            if match is not None:
                return match
        return None


def build_route_table(
    root: str | Path,
    *,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    loader: RouteLoader | None = None,
) -> RouteTable:
    """Discover, load and compile every route under *root*.

    Args:
        root: The routes directory.
        extensions: Allowed route file extensions.
        loader: Resolves a file to a :class:`RouteDefinition`. Defaults to
            :class:`ModuleLoader`, which imports Python modules.

    Raises:
        FileSystemError: If the routes directory cannot be read.
        RouteLoadError: If any route file cannot be loaded or exposes no
            handler. No partial table is returned.
    """
    root_path = Path(root)
    files = discover_routes(root_path, extensions)
    route_loader: RouteLoader = loader if loader is not None else ModuleLoader()

    routes: list[CompiledRoute] = []
    for file in files:
        definition = route_loader.load(file)
        routes.append(compile_route(definition, derive_path(root_path, file)))

    table = RouteTable(routes)
    logger.info("Built route table: %d route(s) from %s", len(table), root_path)
    return table
