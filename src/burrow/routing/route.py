"""RouteDefinition, CompiledRoute and RouteMatch frozen dataclasses."""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal, TypeAlias

from burrow._internal.types import Handler
from burrow.routing.pattern import match_url

# HTTP method names recognised as handler exports
HTTP_METHODS = frozenset({"get", "post", "put", "delete", "patch", "head", "options"})

# How a route source exposes its handlers, resolved once at load time:
#   "methods"  -- only method-named bindings (get, post, ...)
#   "callable" -- the source object is itself the handler
#   "default"  -- a ``default`` callable export
SourceKind: TypeAlias = Literal["methods", "callable", "default"]


@dataclass(frozen=True, slots=True)
class RouteDefinition:
    """A route source normalised into a ``{method -> handler}`` mapping.

    Ephemeral: produced by a loader during the build phase and consumed
    by :func:`~burrow.routing.table.compile_route`.

    Attributes:
        source: Where the definition came from (usually a file path).
        kind: The export shape the source used.
        handlers: Lowercase method name to handler.
        fallback: Handler used for any method without its own binding.
        path: Explicit URL template, or ``None`` to derive from the file.
        priority: Explicit priority, or ``None``.
    """

    source: str
    kind: SourceKind
    handlers: Mapping[str, Handler] = field(default_factory=lambda: MappingProxyType({}))
    fallback: Handler | None = None
    path: str | None = None
    priority: int | float | None = None


@dataclass(frozen=True, slots=True)
class CompiledRoute:
    """A route compiled once at build time and never changed afterwards.

    Owned by the :class:`~burrow.routing.table.RouteTable`.
    """

    path: str
    pattern: re.Pattern[str]
    is_index: bool
    priority: int | float
    param_names: tuple[str, ...]
    handlers: Mapping[str, Handler]
    fallback: Handler | None
    source: str
    kind: SourceKind

    @property
    def methods(self) -> frozenset[str]:
        """Methods with an explicit binding. Empty when only a fallback exists."""
        return frozenset(self.handlers)

    def handler_for(self, method: str) -> Handler | None:
        """Return the handler for *method* (case-insensitive), if any.

        Lookup order: the method's own binding, then the fallback.
        """
        return self.handlers.get(method.lower()) or self.fallback

    def match(self, method: str, url: str) -> "RouteMatch | None":
        """Match *url* and *method* against this route.

        Both must succeed; a URL match without a handler for the method
        is a miss.
        """
        handler = self.handler_for(method)
        if handler is None:
            return None
        result = match_url(self.pattern, self.param_names, url)
        if result is None:
            return None
        params, query = result
        return RouteMatch(route=self, handler=handler, params=params, query=query)


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful resolution."""

    route: CompiledRoute
    handler: Handler
    params: dict[str, str]
    query: str = ""
