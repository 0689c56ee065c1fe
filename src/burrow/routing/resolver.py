"""Per-request route resolution.

Every route's predicate is evaluated concurrently in an anyio task
group. Outcomes land in a slot indexed by table position and the
winner is the lowest-indexed hit, so the selected route never depends
on which predicate finished first.

Resolution never raises for a miss: ``None`` means not found.
"""

import logging
from typing import Protocol

import anyio

from burrow._internal.invoke import invoke
from burrow.routing.route import CompiledRoute, RouteMatch
from burrow.routing.table import RouteTable

logger = logging.getLogger("burrow.routing")


class ResolvableRequest(Protocol):
    """The two request attributes resolution reads."""

    @property
    def method(self) -> str: ...

    @property
    def url(self) -> str: ...


class Resolver:
    """Select at most one handler per request from a :class:`RouteTable`.

    Usage::

        resolver = Resolver(build_route_table("routes"))
        match = await resolver.resolve(request)
        if match is None:
            ...  # 404
        request = request.with_match(match)
        result = await invoke(match.handler, request)

    Args:
        table: The immutable route table.
        match_timeout: Seconds one predicate may take before it is
            treated as a miss. ``None`` disables the limit.
    """

    __slots__ = ("_match_timeout", "_table")

    def __init__(self, table: RouteTable, *, match_timeout: float | None = None) -> None:
        self._table = table
        self._match_timeout = match_timeout

    @property
    def table(self) -> RouteTable:
        return self._table

    async def resolve(self, request: ResolvableRequest) -> RouteMatch | None:
        """Return the first matching route in table order, or ``None``."""
        method = request.method.lower()
        url = request.url or "/"
        routes = self._table.routes
        outcomes: list[RouteMatch | None] = [None] * len(routes)

        async def _evaluate(index: int, route: CompiledRoute) -> None:
            outcomes[index] = await self._evaluate(route, method, url)

        async with anyio.create_task_group() as tg:
            for index, route in enumerate(routes):
                tg.start_soon(_evaluate, index, route)

        for outcome in outcomes:
            if outcome is not None:
                return outcome

        logger.debug("No route for %s %s", method.upper(), url)
        return None

    async def _evaluate(self, route: CompiledRoute, method: str, url: str) -> RouteMatch | None:
        if self._match_timeout is None:
            return await invoke(route.match, method, url)

        with anyio.move_on_after(self._match_timeout) as scope:
            return await invoke(route.match, method, url)
        if scope.cancelled_caught:
            logger.warning(
                "Route %s (%s) did not answer within %.3fs; treating as no match",
                route.path,
                route.source,
                self._match_timeout,
            )
        return None
