"""The request value handed to route handlers.

Request metadata is frozen when the ASGI scope is read. Resolution
never writes onto an existing request: :meth:`Request.with_match`
returns a copy carrying the matched path parameters and query.
"""

from __future__ import annotations

import json
from collections.abc import AsyncIterator
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any
from urllib.parse import unquote

from burrow._internal.types import Receive
from burrow.http.headers import Headers
from burrow.http.query import QueryParams

if TYPE_CHECKING:
    from burrow.routing.route import RouteMatch


async def _no_body() -> dict[str, Any]:
    return {"type": "http.request", "body": b"", "more_body": False}


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``url`` (path plus ``?query``) is what the router matches against.
    The body is read lazily through :meth:`body`, :meth:`text`,
    :meth:`json` or :meth:`stream`.
    """

    method: str
    path: str
    headers: Headers = field(default_factory=Headers)
    query: QueryParams = field(default_factory=QueryParams)
    path_params: dict[str, str] = field(default_factory=dict)
    http_version: str = "1.1"
    client: tuple[str, int] | None = None

    _receive: Receive = field(default=_no_body, repr=False, compare=False)
    # holds the read body; shared by copies made with with_match()
    _cache: dict[str, bytes] = field(default_factory=dict, repr=False, compare=False)

    @property
    def url(self) -> str:
        """Path plus ``?query``, as the router matches it.

        ``path`` is already percent-decoded, so ``%`` and ``?`` inside it are
        re-encoded; a decoded ``?`` never starts the query.
        """
        target = self.path.replace("%", "%25").replace("?", "%3F")
        qs = self.query.raw
        return f"{target}?{qs}" if qs else target

    @property
    def content_type(self) -> str | None:
        return self.headers.get("content-type")

    def with_match(self, match: RouteMatch) -> Request:
        """Copy of this request with *match*'s query and percent-decoded params."""
        return replace(
            self,
            path_params={name: unquote(value) for name, value in match.params.items()},
            query=QueryParams(match.query) if match.query else self.query,
        )

    async def stream(self) -> AsyncIterator[bytes]:
        """Yield body chunks as they arrive. Consumes the ASGI receive channel."""
        more = True
        while more:
            message = await self._receive()
            if message["type"] == "http.disconnect":
                return
            chunk = message.get("body", b"")
            if chunk:
                yield chunk
            more = message.get("more_body", False)

    async def body(self) -> bytes:
        """The whole body. Read once, then served from cache."""
        cached = self._cache.get("body")
        if cached is None:
            cached = b"".join([chunk async for chunk in self.stream()])
            self._cache["body"] = cached
        return cached

    async def text(self) -> str:
        return (await self.body()).decode("utf-8")

    async def json(self) -> Any:
        return json.loads(await self.body())

    @classmethod
    def from_asgi(cls, scope: dict[str, Any], receive: Receive) -> Request:
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=Headers(tuple(scope.get("headers", ()))),
            query=QueryParams(scope.get("query_string", b"")),
            http_version=scope.get("http_version", "1.1"),
            client=tuple(client) if client else None,
            _receive=receive,
        )
