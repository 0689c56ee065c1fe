"""Tests for burrow.server.handler: signature-driven kwargs and dispatch."""

from typing import Any

import pytest

from burrow.http.query import QueryParams
from burrow.http.request import Request
from burrow.routing.loader import normalize_source
from burrow.routing.resolver import Resolver
from burrow.routing.table import RouteTable, compile_route
from burrow.server.handler import _build_handler_kwargs, handle_request


def _request(**params: str) -> Request:
    return Request(method="GET", path="/x", path_params=params, query=QueryParams("page=2"))


class TestBuildHandlerKwargs:
    def test_request_by_name(self) -> None:
        def handler(request): ...

        req = _request()
        assert _build_handler_kwargs(handler, req) == {"request": req}

    def test_request_by_annotation(self) -> None:
        def handler(req: Request): ...

        req = _request()
        assert _build_handler_kwargs(handler, req) == {"req": req}

    def test_path_param_converted_by_annotation(self) -> None:
        def handler(id: int): ...

        assert _build_handler_kwargs(handler, _request(id="42")) == {"id": 42}

    def test_failed_conversion_keeps_string(self) -> None:
        def handler(id: int): ...

        assert _build_handler_kwargs(handler, _request(id="abc")) == {"id": "abc"}

    def test_unannotated_param_is_string(self) -> None:
        def handler(slug): ...

        assert _build_handler_kwargs(handler, _request(slug="hello")) == {"slug": "hello"}

    def test_query(self) -> None:
        def handler(query): ...

        kwargs = _build_handler_kwargs(handler, _request())
        assert kwargs["query"]["page"] == "2"

    def test_unknown_and_variadic_ignored(self) -> None:
        def handler(other=None, *args: Any, **kwargs: Any): ...

        assert _build_handler_kwargs(handler, _request(id="1")) == {}


def _resolver(template: str, source: dict[str, Any]) -> Resolver:
    return Resolver(RouteTable([compile_route(normalize_source(source, template), template)]))


def _scope(method: str, path: str, query: bytes = b"") -> dict[str, Any]:
    return {
        "type": "http",
        "method": method,
        "path": path,
        "query_string": query,
        "headers": [],
    }


async def _receive() -> dict[str, Any]:
    return {"type": "http.request", "body": b"", "more_body": False}


@pytest.mark.anyio
class TestHandleRequest:
    async def _dispatch(self, resolver: Resolver, scope: dict[str, Any], *, debug: bool = False):
        messages: list[dict[str, Any]] = []

        async def send(message: dict[str, Any]) -> None:
            messages.append(message)

        await handle_request(scope, _receive, send, resolver=resolver, debug=debug)
        return messages

    async def test_dispatches_to_matched_handler(self) -> None:
        resolver = _resolver("/items/[id]", {"get": lambda id: {"id": id}})
        messages = await self._dispatch(resolver, _scope("GET", "/items/7"))

        assert messages[0]["status"] == 200
        assert messages[1]["body"] == b'{"id":"7"}'

    async def test_async_handler(self) -> None:
        async def get(request):
            return {"method": request.method}

        messages = await self._dispatch(_resolver("/a", {"get": get}), _scope("GET", "/a"))
        assert messages[1]["body"] == b'{"method":"GET"}'

    async def test_encoded_question_mark_is_part_of_param(self) -> None:
        resolver = _resolver("/files/[name]", {"get": lambda name, query: [name, dict(query)]})
        messages = await self._dispatch(resolver, _scope("GET", "/files/a?admin=1"))

        assert messages[0]["status"] == 200
        assert messages[1]["body"] == b'["a?admin=1",{}]'

    async def test_miss_is_404(self) -> None:
        resolver = _resolver("/a", {"get": lambda: {}})
        messages = await self._dispatch(resolver, _scope("POST", "/a"))

        assert messages[0]["status"] == 404
        assert messages[1]["body"] == b'{"message":"Not found","status":404}'

    async def test_handler_exception_is_500(self, caplog: pytest.LogCaptureFixture) -> None:
        def get():
            raise RuntimeError("kaput")

        with caplog.at_level("ERROR", logger="burrow.server"):
            messages = await self._dispatch(_resolver("/a", {"get": get}), _scope("GET", "/a"))

        assert messages[0]["status"] == 500
        assert messages[1]["body"] == b'{"message":"kaput","status":500}'
        assert any("GET /a" in record.getMessage() for record in caplog.records)

    async def test_debug_adds_error_type(self) -> None:
        def get():
            raise KeyError("k")

        messages = await self._dispatch(
            _resolver("/a", {"get": get}), _scope("GET", "/a"), debug=True
        )
        assert b'"error":"KeyError"' in messages[1]["body"]

    async def test_non_http_scope_ignored(self) -> None:
        resolver = _resolver("/a", {"get": lambda: {}})
        assert await self._dispatch(resolver, {"type": "websocket", "path": "/a"}) == []
