"""ASGI handler: translates ASGI scope/messages to burrow types.

The only component that touches raw ASGI HTTP messages. Converts the
scope to a typed Request, resolves it against the route table, invokes
the selected handler and sends the serialized result back.
"""

import inspect
from typing import Any

from burrow._internal.invoke import invoke
from burrow._internal.types import Handler, Receive, Scope, Send
from burrow.errors import HTTPError, NotFound
from burrow.http.request import Request
from burrow.http.response import Response, json_response
from burrow.routing.resolver import Resolver
from burrow.routing.route import RouteMatch
from burrow.server.errors import handle_http_error, handle_internal_error
from burrow.server.sender import send_response


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    resolver: Resolver,
    debug: bool = False,
) -> None:
    """Process a single HTTP request through resolution and dispatch."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)

    try:
        match = await resolver.resolve(request)
        if match is None:
            raise NotFound()
        response = await _invoke_handler(match, request)
    except HTTPError as exc:
        response = handle_http_error(exc)
    except Exception as exc:
        response = handle_internal_error(exc, request, debug=debug)

    await send_response(response, send, head=request.method == "HEAD")


async def _invoke_handler(match: RouteMatch, request: Request) -> Response:
    """Call the matched handler with an enriched request; serialize the result."""
    request = request.with_match(match)
    kwargs = _build_handler_kwargs(match.handler, request)
    result = await invoke(match.handler, **kwargs)
    if isinstance(result, Response):
        return result
    return json_response(result)


def _build_handler_kwargs(handler: Handler, request: Request) -> dict[str, Any]:
    """Inspect the handler signature and build kwargs.

    Resolution order:
    1. ``request`` parameter (by name or ``Request`` annotation)
    2. Path parameters (by name, converted to the annotated type when possible)
    3. ``query`` parameter receives the request's query parameters
    """
    sig = inspect.signature(handler, eval_str=True)
    kwargs: dict[str, Any] = {}

    for name, param in sig.parameters.items():
        if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
            continue
        if name == "request" or param.annotation is Request:
            kwargs[name] = request
        elif name in request.path_params:
            value = request.path_params[name]
            if param.annotation is not inspect.Parameter.empty:
                try:
                    kwargs[name] = param.annotation(value)
                except (ValueError, TypeError):
                    kwargs[name] = value
            else:
                kwargs[name] = value
        elif name == "query":
            kwargs[name] = request.query

    return kwargs
