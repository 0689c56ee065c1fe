"""Emit a burrow Response as ASGI ``http.response.*`` messages."""

from burrow._internal.types import Send
from burrow.http.response import Response

# 1xx, 204 and 304 responses never carry a body
_NO_BODY_STATUSES = frozenset({204, 304})


def _encode_headers(response: Response, length: int) -> list[tuple[bytes, bytes]]:
    headers = [(b"content-type", response.content_type.encode("latin-1"))]
    headers.extend(
        (name.lower().encode("latin-1"), value.encode("latin-1"))
        for name, value in response.headers
    )
    headers.append((b"content-length", str(length).encode("latin-1")))
    return headers


async def send_response(response: Response, send: Send, *, head: bool = False) -> None:
    """Send *response* as one start message and one body message.

    With *head* the ``content-length`` of the full body is still sent
    but the body itself is dropped.
    """
    status = response.status
    if 100 <= status < 200 or status in _NO_BODY_STATUSES:
        body = b""
        length = 0
    else:
        body = response.body_bytes
        length = len(body)
        if head:
            body = b""

    await send(
        {
            "type": "http.response.start",
            "status": status,
            "headers": _encode_headers(response, length),
        }
    )
    await send({"type": "http.response.body", "body": body})
