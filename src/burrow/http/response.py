"""The response value a handler may return, and JSON serialisation.

Handlers usually return plain data, which the dispatcher passes through
:func:`json_response`. Returning a :class:`Response` bypasses that and
is sent as-is.
"""

import json
from dataclasses import dataclass, replace
from typing import Any

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


@dataclass(frozen=True, slots=True)
class Response:
    """An immutable HTTP response.

    ``with_*`` methods return modified copies::

        Response("created").with_status(201).with_header("Location", "/users/7")
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = JSON_CONTENT_TYPE
    headers: tuple[tuple[str, str], ...] = ()

    def with_status(self, status: int) -> "Response":
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> "Response":
        return replace(self, headers=(*self.headers, (name, value)))

    def with_content_type(self, content_type: str) -> "Response":
        return replace(self, content_type=content_type)

    @property
    def body_bytes(self) -> bytes:
        return self.body if isinstance(self.body, bytes) else self.body.encode("utf-8")

    @property
    def text(self) -> str:
        return self.body_bytes.decode("utf-8")

    def json(self) -> Any:
        """Decode the body as JSON."""
        return json.loads(self.body_bytes)


def json_response(data: Any, status: int = 200) -> Response:
    """Serialise *data* as compact JSON.

    ``None`` becomes an empty body rather than ``null``. Values the
    encoder does not know are rendered with ``str()``.
    """
    body = "" if data is None else json.dumps(data, default=str, separators=(",", ":"))
    return Response(body=body, status=status)
