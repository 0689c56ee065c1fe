"""Parsed query string parameters."""

from urllib.parse import parse_qsl

from burrow.http.multidict import FrozenMultiDict


class QueryParams(FrozenMultiDict):
    """Query parameters, percent-decoded, blank values kept.

    Accepts the ASGI ``query_string`` bytes or the text after ``?`` in
    a matched URL.
    """

    __slots__ = ("_raw",)

    def __init__(self, query_string: bytes | str = "") -> None:
        if isinstance(query_string, bytes):
            query_string = query_string.decode("latin-1")
        self._raw = query_string
        super().__init__(parse_qsl(query_string, keep_blank_values=True))

    @property
    def raw(self) -> str:
        """The query string as received, without the leading ``?``."""
        return self._raw
