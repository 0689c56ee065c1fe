"""Case-insensitive request headers built from raw ASGI byte pairs."""

from burrow.http.multidict import FrozenMultiDict


class Headers(FrozenMultiDict):
    """Request headers. Keys are matched case-insensitively and iterate lowercased.

    Names and values are decoded as latin-1, as ASGI requires.
    """

    __slots__ = ("_raw",)

    def __init__(self, raw: tuple[tuple[bytes, bytes], ...] = ()) -> None:
        self._raw = raw
        super().__init__((name.decode("latin-1"), value.decode("latin-1")) for name, value in raw)

    @staticmethod
    def _key(key: str) -> str:
        return key.lower()

    @property
    def raw(self) -> tuple[tuple[bytes, bytes], ...]:
        """The byte pairs exactly as received."""
        return self._raw
