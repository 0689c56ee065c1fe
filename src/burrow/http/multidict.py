"""Read-only multi-valued string mapping shared by Headers and QueryParams."""

from collections.abc import Iterable, Iterator, Mapping


class FrozenMultiDict(Mapping[str, str]):
    """A read-only ``str -> str`` mapping where a key may repeat.

    ``m[key]`` is the first value seen for *key*; :meth:`get_list`
    returns every value in arrival order. Subclasses normalise keys by
    overriding :meth:`_key`.
    """

    __slots__ = ("_values",)

    def __init__(self, pairs: Iterable[tuple[str, str]] = ()) -> None:
        grouped: dict[str, list[str]] = {}
        for key, value in pairs:
            grouped.setdefault(self._key(key), []).append(value)
        self._values: dict[str, tuple[str, ...]] = {k: tuple(v) for k, v in grouped.items()}

    @staticmethod
    def _key(key: str) -> str:
        return key

    def __getitem__(self, key: str) -> str:
        return self._values[self._key(key)][0]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._key(key) in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self)!r})"

    def get_list(self, key: str) -> list[str]:
        """Every value for *key*, or ``[]``."""
        return list(self._values.get(self._key(key), ()))
