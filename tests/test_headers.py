"""Tests for burrow.http.headers: case-insensitive Headers over raw ASGI pairs."""

import pytest

from burrow.http.headers import Headers


def _h(*pairs: tuple[str, str]) -> Headers:
    raw = tuple((k.encode("latin-1"), v.encode("latin-1")) for k, v in pairs)
    return Headers(raw)


class TestHeaders:
    def test_lookup_ignores_case(self) -> None:
        h = _h(("Content-Type", "application/json"))
        assert h["content-type"] == "application/json"
        assert h["CONTENT-TYPE"] == "application/json"

    def test_missing_key_raises(self) -> None:
        with pytest.raises(KeyError):
            _h(("Accept", "*/*"))["X-Missing"]

    def test_contains(self) -> None:
        h = _h(("Accept", "*/*"))
        assert "ACCEPT" in h
        assert "x-missing" not in h
        assert 42 not in h  # type: ignore[operator]

    def test_repeated_names_collapse_to_one_key(self) -> None:
        h = _h(("Accept", "*/*"), ("X-Tag", "a"), ("x-tag", "b"))
        assert list(h) == ["accept", "x-tag"]
        assert len(h) == 2
        assert h["X-Tag"] == "a"
        assert h.get_list("X-TAG") == ["a", "b"]

    def test_get_default(self) -> None:
        h = Headers()
        assert h.get("accept") is None
        assert h.get("accept", "*/*") == "*/*"

    def test_raw_is_preserved(self) -> None:
        raw = ((b"a", b"1"),)
        assert Headers(raw).raw is raw

    def test_repr_names_type(self) -> None:
        assert repr(_h(("Accept", "*/*"))) == "Headers({'accept': '*/*'})"
