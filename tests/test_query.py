"""Tests for burrow.http.query: immutable QueryParams."""

import pytest

from burrow.http.query import QueryParams


class TestQueryParams:
    def test_getitem_returns_first_value(self) -> None:
        q = QueryParams(b"tag=a&tag=b&page=2")
        assert q["tag"] == "a"
        assert q["page"] == "2"
        assert q.get_list("tag") == ["a", "b"]

    def test_accepts_str(self) -> None:
        q = QueryParams("sort=name")
        assert q["sort"] == "name"
        assert q.raw == "sort=name"

    def test_raw_is_undecoded(self) -> None:
        assert QueryParams(b"q=hello%20world").raw == "q=hello%20world"
        assert QueryParams(b"q=hello%20world")["q"] == "hello world"

    def test_missing_key(self) -> None:
        q = QueryParams(b"q=1")
        with pytest.raises(KeyError):
            q["missing"]
        assert q.get("missing") is None
        assert q.get("missing", "x") == "x"
        assert q.get_list("missing") == []

    def test_blank_value_preserved(self) -> None:
        q = QueryParams(b"flag=")
        assert "flag" in q
        assert q["flag"] == ""

    def test_empty(self) -> None:
        q = QueryParams()
        assert len(q) == 0
        assert q.raw == ""
