"""Shared fixtures for burrow tests.

``write_routes`` lays out a routes tree under ``tmp_path`` from a
``{relative path: module source}`` mapping and returns its root.
"""

import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

WriteRoutes = Callable[[dict[str, str]], Path]


@pytest.fixture
def write_routes(tmp_path: Path) -> WriteRoutes:
    def _write(files: dict[str, str]) -> Path:
        root = tmp_path / "routes"
        root.mkdir(exist_ok=True)
        for relative, source in files.items():
            target = root / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(textwrap.dedent(source), encoding="utf-8")
        return root

    return _write
