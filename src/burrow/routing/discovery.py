"""Filesystem route discovery.

Walks a routes directory tree and collects every file whose extension
is allowed. Within a directory, files come first (sorted by name), then
each subdirectory is walked in turn (sorted by name). That order is the
tie-break between routes of equal priority.

Names starting with ``_`` or ``.`` are skipped, so ``__init__.py``,
``__pycache__`` and private helper modules never become routes. Dangling
symbolic links are ignored; a link back into the directories being walked
is an error.
"""

import errno
import logging
from collections.abc import Iterable
from pathlib import Path

from burrow.errors import FileSystemError

logger = logging.getLogger("burrow.routing")

DEFAULT_EXTENSIONS: tuple[str, ...] = ("py",)


def normalize_extensions(extensions: Iterable[str]) -> frozenset[str]:
    """Strip leading dots: ``(".py", "py")`` -> ``{"py"}``. Case is preserved."""
    return frozenset(ext.lstrip(".") for ext in extensions)


def discover_routes(
    root: str | Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> list[Path]:
    """Walk *root* and return the route files below it.

    Args:
        root: Path to the routes directory.
        extensions: Allowed file extensions, with or without the dot.
            Matching is case-sensitive.

    Returns:
        Route file paths in discovery order.

    Raises:
        FileSystemError: If *root* (or any directory below it) is missing
            or unreadable, or a symbolic link leads back into the walk.
    """
    root_path = Path(root)
    if not root_path.exists():
        raise FileSystemError(root_path, "no such directory")
    if not root_path.is_dir():
        raise FileSystemError(root_path, "not a directory")

    allowed = normalize_extensions(extensions)
    found: list[Path] = []
    _walk_directory(root_path, allowed, found, frozenset({root_path.resolve()}))
    logger.debug("Discovered %d route file(s) under %s", len(found), root_path)
    return found


def _resolve_link(link: Path) -> Path | None:
    """Target of a symbolic link, or ``None`` when it dangles."""
    try:
        return link.resolve(strict=True)
    except FileNotFoundError:
        return None
    except RuntimeError as exc:
        raise FileSystemError(link, "symbolic link cycle") from exc
    except OSError as exc:
        if exc.errno == errno.ELOOP:
            raise FileSystemError(link, "symbolic link cycle") from exc
        raise FileSystemError(link, exc.strerror or str(exc)) from exc


def _walk_directory(
    directory: Path,
    allowed: frozenset[str],
    found: list[Path],
    ancestors: frozenset[Path],
) -> None:
    """Collect route files below *directory*.

    *ancestors* holds the resolved paths of every directory on the way
    down; a subdirectory resolving to one of them is a link cycle.
    """
    try:
        entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
    except OSError as exc:
        raise FileSystemError(directory, exc.strerror or str(exc)) from exc

    subdirs: list[tuple[Path, Path]] = []
    for entry in entries:
        if entry.name.startswith(("_", ".")):
            continue
        if entry.is_symlink() and _resolve_link(entry) is None:
            continue
        if entry.is_dir():
            real = entry.resolve()
            if real in ancestors:
                raise FileSystemError(entry, "symbolic link cycle")
            subdirs.append((entry, real))
        elif entry.is_file() and entry.suffix[1:] in allowed:
            found.append(entry)

    for subdir, real in subdirs:
        _walk_directory(subdir, allowed, found, ancestors | {real})
