"""Burrow exception hierarchy.

Shared across discovery, the table builder, the resolver and the ASGI
dispatcher so every module raises and catches the same types.
"""

from dataclasses import dataclass
from pathlib import Path


class BurrowError(Exception):
    """Base for all burrow-specific errors."""


class ConfigurationError(BurrowError):
    """Raised when app configuration is invalid."""


class FileSystemError(BurrowError):
    """The routes directory (or a directory below it) cannot be read.

    Fatal at startup: no partial route table is ever served.
    """

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.path = Path(path)
        self.reason = reason
        message = f"Cannot read routes directory {str(self.path)!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class RouteLoadError(BurrowError):
    """A discovered route file does not yield a usable route definition.

    Raised when the module cannot be imported, or exports no method
    handler, no ``default`` callable and is not callable itself.
    """

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot load route {str(self.path)!r}: {reason}")


@dataclass(frozen=True, slots=True)
class HTTPError(BurrowError):
    """An error that maps directly to an HTTP status code.

    Only raised at the dispatch boundary; resolution itself reports a
    miss by returning ``None``.
    """

    status: int
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404: no route/method combination matched the request."""

    def __init__(self, detail: str = "Not found") -> None:
        super().__init__(status=404, detail=detail)
