"""Route table loading shared by the CLI commands."""

import argparse
import sys

from burrow.errors import BurrowError
from burrow.routing.discovery import DEFAULT_EXTENSIONS
from burrow.routing.table import RouteTable, build_route_table


def extensions_from(args: argparse.Namespace) -> tuple[str, ...]:
    return tuple(args.extensions) if args.extensions else DEFAULT_EXTENSIONS


def load_table(args: argparse.Namespace) -> RouteTable:
    """Build the table for ``args.routes_dir`` or exit with status 1."""
    try:
        return build_route_table(args.routes_dir, extensions=extensions_from(args))
    except BurrowError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
