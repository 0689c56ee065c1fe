"""``burrow resolve``: show which route would answer a request."""

import argparse
import sys
from urllib.parse import unquote

import anyio

from burrow.cli._load import load_table
from burrow.http.query import QueryParams
from burrow.http.request import Request
from burrow.routing.resolver import Resolver


def run_resolve(args: argparse.Namespace) -> None:
    """Resolve ``args.method`` ``args.url`` and print the winner.

    Exits with status 1 when nothing matches.
    """
    table = load_table(args)
    path, _, query = args.url.partition("?")
    request = Request(
        method=args.method.upper(), path=unquote(path) or "/", query=QueryParams(query)
    )

    match = anyio.run(Resolver(table).resolve, request)
    if match is None:
        print(f"Not found: {request.method} {args.url}", file=sys.stderr)
        raise SystemExit(1)

    handler_name = getattr(match.handler, "__name__", repr(match.handler))
    print(f"{match.route.path}  ({match.route.source})")
    print(f"  handler:  {handler_name} ({match.route.kind})")
    print(f"  priority: {match.route.priority}")
    for name, value in match.params.items():
        print(f"  param {name} = {value}")
    if match.query:
        print(f"  query:    {match.query}")
