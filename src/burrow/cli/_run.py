"""``burrow run``: serve a routes directory."""

import argparse
import sys

from burrow.app import App
from burrow.cli._load import extensions_from
from burrow.config import AppConfig
from burrow.errors import BurrowError


def run_server(args: argparse.Namespace) -> None:
    """Build an App for ``args.routes_dir`` and serve it.

    ``App.run`` configures logging from the config and builds the route
    table before the server starts, so a broken routes tree fails here
    instead of on the first request.
    """
    try:
        config = AppConfig(
            debug=args.debug,
            extensions=extensions_from(args),
            match_timeout=args.match_timeout,
            log_level=args.log_level or "info",
        )
        app = App(args.routes_dir, config=config)
        app.run(host=args.host, port=args.port)
    except BurrowError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
