"""Burrow CLI: inspect route tables, resolve URLs and serve a routes tree.

Entry point registered as ``burrow`` in ``pyproject.toml``::

    [project.scripts]
    burrow = "burrow.cli:main"
"""

import argparse
import sys

from burrow.config import configure_logging


def _add_routes_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("routes_dir", help="Directory containing route modules")
    parser.add_argument(
        "--ext",
        dest="extensions",
        action="append",
        default=None,
        help="Allowed route file extension (repeatable, default: py)",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``burrow`` command."""
    parser = argparse.ArgumentParser(
        prog="burrow",
        description="burrow: filesystem-routed request dispatch.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["debug", "info", "warning", "error"],
        help="Logging verbosity (default: warning; info for run)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- burrow routes ----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List the compiled route table")
    _add_routes_options(routes_parser)

    # -- burrow resolve ---------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Show which route answers a request")
    _add_routes_options(resolve_parser)
    resolve_parser.add_argument("method", help="HTTP method (e.g. GET)")
    resolve_parser.add_argument("url", help="Request URL path, optionally with ?query")

    # -- burrow run -------------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Serve a routes directory")
    _add_routes_options(run_parser)
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    run_parser.add_argument(
        "--match-timeout",
        type=float,
        default=None,
        help="Seconds a single route match may take",
    )
    run_parser.add_argument("--debug", action="store_true", help="Include error types in 500s")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command != "run":
        configure_logging(args.log_level or "warning")

    if args.command == "routes":
        from burrow.cli._routes import run_routes

        run_routes(args)
    elif args.command == "resolve":
        from burrow.cli._resolve import run_resolve

        run_resolve(args)
    elif args.command == "run":
        from burrow.cli._run import run_server

        run_server(args)
