"""``burrow routes``: print the compiled route table in resolution order."""

import argparse

from burrow.cli._load import load_table

_HEADERS = ("PRIORITY", "METHODS", "PATH", "SOURCE")


def run_routes(args: argparse.Namespace) -> None:
    """Print PRIORITY, METHODS, PATH and SOURCE for each route.

    ``*`` in the METHODS column marks a handler that answers any method.
    """
    table = load_table(args)
    if not table:
        print("No routes found.")
        return

    rows: list[tuple[str, str, str, str]] = []
    for route in table:
        methods = ", ".join(sorted(m.upper() for m in route.methods))
        if route.fallback is not None:
            methods = f"{methods}, *" if methods else "*"
        rows.append((str(route.priority), methods, route.path, route.source))

    widths = [max(len(_HEADERS[i]), *(len(row[i]) for row in rows)) for i in range(3)]
    fmt = f"{{:>{widths[0]}}}  {{:<{widths[1]}}}  {{:<{widths[2]}}}  {{}}"
    print(fmt.format(*_HEADERS))
    sep_len = sum(widths) + 6 + max(len(row[3]) for row in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
