"""Routing: filesystem discovery, pattern compilation and resolution.

Route files are discovered and compiled once at startup into an
immutable, priority-ordered :class:`~burrow.routing.table.RouteTable`.
"""
