"""Test utilities for burrow applications.

    from burrow.testing import TestClient
"""

from burrow.testing.client import TestClient

__all__ = ["TestClient"]
