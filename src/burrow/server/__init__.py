"""ASGI boundary: dispatch, error responses and server startup."""
