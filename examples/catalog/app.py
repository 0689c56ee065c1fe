"""Catalog: a read-only JSON API served straight from a routes directory.

Every file under ``routes/`` is a route. Demonstrates method handlers,
bracketed path parameters, index routes, an explicit ``priority`` that
lets ``/books/search`` beat ``/books/[id]``, and a ``default`` handler
that answers any method.

Run:
    cd examples/catalog && python app.py
"""

from pathlib import Path

from burrow import App, AppConfig

app = App(Path(__file__).parent / "routes", config=AppConfig(debug=True))

if __name__ == "__main__":
    app.run()
