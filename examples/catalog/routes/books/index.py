"""GET /books -> every book, optionally filtered by ``?author=``."""

import json
from pathlib import Path

BOOKS = json.loads((Path(__file__).parents[2] / "books.json").read_text(encoding="utf-8"))


def get(query):
    author = query.get("author")
    if author:
        return [book for book in BOOKS if author.lower() in book["author"].lower()]
    return BOOKS
