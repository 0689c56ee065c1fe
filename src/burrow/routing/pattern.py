r"""Route template compilation.

Turns a filesystem-relative template such as ``/users/[id].py`` into an
anchored, case-insensitive regular expression::

    "/users/[id].py"    -> ^/users/([^?/]+)(?:\?(?P<query>.*))?$
    "/docs/index"       -> ^/docs(?:/(?:[:%]?index)?)?(?:\?(?P<query>.*))?$

Bracketed segments capture a single path segment. A template whose last
segment is ``index`` answers its parent directory's URL as well.
"""

import re
from dataclasses import dataclass

# [name] placeholders; names are collected in declaration order
_PARAM_RE = re.compile(r"\[([^\]]+?)\]")

# A dynamic segment: one or more characters, never crossing "/" or "?"
SEGMENT_PATTERN = r"([^?/]+)"

# Replaces a trailing "/index": matches exactly "", "/", "/index", "/:index" or "/%index"
INDEX_PATTERN = r"(?:/(?:[:%]?index)?)?"

QUERY_PATTERN = r"(?:\?(?P<query>.*))?"


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """The matchable form of a route template.

    Attributes:
        path: Template with the file extension stripped.
        regex: Anchored, case-insensitive matcher for a request URL.
        is_index: True when the template's final segment is ``index``.
        param_names: Names of the ``[name]`` segments, in order. Group
            ``i + 1`` of :attr:`regex` captures ``param_names[i]``.
    """

    path: str
    regex: re.Pattern[str]
    is_index: bool
    param_names: tuple[str, ...]

    def match(self, url: str) -> tuple[dict[str, str], str] | None:
        """Match *url* (path plus optional ``?query``).

        Returns ``(params, query)`` or ``None`` when the URL doesn't match.
        """
        return match_url(self.regex, self.param_names, url)


def match_url(
    regex: re.Pattern[str],
    param_names: tuple[str, ...],
    url: str,
) -> tuple[dict[str, str], str] | None:
    """Run a compiled template against *url*, returning ``(params, query)``."""
    m = regex.fullmatch(url)
    if m is None:
        return None
    values = m.groups()[: len(param_names)]
    return dict(zip(param_names, values, strict=True)), m.group("query") or ""


def strip_extension(template: str) -> str:
    """Drop everything from the first ``.`` onward.

    Literal dots inside a path segment are not supported.
    """
    return template.split(".", 1)[0]


def compile_template(template: str) -> CompiledPattern:
    """Compile a route template into a :class:`CompiledPattern`."""
    path = strip_extension(template)
    if not path.startswith("/"):
        path = "/" + path

    head, _, last = path.rpartition("/")
    is_index = last == "index"
    body = head if is_index else path

    param_names: list[str] = []
    parts: list[str] = []
    pos = 0
    for m in _PARAM_RE.finditer(body):
        parts.append(re.escape(body[pos : m.start()]))
        parts.append(SEGMENT_PATTERN)
        param_names.append(m.group(1))
        pos = m.end()
    parts.append(re.escape(body[pos:]))

    if is_index:
        parts.append(INDEX_PATTERN)

    expression = "^" + "".join(parts) + QUERY_PATTERN + "$"
    return CompiledPattern(
        path=path,
        regex=re.compile(expression, re.IGNORECASE),
        is_index=is_index,
        param_names=tuple(param_names),
    )
