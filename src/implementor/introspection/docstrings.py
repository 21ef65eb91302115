# topmark:header:start
#
#   project      : Implementor
#   file         : docstrings.py
#   file_relpath : src/implementor/introspection/docstrings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Recover declared exception types from member docstrings.

Python has no ``throws`` clause; interfaces document what a member may raise in
the ``Raises:`` section of its docstring (Google style), or with Sphinx
``:raises X:`` fields. Both forms are recognized.
"""

from __future__ import annotations

import builtins
import inspect
import re
import sys
from typing import Any, Final

_SECTION_RE: Final[re.Pattern[str]] = re.compile(r"^(?P<indent>\s*)Raises:\s*$")
_ENTRY_RE: Final[re.Pattern[str]] = re.compile(r"^(?P<name>[A-Za-z_][\w.]*)\s*(?:\(.*\))?\s*(?::.*)?$")
_SPHINX_RE: Final[re.Pattern[str]] = re.compile(r":raises?\s+(?P<name>[A-Za-z_][\w.]*)\s*:")


def raised_exception_names(doc: str | None) -> list[str]:
    """Return exception names listed in a docstring, in order, without duplicates.

    Args:
        doc (str | None): A raw ``__doc__`` value.

    Returns:
        list[str]: Dotted names as written (e.g. ``["OSError", "pkg.errors.StoreError"]``).
    """
    if not doc:
        return []
    names: list[str] = []
    in_section = False
    section_indent = 0
    entry_indent: int | None = None
    for line in inspect.cleandoc(doc).splitlines():
        if in_section and line.strip():
            indent = len(line) - len(line.lstrip())
            in_section = indent > section_indent
        if not in_section:
            match = _SECTION_RE.match(line)
            if match:
                in_section = True
                section_indent = len(match.group("indent"))
                entry_indent = None
            continue
        if not line.strip():
            continue
        indent = len(line) - len(line.lstrip())
        if entry_indent is None:
            entry_indent = indent
        if indent > entry_indent:
            # description continuation line
            continue
        match = _ENTRY_RE.match(line.strip())
        if match:
            names.append(match.group("name"))
    names.extend(m.group("name") for m in _SPHINX_RE.finditer(doc))
    return list(dict.fromkeys(names))


def resolve_exception(name: str, namespace: dict[str, Any]) -> type[BaseException] | None:
    """Resolve a dotted exception name against a module namespace.

    Lookup order for the first segment: ``namespace`` (the declaring module's
    globals), builtins, then already-imported modules.

    Args:
        name (str): The dotted name from the docstring.
        namespace (dict[str, Any]): Globals of the function that documents it.

    Returns:
        type[BaseException] | None: The exception class, or None if the name
        does not resolve to one.
    """
    head, *rest = name.split(".")
    obj: Any = namespace.get(head, getattr(builtins, head, None))
    if obj is None:
        obj = sys.modules.get(head)
    for index, attr in enumerate(rest):
        nxt = getattr(obj, attr, None)
        if nxt is None:
            # "pkg.mod.Error" where only "pkg" is bound: try the full module path
            nxt = sys.modules.get(".".join([head, *rest[: index + 1]]))
        obj = nxt
    if isinstance(obj, type) and issubclass(obj, BaseException):
        return obj
    return None
