# topmark:header:start
#
#   project      : Implementor
#   file         : annotations.py
#   file_relpath : src/implementor/introspection/annotations.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render runtime type annotations as canonical source text.

`describe_annotation` turns a resolved annotation (a class, a generic alias, a
union, a forward-reference string, ...) into a `TypeRef`: the fully qualified
text to emit, the classes it references (used by the accessibility check), the
modules the generated unit must import, and the default-value bucket.

Rules:
    - Builtins render unqualified (``int``); other classes render as
      ``module.QualName``.
    - A canonical name that contains non-ASCII characters renders as a quoted
      forward reference, so it only ever appears inside a string literal.
    - Type variables and parameter specifications render as ``typing.Any``.
    - Unresolved forward references are kept as quoted strings. Their default-value
      bucket is still derived from the written name (``"bool"``, ``"None"``, ...).
"""

from __future__ import annotations

import collections.abc
import inspect
import types
import typing
from enum import Enum
from typing import Any, Final

from implementor.introspection.types import TypeRef, ValueKind

_NUMERIC_TYPES: Final[tuple[type, ...]] = (int, float, complex)
_NEVER_TYPES: Final[tuple[object, ...]] = tuple(
    t for t in (typing.NoReturn, getattr(typing, "Never", None)) if t is not None
)
_UNION_ORIGINS: Final[tuple[object, ...]] = (typing.Union, types.UnionType)
_TYPE_VARIABLES: Final[tuple[type, ...]] = (
    typing.TypeVar,
    typing.ParamSpec,
    typing.ParamSpecArgs,
    typing.ParamSpecKwargs,
)

# Buckets of unevaluated return annotations, by written name.
_VALUE_KINDS_BY_NAME: Final[dict[str, ValueKind]] = {
    "None": ValueKind.VOID,
    "NoReturn": ValueKind.NEVER,
    "typing.NoReturn": ValueKind.NEVER,
    "Never": ValueKind.NEVER,
    "typing.Never": ValueKind.NEVER,
    "bool": ValueKind.BOOLEAN,
    "int": ValueKind.NUMERIC,
    "float": ValueKind.NUMERIC,
    "complex": ValueKind.NUMERIC,
}


def value_kind(annotation: object) -> ValueKind:
    """Return the default-value bucket for a return annotation."""
    if isinstance(annotation, typing.ForwardRef):
        annotation = annotation.__forward_arg__
    if isinstance(annotation, str):
        return _VALUE_KINDS_BY_NAME.get(annotation.strip(), ValueKind.REFERENCE)
    if annotation is None or annotation is type(None):
        return ValueKind.VOID
    if any(annotation is never for never in _NEVER_TYPES):
        return ValueKind.NEVER
    if annotation is bool:
        return ValueKind.BOOLEAN
    if annotation in _NUMERIC_TYPES:
        return ValueKind.NUMERIC
    return ValueKind.REFERENCE


def describe_annotation(annotation: object) -> TypeRef:
    """Render ``annotation`` and collect what it references.

    Args:
        annotation (object): A resolved annotation, a raw string annotation, or
            ``inspect.Parameter.empty`` for an unannotated slot.

    Returns:
        TypeRef: The rendered annotation.
    """
    if annotation is inspect.Parameter.empty:
        return TypeRef(text=None)
    renderer = _AnnotationRenderer()
    text = renderer.render(annotation)
    return TypeRef(
        text=text,
        classes=tuple(renderer.classes),
        modules=frozenset(renderer.modules),
        kind=value_kind(annotation),
        unresolved=tuple(renderer.unresolved),
    )


def canonical_class_name(cls: type) -> str:
    """Return ``module.QualName`` for ``cls`` (``QualName`` for builtins)."""
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


class _AnnotationRenderer:
    """Single-use walker that accumulates referenced classes and modules."""

    def __init__(self) -> None:
        self.classes: list[type] = []
        self.modules: set[str] = set()
        self.unresolved: list[str] = []

    def render(self, tp: Any) -> str:
        if tp is None or tp is type(None):
            return "None"
        if tp is Ellipsis:
            return "..."
        if isinstance(tp, typing.ForwardRef):
            tp = tp.__forward_arg__
        if isinstance(tp, str):
            self.unresolved.append(tp)
            return repr(tp)
        if tp is typing.Any or isinstance(tp, _TYPE_VARIABLES):
            self.modules.add("typing")
            return "typing.Any"
        if isinstance(tp, list):
            # Parameter list of a Callable[[...], R]
            return "[" + ", ".join(self.render(arg) for arg in tp) + "]"
        origin = typing.get_origin(tp)
        if origin is not None:
            return self._render_generic(origin, typing.get_args(tp))
        if isinstance(tp, type):
            return self._render_class(tp)
        text = repr(tp)
        if text.startswith("typing."):
            # Special forms such as typing.NoReturn or typing.Self
            self.modules.add("typing")
            return text
        return repr(text)

    def _render_class(self, cls: type) -> str:
        self.classes.append(cls)
        if cls.__module__ != "builtins":
            self.modules.add(cls.__module__)
        text = canonical_class_name(cls)
        if not text.isascii():
            return repr(text)
        return text

    def _render_generic(self, origin: Any, args: tuple[Any, ...]) -> str:
        if origin in _UNION_ORIGINS:
            return " | ".join(self.render(arg) for arg in args)
        if origin is typing.Annotated:
            return self.render(args[0])
        if origin is typing.Literal:
            self.modules.add("typing")
            return f"typing.Literal[{', '.join(self._render_literal(a) for a in args)}]"
        head = self._render_class(origin) if isinstance(origin, type) else self.render(origin)
        if origin is tuple and args in ((), ((),)):
            return f"{head}[()]"
        if not args:
            return head
        if origin is collections.abc.Callable and len(args) == 2:
            return f"{head}[{self.render(args[0])}, {self.render(args[1])}]"
        return f"{head}[{', '.join(self.render(arg) for arg in args)}]"

    def _render_literal(self, value: Any) -> str:
        if isinstance(value, Enum):
            return f"{self._render_class(type(value))}.{value.name}"
        return repr(value)
