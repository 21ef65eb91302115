# topmark:header:start
#
#   project      : Implementor
#   file         : synthesizer.py
#   file_relpath : src/implementor/codegen/synthesizer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source synthesis for stub implementations.

Given a validated interface and its members, render a module that defines
``class <Simple><Suffix>(<module>.<QualName>)`` with one stub per member.

Layout (after a one-line module docstring)::

    from __future__ import annotations

    import pkg.shapes


    class ShapeImpl(pkg.shapes.Shape):
        def area(self) -> float:
            return 0

        def contains(self, x: float, y: float) -> bool:
            return False

Default-value bodies by return annotation:

- ``None``: ``pass``
- ``NoReturn`` / ``Never``: ``raise NotImplementedError``
- ``bool``: ``return False``
- ``int`` / ``float`` / ``complex``: ``return 0``
- anything else, or unannotated: ``return None``

Exceptions listed under the interface member's ``Raises:`` section are carried
over into a ``Raises:`` section of the stub's docstring. Output is
deterministic: the same members in the same order render byte-identical text.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Final

from implementor.codegen.source import SourceUnit
from implementor.config.logging import get_logger
from implementor.introspection.types import Modifier, ValueKind

if TYPE_CHECKING:
    from collections.abc import Sequence

    from implementor.config.logging import ImplementorLogger
    from implementor.introspection.types import MethodSignature, ParameterSpec, TargetType

logger: ImplementorLogger = get_logger(__name__)

_DEFAULT_BODIES: Final[dict[ValueKind, str]] = {
    ValueKind.VOID: "pass",
    ValueKind.NEVER: "raise NotImplementedError",
    ValueKind.BOOLEAN: "return False",
    ValueKind.NUMERIC: "return 0",
    ValueKind.REFERENCE: "return None",
}

# Decorators in rendering order.
_DECORATORS: Final[tuple[tuple[Modifier, str], ...]] = (
    (Modifier.PROPERTY, "@property"),
    (Modifier.STATIC, "@staticmethod"),
    (Modifier.CLASS, "@classmethod"),
)

_STUB_SUMMARY: Final[str] = "Stub implementation."


def synthesize(target: TargetType, methods: Sequence[MethodSignature], *, suffix: str) -> str:
    """Render the source text of the stub implementation.

    Args:
        target (TargetType): The validated interface.
        methods (Sequence[MethodSignature]): Members to implement, in order.
        suffix (str): Suffix of the generated class name.

    Returns:
        str: The module source, ending with a newline.
    """
    unit = SourceUnit()
    _emit_preamble(unit, target, methods)
    unit.line(f"class {target.implementation_name(suffix)}({target.qualified_name}):")
    if not methods:
        unit.line("pass", 1)
    for index, method in enumerate(methods):
        if index:
            unit.blank()
        _emit_member(unit, method)
    logger.debug(
        "Synthesized %s with %d member(s)", target.implementation_module(suffix), len(methods)
    )
    return unit.text()


def required_imports(target: TargetType, methods: Sequence[MethodSignature]) -> list[str]:
    """Return the sorted module names the generated unit imports."""
    modules: set[str] = {target.module}
    for method in methods:
        modules |= method.referenced_modules()
    modules.discard("builtins")
    return sorted(modules)


def render_signature(method: MethodSignature) -> str:
    """Return the ``def`` line of a member (without decorators)."""
    keyword = "async def" if Modifier.ASYNC in method.rendered_modifiers else "def"
    params = render_parameters(method.parameters)
    returns = f" -> {method.return_type.text}" if method.return_type.text else ""
    return f"{keyword} {method.name}({params}){returns}:"


def render_parameters(parameters: Sequence[ParameterSpec]) -> str:
    """Render a parameter list, preserving kinds and markers (``/``, ``*``)."""
    parts: list[str] = []
    star_seen = False
    for index, param in enumerate(parameters):
        if param.kind is inspect.Parameter.KEYWORD_ONLY and not star_seen:
            parts.append("*")
            star_seen = True
        prefix = ""
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            prefix = "*"
            star_seen = True
        elif param.kind is inspect.Parameter.VAR_KEYWORD:
            prefix = "**"
        text = prefix + param.name
        if param.type.text:
            text += f": {param.type.text}"
            if param.has_default:
                text += " = ..."
        elif param.has_default:
            text += "=..."
        parts.append(text)
        following = parameters[index + 1] if index + 1 < len(parameters) else None
        if param.kind is inspect.Parameter.POSITIONAL_ONLY and (
            following is None or following.kind is not inspect.Parameter.POSITIONAL_ONLY
        ):
            parts.append("/")
    return ", ".join(parts)


def render_body(method: MethodSignature) -> str:
    """Return the default-value statement for a member."""
    return _DEFAULT_BODIES[method.return_type.kind]


def _emit_preamble(
    unit: SourceUnit, target: TargetType, methods: Sequence[MethodSignature]
) -> None:
    unit.line(f'"""Stub implementation of {target.qualified_name}."""')
    unit.blank()
    unit.line("from __future__ import annotations")
    unit.blank()
    for module in required_imports(target, methods):
        unit.line(f"import {module}")
    unit.blank(2)


def _emit_member(unit: SourceUnit, method: MethodSignature) -> None:
    modifiers = method.rendered_modifiers
    for modifier, decorator in _DECORATORS:
        if modifier in modifiers:
            unit.line(decorator, 1)
    unit.line(render_signature(method), 1)
    _emit_docstring(unit, method)
    unit.line(render_body(method), 2)
    if Modifier.PROPERTY in modifiers and method.has_setter:
        value = f"value: {method.return_type.text}" if method.return_type.text else "value"
        unit.blank()
        unit.line(f"@{method.name}.setter", 1)
        unit.line(f"def {method.name}(self, {value}) -> None:", 1)
        unit.line("pass", 2)


def _emit_docstring(unit: SourceUnit, method: MethodSignature) -> None:
    if not method.exceptions:
        return
    unit.line(f'"""{_STUB_SUMMARY}', 2)
    unit.blank()
    unit.line("Raises:", 2)
    for exc in method.exceptions:
        unit.line(exc.text or "", 3)
    unit.line('"""', 2)
