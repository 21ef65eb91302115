# topmark:header:start
#
#   project      : Implementor
#   file         : types.py
#   file_relpath : src/implementor/introspection/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read-only descriptors derived from a reflected interface.

A `TargetType` describes the interface being implemented; each member to
implement is a `MethodSignature`. Both are produced once per generation run by
`implementor.introspection.extractor` and never mutated afterwards.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from enum import Enum


class Visibility(Enum):
    """Accessibility of a class from a generated module."""

    PUBLIC = "public"
    # Single leading underscore somewhere in the qualified name.
    PRIVATE = "private"
    # Defined inside a function body; not addressable by a dotted name.
    LOCAL = "local"


class Modifier(Enum):
    """Member modifiers recovered from the interface declaration."""

    ABSTRACT = "abstract"
    STATIC = "static"
    CLASS = "class"
    PROPERTY = "property"
    ASYNC = "async"


# Modifiers dropped before rendering a member.
STRIPPED_MODIFIERS: frozenset[Modifier] = frozenset({Modifier.ABSTRACT})


class ValueKind(Enum):
    """Default-value policy bucket of a return annotation."""

    VOID = "void"
    NEVER = "never"
    BOOLEAN = "boolean"
    NUMERIC = "numeric"
    REFERENCE = "reference"


@dataclass(frozen=True)
class TypeRef:
    """A rendered type annotation.

    Attributes:
        text (str | None): Canonical source text, or None when unannotated.
        classes (tuple[type, ...]): Every class referenced by the annotation,
            depth-first, in order of appearance.
        modules (frozenset[str]): Modules the generated source must import.
        kind (ValueKind): Default-value bucket when used as a return type.
        unresolved (tuple[str, ...]): Forward references that could not be
            evaluated, as written.
    """

    text: str | None
    classes: tuple[type, ...] = ()
    modules: frozenset[str] = frozenset()
    kind: ValueKind = ValueKind.REFERENCE
    unresolved: tuple[str, ...] = ()


@dataclass(frozen=True)
class TargetType:
    """The interface a stub implementation is generated for.

    Attributes:
        obj (object): The reflected object (normally a class).
        module (str): Defining module name.
        qualname (str): Qualified name inside the module.
        simple_name (str): Unqualified class name.
        package (str): Owning package; ``""`` for top-level modules.
        is_interface (bool): True for protocols and pure abstract base classes.
        visibility (Visibility): Accessibility from another module.
    """

    obj: object = field(compare=False, repr=False)
    module: str
    qualname: str
    simple_name: str
    package: str
    is_interface: bool
    visibility: Visibility

    @property
    def qualified_name(self) -> str:
        """Return ``module.qualname`` (``qualname`` alone for builtins)."""
        if self.module in ("", "builtins"):
            return self.qualname
        return f"{self.module}.{self.qualname}"

    @property
    def is_private(self) -> bool:
        """Return True if the type cannot be referenced from another module."""
        return self.visibility is not Visibility.PUBLIC

    def implementation_name(self, suffix: str) -> str:
        """Return the generated class name, ``<simple_name><suffix>``."""
        return f"{self.simple_name}{suffix}"

    def implementation_module(self, suffix: str) -> str:
        """Return the dotted module name of the generated source unit."""
        name = self.implementation_name(suffix)
        return f"{self.package}.{name}" if self.package else name


@dataclass(frozen=True)
class ParameterSpec:
    """One declared parameter of a member."""

    name: str
    kind: inspect._ParameterKind
    type: TypeRef
    has_default: bool = False


@dataclass(frozen=True)
class MethodSignature:
    """One member the generated class must implement.

    Attributes:
        owner (TargetType): The interface the member was enumerated from.
        declared_in (str): Qualified name of the class that declares the member.
        name (str): Member name.
        modifiers (frozenset[Modifier]): Declared modifiers.
        return_type (TypeRef): Return annotation.
        parameters (tuple[ParameterSpec, ...]): Declared parameters in order,
            including the receiver (``self``/``cls``) where present.
        exceptions (tuple[TypeRef, ...]): Exceptions listed under ``Raises:``.
        unresolved_exceptions (tuple[str, ...]): ``Raises:`` names that did not
            resolve to an exception class.
        has_setter (bool): For properties, whether a setter is declared.
    """

    owner: TargetType
    declared_in: str
    name: str
    modifiers: frozenset[Modifier]
    return_type: TypeRef
    parameters: tuple[ParameterSpec, ...]
    exceptions: tuple[TypeRef, ...] = ()
    unresolved_exceptions: tuple[str, ...] = ()
    has_setter: bool = False

    @property
    def rendered_modifiers(self) -> frozenset[Modifier]:
        """Return the modifiers that survive into the generated source."""
        return self.modifiers - STRIPPED_MODIFIERS

    def referenced_modules(self) -> frozenset[str]:
        """Return every module referenced by the member's annotations."""
        modules: set[str] = set(self.return_type.modules)
        for param in self.parameters:
            modules |= param.type.modules
        for exc in self.exceptions:
            modules |= exc.modules
        return frozenset(modules)
