# topmark:header:start
#
#   project      : Implementor
#   file         : extractor.py
#   file_relpath : src/implementor/introspection/extractor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type descriptor extraction.

Reflects over a class to produce its `TargetType` and the complete, ordered set
of `MethodSignature` members a concrete implementation must provide.

Interface test:
    A class is an *interface* when it is a ``typing.Protocol`` class, or an
    ``abc.ABCMeta`` class whose whole MRO (apart from ``object``, ``abc.ABC``,
    ``typing.Generic`` and ``typing.Protocol``) consists of protocol/ABC classes
    that declare no ``__init__``. Concrete classes, abstract classes with
    state, enums, builtins and non-class objects are not interfaces.

Member set:
    Every name in ``__abstractmethods__``, plus every public or dunder function,
    property, ``staticmethod`` or ``classmethod`` declared on a protocol class in
    the MRO. Dunders the protocol machinery installs (``__init__``,
    ``__subclasshook__`` and the like) are not members.
    Each name is resolved once through the MRO, so a member inherited from
    several ancestors is emitted exactly once. Members are sorted by name.
"""

from __future__ import annotations

import abc
import enum
import inspect
import sys
import types
import typing
from typing import TYPE_CHECKING, Any, Final

from implementor.config.logging import get_logger
from implementor.introspection.annotations import describe_annotation
from implementor.introspection.docstrings import raised_exception_names, resolve_exception
from implementor.introspection.types import (
    MethodSignature,
    Modifier,
    ParameterSpec,
    TargetType,
    TypeRef,
    Visibility,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from implementor.config.logging import ImplementorLogger

logger: ImplementorLogger = get_logger(__name__)

_MARKER_BASES: Final[frozenset[object]] = frozenset(
    {object, abc.ABC, typing.Generic, typing.Protocol}
)

# Raised by typing.get_type_hints for names it cannot evaluate.
_ANNOTATION_ERRORS: Final[tuple[type[Exception], ...]] = (
    NameError,
    AttributeError,
    TypeError,
    SyntaxError,
)

# Attributes typing and abc put on protocol classes themselves.
_PROTOCOL_MACHINERY: Final[frozenset[str]] = frozenset(
    {
        "__init__",
        "__new__",
        "__init_subclass__",
        "__subclasshook__",
        "__class_getitem__",
        "__annotate__",
        "__annotate_func__",
    }
)

# Code object of the throwaway functions used to evaluate one annotation at a time.
_HOLDER_CODE: Final[types.CodeType] = (lambda: None).__code__


def is_protocol_class(cls: type) -> bool:
    """Return True if ``cls`` is itself a ``typing.Protocol`` class."""
    return bool(cls.__dict__.get("_is_protocol", False))


def is_interface(obj: object) -> bool:
    """Return True if ``obj`` is a protocol or a pure abstract base class."""
    if not inspect.isclass(obj) or obj in _MARKER_BASES:
        return False
    if issubclass(obj, enum.Enum):
        return False
    for klass in obj.__mro__:
        if klass in _MARKER_BASES:
            continue
        if is_protocol_class(klass):
            continue
        if not isinstance(klass, abc.ABCMeta) or "__init__" in vars(klass):
            return False
        # A non-protocol ABC that implements everything is a concrete class.
        if not inspect.isabstract(klass) and _declares_members(klass):
            return False
    return True


def _is_member(value: object) -> bool:
    return isinstance(value, (staticmethod, classmethod, property)) or inspect.isfunction(value)


def _is_protocol_member(name: str, value: object) -> bool:
    if _is_private_name(name) or name in _PROTOCOL_MACHINERY:
        return False
    return _is_member(value)


def _declares_members(klass: type) -> bool:
    return any(not name.startswith("_") and _is_member(v) for name, v in vars(klass).items())


def _is_private_name(name: str) -> bool:
    return name.startswith("_") and not (name.startswith("__") and name.endswith("__"))


def visibility_of(obj: object) -> Visibility:
    """Return whether ``obj`` can be referenced by dotted name from another module."""
    qualname: str = getattr(obj, "__qualname__", None) or getattr(obj, "__name__", "")
    return name_visibility(qualname)


def name_visibility(dotted_name: str) -> Visibility:
    """Return the visibility implied by a dotted (qualified) name alone."""
    if "<locals>" in dotted_name:
        return Visibility.LOCAL
    if any(_is_private_name(segment) for segment in dotted_name.split(".")):
        return Visibility.PRIVATE
    return Visibility.PUBLIC


def package_of(module_name: str) -> str:
    """Return the package that owns ``module_name`` (``""`` for top-level modules)."""
    module = sys.modules.get(module_name)
    package = getattr(module, "__package__", None)
    if package is None:
        package = module_name.rpartition(".")[0]
    return package


def describe_type(obj: object) -> TargetType:
    """Return the `TargetType` descriptor for ``obj``.

    Non-class objects are described too (with ``is_interface=False``) so that
    validation can report them uniformly.

    Args:
        obj (object): The reflected type reference.

    Returns:
        TargetType: The descriptor.
    """
    if inspect.isclass(obj):
        module: str = obj.__module__
        qualname: str = obj.__qualname__
        simple_name: str = obj.__name__
    else:
        module = getattr(obj, "__module__", None) or type(obj).__module__
        qualname = getattr(obj, "__qualname__", None) or type(obj).__qualname__
        simple_name = qualname.rpartition(".")[2]
    target = TargetType(
        obj=obj,
        module=module,
        qualname=qualname,
        simple_name=simple_name,
        package=package_of(module),
        is_interface=is_interface(obj),
        visibility=visibility_of(obj),
    )
    logger.debug("Described %s: %s", target.qualified_name, target)
    return target


def member_names(cls: type) -> list[str]:
    """Return the sorted names of every member an implementation must provide."""
    names: set[str] = set(getattr(cls, "__abstractmethods__", ()))
    for klass in cls.__mro__:
        if klass in _MARKER_BASES or not is_protocol_class(klass):
            continue
        for name, value in vars(klass).items():
            if _is_protocol_member(name, value):
                names.add(name)
    return sorted(names)


def extract_methods(target: TargetType) -> tuple[MethodSignature, ...]:
    """Return the members ``target`` requires, sorted by name.

    Args:
        target (TargetType): A descriptor produced by `describe_type`.

    Returns:
        tuple[MethodSignature, ...]: One signature per member name. Empty when
        the target is not an interface.
    """
    cls = target.obj
    if not target.is_interface or not isinstance(cls, type):
        return ()
    methods: list[MethodSignature] = []
    for name in member_names(cls):
        owner = next(k for k in cls.__mro__ if name in vars(k))
        methods.append(_describe_member(target, owner, name, vars(owner)[name]))
    logger.debug("Extracted %d member(s) from %s", len(methods), target.qualified_name)
    return tuple(methods)


def _describe_member(target: TargetType, owner: type, name: str, raw: Any) -> MethodSignature:
    modifiers: set[Modifier] = set()
    if getattr(raw, "__isabstractmethod__", False):
        modifiers.add(Modifier.ABSTRACT)

    func: Callable[..., Any] | None
    has_setter = False
    if isinstance(raw, property):
        modifiers.add(Modifier.PROPERTY)
        func = raw.fget
        has_setter = raw.fset is not None
    elif isinstance(raw, staticmethod):
        modifiers.add(Modifier.STATIC)
        func = raw.__func__
    elif isinstance(raw, classmethod):
        modifiers.add(Modifier.CLASS)
        func = raw.__func__
    elif callable(raw):
        func = raw
    else:
        # Abstract non-callable attribute: implemented as a read-only property.
        logger.debug("Member %s.%s is not callable; rendering a property", owner, name)
        modifiers.add(Modifier.PROPERTY)
        func = None

    if func is None:
        return MethodSignature(
            owner=target,
            declared_in=owner.__qualname__,
            name=name,
            modifiers=frozenset(modifiers),
            return_type=TypeRef(text=None),
            parameters=(
                ParameterSpec("self", inspect.Parameter.POSITIONAL_OR_KEYWORD, TypeRef(None)),
            ),
        )

    if inspect.iscoroutinefunction(func):
        modifiers.add(Modifier.ASYNC)

    parameters, return_type = _describe_signature(func)
    exceptions, unresolved = _describe_exceptions(func)
    return MethodSignature(
        owner=target,
        declared_in=owner.__qualname__,
        name=name,
        modifiers=frozenset(modifiers),
        return_type=return_type,
        parameters=parameters,
        exceptions=exceptions,
        unresolved_exceptions=unresolved,
        has_setter=has_setter,
    )


def _describe_signature(func: Callable[..., Any]) -> tuple[tuple[ParameterSpec, ...], TypeRef]:
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        logger.debug("No signature for %r; rendering (self, *args, **kwargs)", func)
        return (
            (
                ParameterSpec("self", inspect.Parameter.POSITIONAL_ONLY, TypeRef(None)),
                ParameterSpec("args", inspect.Parameter.VAR_POSITIONAL, TypeRef(None)),
                ParameterSpec("kwargs", inspect.Parameter.VAR_KEYWORD, TypeRef(None)),
            ),
            TypeRef(text=None),
        )

    hints = resolve_annotations(func)

    def annotation_of(key: str) -> Any:
        return hints.get(key, inspect.Parameter.empty)

    parameters = tuple(
        ParameterSpec(
            name=param.name,
            kind=param.kind,
            type=describe_annotation(annotation_of(param.name)),
            has_default=param.default is not inspect.Parameter.empty,
        )
        for param in signature.parameters.values()
    )
    return_type = describe_annotation(annotation_of("return"))
    return parameters, return_type


def _describe_exceptions(
    func: Callable[..., Any],
) -> tuple[tuple[TypeRef, ...], tuple[str, ...]]:
    namespace: dict[str, Any] = getattr(func, "__globals__", {})
    exceptions: list[TypeRef] = []
    unresolved: list[str] = []
    for name in raised_exception_names(getattr(func, "__doc__", None)):
        exc_type = resolve_exception(name, namespace)
        if exc_type is None:
            unresolved.append(name)
            continue
        exceptions.append(describe_annotation(exc_type))
    return tuple(exceptions), tuple(unresolved)


def resolve_annotations(func: Callable[..., Any]) -> dict[str, Any]:
    """Evaluate the annotations of ``func``.

    When ``typing.get_type_hints`` fails for the function as a whole (typically
    on a name imported only under ``TYPE_CHECKING``), each annotation is
    evaluated on its own; those that still fail are kept as written.

    Args:
        func (Callable[..., Any]): A function or method.

    Returns:
        dict[str, Any]: Annotation per parameter name, plus ``"return"``.
    """
    try:
        return typing.get_type_hints(func)
    except _ANNOTATION_ERRORS as exc:
        logger.debug("Resolving annotations of %r one by one (%s)", func, exc)

    try:
        written = inspect.get_annotations(func)
    except _ANNOTATION_ERRORS:
        return {}
    namespace: dict[str, Any] = getattr(func, "__globals__", {})
    hints: dict[str, Any] = {}
    for key, raw in written.items():
        holder = types.FunctionType(_HOLDER_CODE, namespace)
        holder.__annotations__ = {key: raw}
        try:
            hints[key] = typing.get_type_hints(holder)[key]
        except _ANNOTATION_ERRORS as exc:
            logger.debug("Keeping annotation %s of %r unresolved (%s)", key, func, exc)
            hints[key] = raw
    return hints
