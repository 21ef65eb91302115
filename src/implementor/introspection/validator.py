# topmark:header:start
#
#   project      : Implementor
#   file         : validator.py
#   file_relpath : src/implementor/introspection/validator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Accessibility validation.

Checks run before any output is produced:

1. the target must be an interface (``NOT_AN_INTERFACE``);
2. the target must not be private (``PRIVATE_INTERFACE``);
3. for each member, in enumeration order, the return type, then every
   parameter type, then every exception type must be accessible
   (``PRIVATE_REFERENCED_TYPE``, naming the type and the member).

A forward reference that could not be evaluated is checked by name: any
underscore-prefixed segment makes it private.

The first failure is raised; later members are not inspected.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from implementor.config.logging import get_logger
from implementor.core.errors import ErrorKind, ImplementorError
from implementor.introspection.annotations import canonical_class_name
from implementor.introspection.extractor import name_visibility, visibility_of
from implementor.introspection.types import Visibility

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from implementor.config.logging import ImplementorLogger
    from implementor.introspection.types import MethodSignature, TargetType, TypeRef

logger: ImplementorLogger = get_logger(__name__)

# Dotted names inside a written annotation such as "list[pkg._Token]".
_DOTTED_NAME: Final[re.Pattern[str]] = re.compile(r"[^\W\d][\w.]*")


def validate_target(target: TargetType) -> None:
    """Check the interface itself.

    Raises:
        ImplementorError: ``NOT_AN_INTERFACE`` or ``PRIVATE_INTERFACE``.
    """
    if not target.is_interface:
        raise ImplementorError(
            ErrorKind.NOT_AN_INTERFACE,
            f"Only interfaces are supported: {target.qualified_name} is not a Protocol "
            "or a pure abstract base class",
            type_name=target.qualified_name,
        )
    if target.is_private:
        raise ImplementorError(
            ErrorKind.PRIVATE_INTERFACE,
            f"Cannot implement private interface {target.qualified_name}",
            type_name=target.qualified_name,
        )


def validate_methods(methods: Sequence[MethodSignature]) -> None:
    """Check every type referenced by every member.

    Raises:
        ImplementorError: ``PRIVATE_REFERENCED_TYPE`` for the first inaccessible type.
    """
    for method in methods:
        _check_accessible((method.return_type,), "Return type", method)
        _check_accessible((p.type for p in method.parameters), "Argument", method)
        _check_accessible(method.exceptions, "Exception", method)


def validate(target: TargetType, methods: Sequence[MethodSignature]) -> None:
    """Run `validate_target` then `validate_methods`."""
    validate_target(target)
    validate_methods(methods)
    logger.debug("Validated %s (%d members)", target.qualified_name, len(methods))


def _check_accessible(refs: Iterable[TypeRef], role: str, method: MethodSignature) -> None:
    for ref in refs:
        for cls in ref.classes:
            _reject_inaccessible(canonical_class_name(cls), visibility_of(cls), role, method)
        for written in ref.unresolved:
            for name in _DOTTED_NAME.findall(written):
                _reject_inaccessible(name, name_visibility(name), role, method)


def _reject_inaccessible(
    name: str, visibility: Visibility, role: str, method: MethodSignature
) -> None:
    if visibility is Visibility.PUBLIC:
        return
    raise ImplementorError(
        ErrorKind.PRIVATE_REFERENCED_TYPE,
        f"{role} {name} is {visibility.value} in method {method.name}",
        method=method.name,
        type_name=name,
    )
