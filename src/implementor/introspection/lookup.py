# topmark:header:start
#
#   project      : Implementor
#   file         : lookup.py
#   file_relpath : src/implementor/introspection/lookup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve type references and locate where their code was loaded from.

Type references use either the entry-point form ``pkg.mod:Outer.Inner`` or a
plain dotted path ``pkg.mod.Outer.Inner`` (the longest importable module prefix
wins).
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from implementor.config.logging import get_logger
from implementor.core.errors import TypeLookupError

if TYPE_CHECKING:
    from collections.abc import Iterable
    from types import ModuleType

    from implementor.config.logging import ImplementorLogger

logger: ImplementorLogger = get_logger(__name__)


def extend_sys_path(paths: Iterable[Path]) -> None:
    """Prepend ``paths`` to ``sys.path`` (once each), keeping their order."""
    for path in reversed([str(Path(p).resolve()) for p in paths]):
        if path not in sys.path:
            sys.path.insert(0, path)
            logger.debug("Added %s to sys.path", path)


def resolve_type(reference: str, *, search_paths: Iterable[Path] = ()) -> object:
    """Import and return the object named by ``reference``.

    Args:
        reference (str): ``pkg.mod:Qual.Name`` or ``pkg.mod.Qual.Name``.
        search_paths (Iterable[Path]): Import roots prepended to ``sys.path`` first.

    Returns:
        object: The resolved object (normally a class; not checked here).

    Raises:
        TypeLookupError: If no module/attribute combination resolves.
    """
    extend_sys_path(search_paths)
    reference = reference.strip()
    if not reference:
        raise TypeLookupError("Empty type reference")

    if ":" in reference:
        module_name, _, attr_path = reference.partition(":")
        module = _import(module_name, reference)
        if module is None:
            raise TypeLookupError(f"Module not found: {module_name}")
        return _walk(module, attr_path.split(".") if attr_path else [], reference)

    parts = reference.split(".")
    for cut in range(len(parts), 0, -1):
        module = _import(".".join(parts[:cut]), reference)
        if module is not None:
            return _walk(module, parts[cut:], reference)
    raise TypeLookupError(f"Type not found: {reference}")


def _import(module_name: str, reference: str) -> ModuleType | None:
    try:
        return importlib.import_module(module_name)
    except ModuleNotFoundError as exc:
        missing = exc.name or ""
        if missing and (module_name == missing or module_name.startswith(missing + ".")):
            return None
        raise TypeLookupError(f"Cannot import {module_name} for {reference}: {exc}") from exc
    except Exception as exc:
        raise TypeLookupError(f"Cannot import {module_name} for {reference}: {exc}") from exc


def _walk(module: ModuleType, attrs: list[str], reference: str) -> object:
    obj: object = module
    for attr in attrs:
        try:
            obj = getattr(obj, attr)
        except AttributeError as exc:
            raise TypeLookupError(f"Type not found: {reference} (no attribute {attr!r})") from exc
    return obj


def code_source_root(obj: object) -> Path | None:
    """Return the ``sys.path`` root the defining module of ``obj`` was loaded from.

    For ``pkg.mod`` loaded from ``/src/pkg/mod.py`` this is ``/src``. Returns
    None for modules without a file (builtins, ``__main__`` in a REPL, ...).
    """
    module_name: str | None = getattr(obj, "__module__", None)
    module = sys.modules.get(module_name) if module_name else None
    file: str | None = getattr(module, "__file__", None)
    if module_name is None or module is None or not file:
        return None
    depth = len(module_name.split("."))
    if hasattr(module, "__path__"):
        # Package: the file is <root>/<a>/<b>/__init__.py
        depth += 1
    path = Path(file).resolve()
    parents = path.parents
    if depth - 1 >= len(parents):
        return None
    return parents[depth - 1]
