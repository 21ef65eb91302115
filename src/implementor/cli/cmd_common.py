# topmark:header:start
#
#   project      : Implementor
#   file         : cmd_common.py
#   file_relpath : src/implementor/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small, focused helpers used by the generation commands: effective
configuration, type lookup, and result reporting. Exit-code policy lives in
`implementor.cli.errors`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from implementor.cli.errors import (
    ImplementorTypeNotFoundError,
    ImplementorUsageError,
    error_for,
)
from implementor.config import MutableConfig
from implementor.config.logging import get_logger
from implementor.core.errors import TypeLookupError
from implementor.diagnostic import DiagnosticLevel
from implementor.introspection.lookup import resolve_type

if TYPE_CHECKING:
    from implementor.api.types import GenerationResult
    from implementor.cli.console import ConsoleLike
    from implementor.config import Config

logger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the project console stored on the Click context."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output level (a `logging` level; WARNING by default)."""
    return int(ctx.obj.get("verbosity_level", logging.WARNING))


def build_config(
    ctx: click.Context,
    *,
    suffix: str | None = None,
    python: str | None = None,
    verify: bool | None = None,
) -> Config:
    """Freeze the group-level draft with command-line overrides applied last.

    Raises:
        ImplementorUsageError: If the effective settings are invalid.
    """
    draft: MutableConfig = ctx.obj.get("config") or MutableConfig.from_defaults()
    if suffix is not None:
        draft.suffix = suffix
    if python is not None:
        draft.python = python
    if verify is not None:
        draft.verify = verify
    try:
        return draft.freeze()
    except ValueError as exc:
        raise ImplementorUsageError(str(exc)) from exc


def lookup_type(reference: str, config: Config) -> object:
    """Resolve a type reference, reporting failures as a lookup error.

    Raises:
        ImplementorTypeNotFoundError: If ``reference`` does not resolve.
    """
    try:
        return resolve_type(reference, search_paths=config.search_paths)
    except TypeLookupError as exc:
        raise ImplementorTypeNotFoundError(f"Type not found: {exc}") from exc


def report_result(
    ctx: click.Context, result: GenerationResult, *, show_info: bool = True
) -> None:
    """Print diagnostics and raise the CLI error matching a failed result.

    Warnings go to stderr unless ``-q`` is given; info diagnostics go to stdout
    and need ``-v`` (and ``show_info``).

    Raises:
        ImplementorCliError: The error class matching ``result.error.kind``.
    """
    console = get_console(ctx)
    level = get_effective_verbosity(ctx)
    color = bool(ctx.obj.get("color_enabled", False))
    for diagnostic in result.diagnostics:
        if diagnostic.level is DiagnosticLevel.INFO:
            if show_info and level <= logging.INFO:
                console.print(diagnostic.render(color=color))
        elif level < logging.ERROR:
            console.warn(diagnostic.render(color=color))
    if result.error is not None:
        logger.debug("Generation failed: %s", result.error)
        raise error_for(result.error)
