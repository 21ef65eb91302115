# topmark:header:start
#
#   project      : Implementor
#   file         : options.py
#   file_relpath : src/implementor/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, configuration,
generation overrides) and their resolution logic, so commands and groups can
stay thin. The helpers here are Click-aware.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, Final, TypeVar

import click

from implementor.cli.errors import ImplementorUsageError
from implementor.config.logging import TRACE_LEVEL, get_logger

R = TypeVar("R")

# Program-output level by number of -v flags (more flags saturate at TRACE).
_VERBOSE_LEVELS: Final[tuple[int, ...]] = (
    logging.WARNING,
    logging.INFO,
    logging.DEBUG,
    TRACE_LEVEL,
)

logger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Map the -v/-q counts to a program-output level.

    ``-v`` selects INFO, ``-vv`` DEBUG and ``-vvv`` (or more) TRACE; any ``-q``
    selects ERROR. Without flags the level is WARNING.

    Raises:
        ImplementorUsageError: If -v and -q are combined.
    """
    if verbose_count and quiet_count:
        raise ImplementorUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count:
        return logging.ERROR
    return _VERBOSE_LEVELS[min(verbose_count, len(_VERBOSE_LEVELS) - 1)]


def common_verbose_options(f: Callable[..., R]) -> Callable[..., R]:
    """Add -v/--verbose and -q/--quiet (counted, mutually exclusive)."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Show more output: -v adds info diagnostics, -vv and -vvv debug and trace.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors.",
    )(f)
    return f


class ColorMode(str, Enum):
    """Value of the ``--color`` option."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Return whether program output should carry ANSI colors.

    An explicit ``always``/``never`` wins. In ``auto`` mode a non-empty
    ``FORCE_COLOR`` other than ``"0"`` enables color, ``NO_COLOR`` disables it,
    and otherwise color follows whether stdout is a terminal.

    Args:
        cli_mode (ColorMode | None): Mode from ``--color``/``--no-color``.
        stdout_isatty (bool | None): Terminal check override; probed when None.

    Returns:
        bool: True to colorize.
    """
    if cli_mode in (ColorMode.ALWAYS, ColorMode.NEVER):
        return cli_mode == ColorMode.ALWAYS
    if os.getenv("FORCE_COLOR", "0") not in ("", "0"):
        return True
    if "NO_COLOR" in os.environ:
        return False
    if stdout_isatty is not None:
        return stdout_isatty
    isatty = getattr(sys.stdout, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        # Closed stream
        return False


def common_color_options(f: Callable[..., R]) -> Callable[..., R]:
    """Add --color (auto, always, never) and --no-color."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="When to color output (default: auto).",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Never color output (same as --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[..., R]) -> Callable[..., R]:
    """Add --config (repeatable), --no-config and -p/--path (repeatable)."""
    f = click.option(
        "--config",
        "config_files",
        multiple=True,
        type=click.Path(exists=True, dir_okay=False, path_type=str),
        help="Merge this TOML config file on top of the discovered one (repeatable).",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Do not discover implementor.toml / pyproject.toml in the working directory.",
    )(f)
    f = click.option(
        "-p",
        "--path",
        "search_paths",
        multiple=True,
        type=click.Path(file_okay=False, path_type=str),
        help="Prepend this directory to the import path used for type lookup (repeatable).",
    )(f)
    return f


def suffix_option(f: Callable[..., R]) -> Callable[..., R]:
    """Add --suffix (overrides the configured class name suffix)."""
    return click.option(
        "--suffix",
        default=None,
        help="Suffix of the generated class name (default: Impl).",
    )(f)
