# topmark:header:start
#
#   project      : Implementor
#   file         : logging.py
#   file_relpath : src/implementor/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging for Implementor.

Internal diagnostics (as opposed to program output, see
`implementor.cli.console`) go through the standard `logging` module with one
extra level, TRACE, below DEBUG. Records are colored by severity with `yachalk`.

The level comes from the caller or from the ``IMPLEMENTOR_LOG_LEVEL``
environment variable; when neither is set only CRITICAL records are shown.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, TextIO, cast

from yachalk import chalk

from implementor.constants import LOG_LEVEL_ENV

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
# Below INFO, records also carry their origin.
VERBOSE_LOG_FORMAT: Final[str] = "[%(levelname)s] %(name)s:%(lineno)d: %(message)s"


class ImplementorLogger(logging.Logger):
    """`logging.Logger` with a `trace()` method."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level.

        Args:
            msg (object): The message format.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra record attributes.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(ImplementorLogger)


# Checked in order; the first threshold at or below the record level applies.
_LEVEL_COLORS: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record by severity."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and wrap it in the color of its level."""
        message = super().format(record)
        for threshold, color in _LEVEL_COLORS:
            if record.levelno >= threshold:
                return color(message)
        return chalk.dim(message)


_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


def resolve_env_log_level() -> int | None:
    """Return the level named by ``IMPLEMENTOR_LOG_LEVEL``, if any.

    Accepts level names (case-insensitive, including ``TRACE``) and numbers.
    Unknown names yield None.
    """
    raw = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    return _LEVEL_NAMES.get(raw)


def setup_logging(level: int | None = None, *, stream: TextIO | None = None) -> None:
    """Install a single colored handler on the root logger.

    Args:
        level (int | None): Log level; falls back to `resolve_env_log_level`,
            then CRITICAL.
        stream (TextIO | None): Destination stream (default: ``sys.stderr``).
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        ChalkFormatter(LOG_FORMAT if level >= logging.INFO else VERBOSE_LOG_FORMAT)
    )

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: str) -> ImplementorLogger:
    """Return the `ImplementorLogger` called ``name``."""
    return cast("ImplementorLogger", logging.getLogger(name))
