# topmark:header:start
#
#   project      : Implementor
#   file         : console.py
#   file_relpath : src/implementor/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""User-facing output of the command line.

Messages meant for the person running ``implementor`` (results, hints,
diagnostics) go through a console; the `logging` tree stays reserved for
internal tracing. Tests can pass their own streams.
"""

from __future__ import annotations

import sys
from typing import Any, Protocol, TextIO

import click


class ConsoleLike(Protocol):
    """What commands need from a console."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Emit ``text`` on standard output."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Emit a warning on standard error."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Emit an error on standard error."""
        ...

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` decorated with ``click.style`` arguments."""
        ...


class ClickConsole(ConsoleLike):
    """Console backed by `click.echo`.

    Args:
        enable_color (bool): Emit ANSI styles when True.
        out (TextIO | None): Output stream, ``sys.stdout`` when omitted.
        err (TextIO | None): Warning and error stream, ``sys.stderr`` when omitted.
    """

    enable_color: bool
    out: TextIO
    err: TextIO

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Echo ``text`` to ``out``."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Echo ``text`` to ``err`` in yellow."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Echo ``text`` to ``err`` in bright red."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Apply ``click.style`` unless color is disabled."""
        return click.style(text, **style_kwargs) if self.enable_color else text
