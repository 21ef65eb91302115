# topmark:header:start
#
#   project      : Implementor
#   file         : errors.py
#   file_relpath : src/implementor/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Implementor CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. `error_for()` maps a `GenerationError` to the
    matching exception class.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from implementor.cli.exit_codes import ExitCode
from implementor.core.errors import ErrorKind, GenerationError


class ImplementorCliError(click.ClickException):
    """Base class for all Implementor CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is not None:
            console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
            return
        super().show(file)


class ImplementorUsageError(ImplementorCliError):
    """Error for invalid option values."""

    exit_code = ExitCode.USAGE_ERROR


class ImplementorConfigError(ImplementorCliError):
    """Error for configuration files that cannot be loaded."""

    exit_code = ExitCode.CONFIG_ERROR


class ImplementorTypeNotFoundError(ImplementorCliError):
    """Error when the type reference does not resolve."""

    exit_code = ExitCode.TYPE_NOT_FOUND


class ImplementorGenerationError(ImplementorCliError):
    """Error when the type cannot be implemented."""

    exit_code = ExitCode.GENERATION_ERROR


class ImplementorToolchainError(ImplementorCliError):
    """Error when no Python interpreter is available to compile with."""

    exit_code = ExitCode.TOOLCHAIN_UNAVAILABLE


class ImplementorCompilationError(ImplementorCliError):
    """Error when the generated unit fails to compile."""

    exit_code = ExitCode.COMPILATION_ERROR


class ImplementorIOError(ImplementorCliError):
    """Error for source, workspace or archive write failures."""

    exit_code = ExitCode.IO_ERROR


_ERROR_CLASSES: dict[ErrorKind, type[ImplementorCliError]] = {
    ErrorKind.NOT_AN_INTERFACE: ImplementorGenerationError,
    ErrorKind.PRIVATE_INTERFACE: ImplementorGenerationError,
    ErrorKind.PRIVATE_REFERENCED_TYPE: ImplementorGenerationError,
    ErrorKind.SOURCE_WRITE_FAILURE: ImplementorIOError,
    ErrorKind.WORKSPACE_CREATION_ERROR: ImplementorIOError,
    ErrorKind.TOOLCHAIN_UNAVAILABLE: ImplementorToolchainError,
    ErrorKind.COMPILATION_FAILURE: ImplementorCompilationError,
    ErrorKind.ARCHIVE_WRITE_FAILURE: ImplementorIOError,
}


def error_for(error: GenerationError) -> ImplementorCliError:
    """Return the CLI exception that reports ``error``."""
    return _ERROR_CLASSES[error.kind](error.message)
