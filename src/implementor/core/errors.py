# topmark:header:start
#
#   project      : Implementor
#   file         : errors.py
#   file_relpath : src/implementor/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generation error taxonomy.

Every failure the generator can report is an `ErrorKind`. Pipeline steps raise
`ImplementorError`; the step wrapper converts it into an immutable
`GenerationError` on the processing context, so API callers branch on
``result.error.kind`` instead of inspecting an exception hierarchy.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Discriminating cause of a generation failure."""

    NOT_AN_INTERFACE = "not_an_interface"
    PRIVATE_INTERFACE = "private_interface"
    PRIVATE_REFERENCED_TYPE = "private_referenced_type"
    SOURCE_WRITE_FAILURE = "source_write_failure"
    WORKSPACE_CREATION_ERROR = "workspace_creation_error"
    TOOLCHAIN_UNAVAILABLE = "toolchain_unavailable"
    COMPILATION_FAILURE = "compilation_failure"
    ARCHIVE_WRITE_FAILURE = "archive_write_failure"


@dataclass(frozen=True)
class GenerationError:
    """Immutable description of a failed generation.

    Attributes:
        kind (ErrorKind): The discriminating cause.
        message (str): Single descriptive, user-facing message.
        method (str | None): Offending method name (``PRIVATE_REFERENCED_TYPE`` only).
        type_name (str | None): Offending type's qualified name, when one applies.
    """

    kind: ErrorKind
    message: str
    method: str | None = None
    type_name: str | None = None

    def __str__(self) -> str:
        return self.message


class ImplementorError(Exception):
    """Exception raised by generation steps; carries an `ErrorKind`."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        method: str | None = None,
        type_name: str | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.method = method
        self.type_name = type_name

    @classmethod
    def from_error(cls, error: GenerationError) -> ImplementorError:
        """Rebuild an exception from an immutable `GenerationError`."""
        return cls(error.kind, error.message, method=error.method, type_name=error.type_name)

    def to_error(self) -> GenerationError:
        """Return the immutable `GenerationError` for this exception."""
        return GenerationError(
            kind=self.kind,
            message=self.message,
            method=self.method,
            type_name=self.type_name,
        )


class TypeLookupError(LookupError):
    """Raised when a type reference cannot be imported or resolved to an object.

    Not an `ImplementorError`: lookup happens before generation starts and is
    reported separately by the command line.
    """
