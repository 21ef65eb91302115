# topmark:header:start
#
#   project      : Implementor
#   file         : types.py
#   file_relpath : src/implementor/api/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stable public types for the Implementor API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from implementor.core.errors import ImplementorError

if TYPE_CHECKING:
    from pathlib import Path

    from implementor.core.errors import GenerationError
    from implementor.diagnostic import Diagnostic
    from implementor.pipeline.context import GenerationContext


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one generation run.

    Attributes:
        target (str | None): Qualified name of the implemented interface.
        error (GenerationError | None): The failure, or None on success.
        source_path (Path | None): Written source unit (source mode).
        archive_path (Path | None): Written archive (archive mode).
        text (str | None): Normalized source text, when it was produced.
        diagnostics (tuple[Diagnostic, ...]): Non-fatal diagnostics.
    """

    target: str | None
    error: GenerationError | None
    source_path: Path | None = None
    archive_path: Path | None = None
    text: str | None = None
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def ok(self) -> bool:
        """Return True if the run succeeded."""
        return self.error is None

    def raise_for_error(self) -> GenerationResult:
        """Raise `ImplementorError` if the run failed; return ``self`` otherwise."""
        if self.error is not None:
            raise ImplementorError.from_error(self.error)
        return self

    @classmethod
    def from_context(cls, ctx: GenerationContext) -> GenerationResult:
        """Build a result from a finished `GenerationContext`."""
        return cls(
            target=ctx.target.qualified_name if ctx.target else None,
            error=ctx.error,
            # In archive mode the source unit lived in the (removed) workspace.
            source_path=ctx.source_path if ctx.archive is None else None,
            archive_path=ctx.archive_path,
            text=ctx.normalized,
            diagnostics=ctx.diagnostics.freeze(),
        )
