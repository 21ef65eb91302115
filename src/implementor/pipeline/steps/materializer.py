# topmark:header:start
#
#   project      : Implementor
#   file         : materializer.py
#   file_relpath : src/implementor/pipeline/steps/materializer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Materializer step for committing the generated source to a sink.

This step is the only place where a source unit is written. Validation has
already passed when it runs, so a failed validation never leaves a partial file
behind.

Sinks
-----
- FileSystemSink: writes ``<root>/<package path>/<Name><Suffix>.py``.
- StdoutSink: prints the normalized text (preview mode).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from implementor.config.logging import get_logger
from implementor.core.errors import ErrorKind, ImplementorError
from implementor.pipeline.status import WriteStatus
from implementor.pipeline.steps.base import BaseStep
from implementor.utils.file import source_path

if TYPE_CHECKING:
    from pathlib import Path

    from implementor.config.logging import ImplementorLogger
    from implementor.pipeline.context import GenerationContext

logger: ImplementorLogger = get_logger(__name__)


@dataclass
class WriteResult:
    """Structured result of a write operation."""

    status: WriteStatus
    bytes_written: int = 0
    path: Path | None = None


class WriteSink(Protocol):
    """Protocol for sinks used by the materializer step."""

    def write(self, *, ctx: GenerationContext) -> WriteResult:
        """Write ``ctx.normalized`` to the sink.

        Raises:
            ImplementorError: ``SOURCE_WRITE_FAILURE`` if the write fails.
        """
        ...


class StdoutSink:
    """Standard-output sink (preview mode)."""

    def write(self, *, ctx: GenerationContext) -> WriteResult:
        """Emit the normalized text to standard output.

        Returns:
            WriteResult: ``PREVIEWED`` with the number of UTF-8 bytes printed.
        """
        text: str = ctx.normalized or ""
        print(text, end="")  # noqa: T201 (intentional: preview writes to stdout)
        return WriteResult(status=WriteStatus.PREVIEWED, bytes_written=len(text.encode("utf-8")))


class FileSystemSink:
    """Filesystem sink that writes under ``ctx.output_root``."""

    def write(self, *, ctx: GenerationContext) -> WriteResult:
        """Write the normalized text, replacing any existing file.

        Missing package directories are created first. A directory-creation
        failure is only recorded as a warning: the write that follows then
        fails and reports the error.

        Returns:
            WriteResult: ``WRITTEN`` with the path and number of bytes written.

        Raises:
            ImplementorError: ``SOURCE_WRITE_FAILURE`` if the file cannot be written.
        """
        assert ctx.target is not None and ctx.output_root is not None
        text: str = ctx.normalized or ""
        path: Path = source_path(ctx.output_root, ctx.target, ctx.config.suffix)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.warning("Unable to create directory %s: %s", path.parent, exc)
            ctx.add_warning(f"Unable to create directory {path.parent}: {exc}")
        try:
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(text)
        except OSError as exc:
            raise ImplementorError(
                ErrorKind.SOURCE_WRITE_FAILURE,
                f"Unable to write source file {path}: {exc}",
                type_name=ctx.target.qualified_name,
            ) from exc
        bytes_written: int = len(text.encode("utf-8"))
        logger.debug("FileSystemSink: wrote %d bytes to file %s", bytes_written, path)
        return WriteResult(status=WriteStatus.WRITTEN, bytes_written=bytes_written, path=path)


class MaterializerStep(BaseStep):
    """Commit ``ctx.normalized`` to the configured sink.

    Sets:
      - ``ctx.write_status``
      - ``ctx.source_path`` (filesystem sink only)
    """

    def __init__(self, sink: WriteSink | None = None) -> None:
        super().__init__(name=self.__class__.__name__)
        self.sink: WriteSink = sink or FileSystemSink()

    def may_proceed(self, ctx: GenerationContext) -> bool:
        return ctx.normalized is not None and ctx.target is not None

    def run(self, ctx: GenerationContext) -> None:
        result = self.sink.write(ctx=ctx)
        ctx.write_status = result.status
        if result.path is not None:
            ctx.source_path = result.path

    def hint(self, ctx: GenerationContext) -> None:
        if ctx.write_status is WriteStatus.WRITTEN and ctx.source_path is not None:
            ctx.add_info(f"Wrote {ctx.source_path}")
