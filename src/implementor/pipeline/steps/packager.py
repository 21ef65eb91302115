# topmark:header:start
#
#   project      : Implementor
#   file         : packager.py
#   file_relpath : src/implementor/pipeline/steps/packager.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Packaging steps: build the manifest and write the archive."""

from __future__ import annotations

from typing import TYPE_CHECKING

from implementor.pipeline.steps.base import BaseStep
from implementor.toolchain.archive import archive_entry_name, build_manifest, write_archive

if TYPE_CHECKING:
    from implementor.pipeline.context import GenerationContext


class ManifestStep(BaseStep):
    """Set ``ctx.manifest`` (mandatory version attribute only)."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: GenerationContext) -> bool:
        return ctx.compiled_path is not None

    def run(self, ctx: GenerationContext) -> None:
        ctx.manifest = build_manifest(ctx.config.manifest_version)


class ArchiveStep(BaseStep):
    """Write ``ctx.archive`` with the manifest and the compiled unit."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: GenerationContext) -> bool:
        return (
            ctx.archive is not None
            and ctx.manifest is not None
            and ctx.compiled_path is not None
            and ctx.target is not None
        )

    def run(self, ctx: GenerationContext) -> None:
        assert ctx.archive is not None and ctx.manifest is not None
        assert ctx.compiled_path is not None and ctx.target is not None
        write_archive(
            ctx.archive,
            manifest=ctx.manifest,
            entry_name=archive_entry_name(ctx.target, ctx.config.suffix),
            compiled=ctx.compiled_path,
        )
        ctx.archive_path = ctx.archive

    def hint(self, ctx: GenerationContext) -> None:
        if ctx.archive_path is not None:
            ctx.add_info(f"Wrote {ctx.archive_path}")
