# topmark:header:start
#
#   project      : Implementor
#   file         : workspace.py
#   file_relpath : src/implementor/pipeline/steps/workspace.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Workspace step: allocate the temporary staging directory (archive mode)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from implementor.pipeline.steps.base import BaseStep
from implementor.toolchain.workspace import create_workspace

if TYPE_CHECKING:
    from implementor.pipeline.context import GenerationContext


class WorkspaceStep(BaseStep):
    """Set ``ctx.workspace`` to a fresh directory next to the destination archive."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: GenerationContext) -> bool:
        return ctx.archive is not None

    def run(self, ctx: GenerationContext) -> None:
        assert ctx.archive is not None
        ctx.workspace = create_workspace(ctx.archive, prefix=ctx.config.workspace_prefix)
