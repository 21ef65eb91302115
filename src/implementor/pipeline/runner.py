# topmark:header:start
#
#   project      : Implementor
#   file         : runner.py
#   file_relpath : src/implementor/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run a generation pipeline for a single target."""

from __future__ import annotations

from typing import TYPE_CHECKING

from implementor.config.logging import get_logger
from implementor.toolchain.workspace import remove_workspace

if TYPE_CHECKING:
    from collections.abc import Sequence

    from implementor.config.logging import ImplementorLogger

    from .context import GenerationContext
    from .contracts import Step

logger: ImplementorLogger = get_logger(__name__)


def cleanup_workspace(ctx: GenerationContext) -> None:
    """Remove ``ctx.workspace`` if one was allocated.

    A cleanup failure is logged and recorded as a warning diagnostic; it never
    changes the outcome of the run.
    """
    if ctx.workspace is None or ctx.workspace_removed:
        return
    try:
        remove_workspace(ctx.workspace)
    except OSError as exc:
        logger.warning("Unable to remove workspace %s: %s", ctx.workspace, exc)
        ctx.add_warning(f"Unable to remove temporary directory {ctx.workspace}: {exc}")
        return
    ctx.workspace_removed = True


def run(ctx: GenerationContext, steps: Sequence[Step]) -> GenerationContext:
    """Execute the pipeline sequentially, stopping at the first failure.

    Workspace cleanup runs on every exit path, including unexpected exceptions.

    Args:
        ctx (GenerationContext): Mutable generation context.
        steps (Sequence[Step]): Ordered sequence of pipeline steps.

    Returns:
        GenerationContext: The final context after all steps have run.
    """
    logger.debug("Running %d step(s) for %r", len(steps), ctx.subject)
    try:
        for step in steps:
            ctx = step(ctx)
            if ctx.flow.halt:
                break
    finally:
        cleanup_workspace(ctx)
    return ctx
