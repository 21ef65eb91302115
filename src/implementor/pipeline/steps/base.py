# topmark:header:start
#
#   project      : Implementor
#   file         : base.py
#   file_relpath : src/implementor/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common behavior of pipeline steps.

Each step is a callable taking and returning the `GenerationContext`. Calling a
step checks whether the flow is halted, asks ``may_proceed()``, calls ``run()``
and finally ``hint()``. An `ImplementorError` raised by ``run()`` fails the run
at that step; every later step is then skipped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from implementor.config.logging import get_logger
from implementor.core.errors import ImplementorError

if TYPE_CHECKING:
    from implementor.config.logging import ImplementorLogger
    from implementor.pipeline.context import GenerationContext

logger: ImplementorLogger = get_logger(__name__)


# Steps compare by identity, so pipelines that differ only in a sink stay distinct.
@dataclass(eq=False)
class BaseStep:
    """Base class of the generation steps.

    Subclasses override ``run()`` and, where needed, ``may_proceed()`` and
    ``hint()``.

    Attributes:
        name (str): Step name used in logs and as ``FlowControl.at_step``.
    """

    name: str

    def __call__(self, ctx: GenerationContext) -> GenerationContext:
        ctx.steps.append(self)
        if ctx.flow.halt:
            logger.debug("Skipping %s, run halted at %s", self.name, ctx.flow.at_step)
            return ctx

        if not self.may_proceed(ctx):
            logger.debug("Step %s has nothing to do", self.name)
        else:
            logger.debug("Running step %s", self.name)
            try:
                self.run(ctx)
            except ImplementorError as exc:
                ctx.fail(exc, at_step=self.name)
                logger.info("Step %s failed: %s", self.name, exc.message)

        self.hint(ctx)
        return ctx

    def may_proceed(self, ctx: GenerationContext) -> bool:
        """Return False to skip ``run()`` for this context."""
        return True

    def run(self, ctx: GenerationContext) -> None:
        """Do the work of the step.

        Raises:
            ImplementorError: To fail the run.
        """

    def hint(self, ctx: GenerationContext) -> None:
        """Add diagnostics after ``run()``; called even when the step was skipped by ``may_proceed()``."""
