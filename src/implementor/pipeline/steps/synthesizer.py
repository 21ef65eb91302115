# topmark:header:start
#
#   project      : Implementor
#   file         : synthesizer.py
#   file_relpath : src/implementor/pipeline/steps/synthesizer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Synthesizer step: render the source text of the stub implementation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from implementor.codegen.synthesizer import synthesize
from implementor.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from implementor.pipeline.context import GenerationContext


class SynthesizerStep(BaseStep):
    """Set ``ctx.text`` from the validated target and members."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: GenerationContext) -> bool:
        return ctx.target is not None

    def run(self, ctx: GenerationContext) -> None:
        assert ctx.target is not None
        ctx.text = synthesize(ctx.target, ctx.methods, suffix=ctx.config.suffix)
