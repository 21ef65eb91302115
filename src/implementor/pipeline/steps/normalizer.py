# topmark:header:start
#
#   project      : Implementor
#   file         : normalizer.py
#   file_relpath : src/implementor/pipeline/steps/normalizer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Normalizer step: escape non-ASCII characters in literals and comments."""

from __future__ import annotations

from typing import TYPE_CHECKING

from implementor.codegen.encoding import normalize
from implementor.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from implementor.pipeline.context import GenerationContext


class NormalizerStep(BaseStep):
    """Set ``ctx.normalized`` from ``ctx.text``."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: GenerationContext) -> bool:
        return ctx.text is not None

    def run(self, ctx: GenerationContext) -> None:
        assert ctx.text is not None
        ctx.normalized = normalize(ctx.text)
