# topmark:header:start
#
#   project      : Implementor
#   file         : validator.py
#   file_relpath : src/implementor/pipeline/steps/validator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Validator step: reject non-interfaces and inaccessible types before any write."""

from __future__ import annotations

from typing import TYPE_CHECKING

from implementor.introspection.validator import validate
from implementor.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from implementor.pipeline.context import GenerationContext


class ValidatorStep(BaseStep):
    """Check the target and every type its members reference."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: GenerationContext) -> bool:
        return ctx.target is not None

    def run(self, ctx: GenerationContext) -> None:
        assert ctx.target is not None
        validate(ctx.target, ctx.methods)
