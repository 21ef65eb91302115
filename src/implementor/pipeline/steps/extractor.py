# topmark:header:start
#
#   project      : Implementor
#   file         : extractor.py
#   file_relpath : src/implementor/pipeline/steps/extractor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Extractor step: reflect the target into a `TargetType` and its members."""

from __future__ import annotations

from typing import TYPE_CHECKING

from implementor.config.logging import get_logger
from implementor.introspection.extractor import describe_type, extract_methods
from implementor.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from implementor.config.logging import ImplementorLogger
    from implementor.pipeline.context import GenerationContext

logger: ImplementorLogger = get_logger(__name__)


class ExtractorStep(BaseStep):
    """Populate ``ctx.target`` and ``ctx.methods``.

    Sets:
      - ``ctx.target``: the `TargetType` of ``ctx.subject``
      - ``ctx.methods``: members to implement, sorted by name
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def run(self, ctx: GenerationContext) -> None:
        """Describe ``ctx.subject`` and enumerate its members."""
        ctx.target = describe_type(ctx.subject)
        ctx.methods = extract_methods(ctx.target)

    def hint(self, ctx: GenerationContext) -> None:
        """Warn about ``Raises:`` entries that do not name an exception class."""
        for method in ctx.methods:
            for name in method.unresolved_exceptions:
                ctx.add_warning(
                    f"{method.declared_in}.{method.name}: cannot resolve exception {name!r}; "
                    "omitted from the generated docstring"
                )
