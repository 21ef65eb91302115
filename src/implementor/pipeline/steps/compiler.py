# topmark:header:start
#
#   project      : Implementor
#   file         : compiler.py
#   file_relpath : src/implementor/pipeline/steps/compiler.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Compiler step: byte-compile the generated source with a Python interpreter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from implementor.config.logging import get_logger
from implementor.introspection.lookup import code_source_root
from implementor.pipeline.steps.base import BaseStep
from implementor.toolchain.compiler import PythonToolchain

if TYPE_CHECKING:
    from pathlib import Path

    from implementor.config.logging import ImplementorLogger
    from implementor.pipeline.context import GenerationContext

logger: ImplementorLogger = get_logger(__name__)


class CompilerStep(BaseStep):
    """Set ``ctx.compiled_path``.

    The import path of the child interpreter is the code-source root of the
    interface followed by the configured search paths.
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: GenerationContext) -> bool:
        return ctx.source_path is not None and ctx.target is not None

    def run(self, ctx: GenerationContext) -> None:
        assert ctx.source_path is not None and ctx.target is not None
        toolchain = PythonToolchain.locate(ctx.config.python, verify=ctx.config.verify)
        classpath: list[Path] = []
        root = code_source_root(ctx.target.obj)
        if root is not None:
            classpath.append(root)
        else:
            logger.debug("No code-source root for %s", ctx.target.qualified_name)
        classpath.extend(p for p in ctx.config.search_paths if p not in classpath)
        ctx.compiled_path = toolchain.compile(
            ctx.source_path,
            target=ctx.target,
            suffix=ctx.config.suffix,
            classpath=classpath,
        )
