# topmark:header:start
#
#   project      : Implementor
#   file         : test_runner.py
#   file_relpath : tests/pipeline/test_runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the pipeline runner and step lifecycle."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from impl_samples import shapes

from implementor.core.errors import ErrorKind, ImplementorError
from implementor.pipeline import runner
from implementor.pipeline.context import GenerationContext
from implementor.pipeline.steps.base import BaseStep
from tests.conftest import make_config, mark_pipeline

if TYPE_CHECKING:
    from implementor.pipeline.contracts import Step


class _Failing(BaseStep):
    def __init__(self) -> None:
        super().__init__(name="Failing")

    def run(self, ctx: GenerationContext) -> None:
        raise ImplementorError(ErrorKind.COMPILATION_FAILURE, "boom")


class _Recording(BaseStep):
    def __init__(self) -> None:
        super().__init__(name="Recording")
        self.ran = False

    def run(self, ctx: GenerationContext) -> None:
        self.ran = True


class _Exploding(BaseStep):
    def __init__(self) -> None:
        super().__init__(name="Exploding")

    def run(self, ctx: GenerationContext) -> None:
        raise RuntimeError("unexpected")


def _context(workspace: Path | None = None) -> GenerationContext:
    ctx = GenerationContext(subject=shapes.Sample, config=make_config())
    ctx.workspace = workspace
    return ctx


@mark_pipeline
def test_failure_halts_and_skips_later_steps() -> None:
    later = _Recording()
    steps: list[Step] = [_Failing(), later]

    ctx = runner.run(_context(), steps)

    assert ctx.error is not None
    assert ctx.error.kind is ErrorKind.COMPILATION_FAILURE
    assert ctx.flow.reason == "compilation_failure"
    assert ctx.flow.at_step == "Failing"
    assert not later.ran
    # The runner stops at the halt, so the later step is never invoked.
    assert [s.name for s in ctx.steps] == ["Failing"]


@mark_pipeline
def test_halted_context_skips_step() -> None:
    ctx = _context()
    ctx.flow.halt = True
    step = _Recording()

    step(ctx)

    assert not step.ran
    assert ctx.steps == [step]


@mark_pipeline
def test_workspace_removed_after_failure(tmp_path: Path) -> None:
    workspace = tmp_path / "temp123"
    (workspace / "pkg").mkdir(parents=True)
    (workspace / "pkg" / "X.py").write_text("x = 1\n")

    ctx = runner.run(_context(workspace), [_Failing()])

    assert not workspace.exists()
    assert ctx.workspace_removed


@mark_pipeline
def test_workspace_removed_after_unexpected_exception(tmp_path: Path) -> None:
    workspace = tmp_path / "temp456"
    workspace.mkdir()

    with pytest.raises(RuntimeError):
        runner.run(_context(workspace), [_Exploding()])

    assert not workspace.exists()


@mark_pipeline
def test_cleanup_failure_is_a_warning(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    workspace = tmp_path / "temp789"
    workspace.mkdir()

    def _refuse(path: Path) -> None:
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr(runner, "remove_workspace", _refuse)

    ctx = runner.run(_context(workspace), [_Recording()])

    assert ctx.ok
    assert not ctx.workspace_removed
    warnings = [d.message for d in ctx.diagnostics]
    assert len(warnings) == 1
    assert warnings[0].startswith(f"Unable to remove temporary directory {workspace}")


@mark_pipeline
def test_cleanup_without_workspace_is_a_no_op() -> None:
    ctx = _context()
    runner.cleanup_workspace(ctx)
    assert not ctx.workspace_removed
    assert len(ctx.diagnostics) == 0
