# topmark:header:start
#
#   project      : Implementor
#   file         : conftest.py
#   file_relpath : tests/pipeline/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared helpers for pipeline tests."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from implementor.pipeline import runner
from implementor.pipeline.context import GenerationContext
from tests.conftest import make_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from implementor.pipeline.contracts import Step


def run_steps(
    subject: object,
    steps: Sequence[Step],
    *,
    root: Path | None = None,
    archive: Path | None = None,
    **overrides: Any,
) -> GenerationContext:
    """Run ``steps`` for ``subject`` with a fresh context and return it.

    Args:
        subject (object): The type to implement.
        steps (Sequence[Step]): The step sequence to run.
        root (Path | None): Output root (source mode).
        archive (Path | None): Destination archive (archive mode).
        **overrides (Any): Configuration overrides for `make_config`.

    Returns:
        GenerationContext: The finished context.
    """
    ctx = GenerationContext(
        subject=subject, config=make_config(**overrides), root=root, archive=archive
    )
    return runner.run(ctx, steps)
