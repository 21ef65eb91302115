# topmark:header:start
#
#   project      : Implementor
#   file         : contracts.py
#   file_relpath : src/implementor/pipeline/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type contracts for pipeline steps.

Steps are instantiated objects that are *callable*; the runner invokes them as
``ctx = step(ctx)`` where ``ctx`` is a `GenerationContext`.

Lifecycle
---------
1) ``step.may_proceed(ctx)`` gates execution.
2) If allowed, ``step.run(ctx)`` mutates ``ctx`` in place and may raise
   `ImplementorError`, which halts the flow.
3) ``step.hint(ctx)`` attaches non-binding diagnostics.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .context import GenerationContext


class Step(Protocol):
    """Protocol for a single pipeline step."""

    name: str

    def may_proceed(self, ctx: GenerationContext) -> bool:
        """Return whether the step should run given the current context."""
        ...

    def run(self, ctx: GenerationContext) -> None:
        """Execute the step, mutating the context in place."""
        ...

    def hint(self, ctx: GenerationContext) -> None:
        """Attach non-binding diagnostics to the context."""
        ...

    def __call__(self, ctx: GenerationContext) -> GenerationContext:
        """Run the full lifecycle and return the same context."""
        ...
