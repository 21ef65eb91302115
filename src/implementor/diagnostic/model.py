# topmark:header:start
#
#   project      : Implementor
#   file         : model.py
#   file_relpath : src/implementor/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Non-fatal diagnostics collected during a generation run.

A run that fails carries a single `GenerationError` (see
`implementor.core.errors`). Everything short of failure is a `Diagnostic`:
an ``info`` note such as the path a unit was written to, or a ``warning``
such as a workspace that could not be removed.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Final

from yachalk import chalk

from implementor.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from implementor.config.logging import ImplementorLogger


logger: ImplementorLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Diagnostic severity."""

    INFO = "info"
    WARNING = "warning"


_LEVEL_COLORS: Final[dict[DiagnosticLevel, Callable[[str], str]]] = {
    DiagnosticLevel.INFO: chalk.blue,
    DiagnosticLevel.WARNING: chalk.yellow,
}


@dataclass(frozen=True)
class Diagnostic:
    """A single diagnostic message."""

    level: DiagnosticLevel
    message: str

    def render(self, *, color: bool = False) -> str:
        """Return ``"[level] message"``, colored with `yachalk` when ``color``."""
        text = f"[{self.level.value}] {self.message}"
        return _LEVEL_COLORS[self.level](text) if color else text


@dataclass
class DiagnosticLog:
    """Diagnostics of one run, in the order they were added."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def add(self, level: DiagnosticLevel, message: str) -> None:
        """Append a diagnostic."""
        logger.trace("Diagnostic [%s]: %s", level.value, message)
        self.items.append(Diagnostic(level, message))

    def add_info(self, message: str) -> None:
        """Append an ``info`` diagnostic."""
        self.add(DiagnosticLevel.INFO, message)

    def add_warning(self, message: str) -> None:
        """Append a ``warning`` diagnostic."""
        self.add(DiagnosticLevel.WARNING, message)

    def has_warning(self) -> bool:
        """Return True if any warning was added."""
        return any(d.level is DiagnosticLevel.WARNING for d in self.items)

    def freeze(self) -> tuple[Diagnostic, ...]:
        """Return the diagnostics as a tuple."""
        return tuple(self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
