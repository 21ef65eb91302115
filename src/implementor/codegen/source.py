# topmark:header:start
#
#   project      : Implementor
#   file         : source.py
#   file_relpath : src/implementor/codegen/source.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Mutable text buffer for one generated source unit."""

from __future__ import annotations

from dataclasses import dataclass, field

INDENT: str = "    "
NEW_LINE: str = "\n"


@dataclass
class SourceUnit:
    """Accumulates the lines of a generated module.

    A unit is owned by exactly one synthesis call; `text` finalizes it.
    """

    lines: list[str] = field(default_factory=lambda: [])

    def line(self, text: str = "", depth: int = 0) -> SourceUnit:
        """Append ``text`` indented by ``depth`` levels (blank lines carry no indent)."""
        self.lines.append(INDENT * depth + text if text else "")
        return self

    def blank(self, count: int = 1) -> SourceUnit:
        """Append ``count`` empty lines."""
        self.lines.extend([""] * count)
        return self

    def text(self) -> str:
        """Return the accumulated text with a single trailing newline."""
        return NEW_LINE.join(self.lines).rstrip(NEW_LINE) + NEW_LINE
