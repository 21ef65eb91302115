# topmark:header:start
#
#   project      : Implementor
#   file         : flat_api.py
#   file_relpath : tests/fixtures/flat_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""A top-level module: its interfaces live in the unnamed package."""

from __future__ import annotations

from typing import Protocol


class Flat(Protocol):
    def ping(self) -> bool: ...
