# topmark:header:start
#
#   project      : Implementor
#   file         : concrete.py
#   file_relpath : tests/fixtures/impl_samples/concrete.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Types that are not interfaces."""

from __future__ import annotations

import abc
import enum


class Concrete:
    def run(self) -> None:
        pass


class Stateful(abc.ABC):
    def __init__(self) -> None:
        self.count = 0

    @abc.abstractmethod
    def run(self) -> None: ...


class Complete(abc.ABC):
    """An ABC that implements everything it declares."""

    def run(self) -> None:
        pass


class Color(enum.Enum):
    RED = 1
    GREEN = 2
