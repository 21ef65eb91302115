# topmark:header:start
#
#   project      : Implementor
#   file         : private.py
#   file_relpath : tests/fixtures/impl_samples/private.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Interfaces that reference inaccessible types."""

from __future__ import annotations

from typing import Protocol


class _Hidden:
    pass


class _Failure(Exception):
    pass


class Leaky(Protocol):
    """Exposes a private nested type from a member."""

    class _Token:
        pass

    def token(self) -> Leaky._Token: ...


class Accepts(Protocol):
    """``alpha`` has a private parameter, ``beta`` a private return type."""

    def alpha(self, token: _Hidden) -> None: ...

    def beta(self) -> _Hidden: ...


class Raiser(Protocol):
    """Declares a private exception."""

    def go(self) -> None:
        """Go.

        Raises:
            _Failure: Always.
        """
        ...


class _PrivateApi(Protocol):
    def run(self) -> None: ...


def make_local() -> type:
    """Return a protocol defined in a function body."""

    class LocalApi(Protocol):
        def run(self) -> None: ...

    return LocalApi
