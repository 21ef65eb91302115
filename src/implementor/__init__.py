# topmark:header:start
#
#   project      : Implementor
#   file         : __init__.py
#   file_relpath : src/implementor/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Implementor package.

Implementor generates minimal concrete implementations of Python interfaces
(``typing.Protocol`` classes and pure ``abc.ABC`` classes). It renders a
stub module with default-value bodies, and can byte-compile that module and
bundle it into a manifest-bearing archive. Both a CLI and a small typed API
are exposed.
"""

from __future__ import annotations
