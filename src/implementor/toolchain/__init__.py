# topmark:header:start
#
#   project      : Implementor
#   file         : __init__.py
#   file_relpath : src/implementor/toolchain/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Compile and package stages of archive-mode generation.

* `compiler`: locate a Python interpreter and byte-compile a generated unit.
* `workspace`: allocate and remove the temporary staging directory.
* `archive`: build the manifest and write the single-entry archive.
"""

from __future__ import annotations
