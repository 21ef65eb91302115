# topmark:header:start
#
#   project      : Implementor
#   file         : __init__.py
#   file_relpath : src/implementor/codegen/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source synthesis and encoding normalization of stub implementations."""

from __future__ import annotations

from implementor.codegen.encoding import normalize
from implementor.codegen.synthesizer import synthesize

__all__: list[str] = [
    "normalize",
    "synthesize",
]
