# topmark:header:start
#
#   project      : Implementor
#   file         : __init__.py
#   file_relpath : src/implementor/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics collected while generating an implementation."""

from __future__ import annotations

from implementor.diagnostic.model import Diagnostic, DiagnosticLevel, DiagnosticLog

__all__ = ["Diagnostic", "DiagnosticLevel", "DiagnosticLog"]
