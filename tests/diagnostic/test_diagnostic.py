# topmark:header:start
#
#   project      : Implementor
#   file         : test_diagnostic.py
#   file_relpath : tests/diagnostic/test_diagnostic.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for diagnostics."""

from __future__ import annotations

from implementor.diagnostic import Diagnostic, DiagnosticLevel, DiagnosticLog


def test_log_collects_in_order() -> None:
    log = DiagnosticLog()
    log.add_info("one")
    log.add_warning("two")
    log.add(DiagnosticLevel.INFO, "three")

    assert len(log) == 3
    assert [d.level for d in log] == [
        DiagnosticLevel.INFO,
        DiagnosticLevel.WARNING,
        DiagnosticLevel.INFO,
    ]
    assert log.has_warning()
    assert log.freeze() == tuple(log.items)


def test_render() -> None:
    diagnostic = Diagnostic(DiagnosticLevel.WARNING, "careful")
    assert diagnostic.render() == "[warning] careful"
    assert "careful" in diagnostic.render(color=True)


def test_info_only_log_has_no_warning() -> None:
    log = DiagnosticLog()
    log.add_info("fine")
    assert not log.has_warning()
    assert DiagnosticLog().freeze() == ()
