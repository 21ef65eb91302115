# topmark:header:start
#
#   project      : Implementor
#   file         : test_lookup.py
#   file_relpath : tests/introspection/test_lookup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for type reference resolution."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from impl_samples import shapes

from implementor.core.errors import TypeLookupError
from implementor.introspection.lookup import code_source_root, extend_sys_path, resolve_type
from tests.conftest import parametrize

FIXTURES: Path = Path(__file__).resolve().parents[1] / "fixtures"


@parametrize(
    "reference",
    [
        "impl_samples.shapes.Sample",
        "impl_samples.shapes:Sample",
        "  impl_samples.shapes.Sample  ",
    ],
)
def test_resolve_type_forms(reference: str) -> None:
    assert resolve_type(reference) is shapes.Sample


def test_resolve_nested_attribute() -> None:
    from impl_samples import private

    assert resolve_type("impl_samples.private:Leaky._Token") is private.Leaky._Token


@parametrize(
    "reference, message",
    [
        ("", "Empty type reference"),
        ("no_such_module_xyz.Thing", "Type not found"),
        ("no_such_module_xyz:Thing", "Module not found"),
        ("impl_samples.shapes.Missing", "no attribute 'Missing'"),
        ("impl_samples.shapes:Sample.nope", "no attribute 'nope'"),
    ],
)
def test_resolve_type_errors(reference: str, message: str) -> None:
    with pytest.raises(TypeLookupError, match=message):
        resolve_type(reference)


def test_extend_sys_path_is_idempotent(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(sys, "path", list(sys.path))
    extend_sys_path([tmp_path, tmp_path])
    extend_sys_path([tmp_path])
    assert sys.path.count(str(tmp_path.resolve())) == 1
    assert sys.path[0] == str(tmp_path.resolve())


def test_resolve_type_with_search_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(sys, "path", list(sys.path))
    (tmp_path / "extra_api.py").write_text(
        "from typing import Protocol\n\n\nclass Extra(Protocol):\n    def go(self) -> None: ...\n",
        encoding="utf-8",
    )
    try:
        obj = resolve_type("extra_api.Extra", search_paths=[tmp_path])
        assert getattr(obj, "__name__", None) == "Extra"
        assert code_source_root(obj) == tmp_path.resolve()
    finally:
        sys.modules.pop("extra_api", None)


def test_code_source_root_of_package_module() -> None:
    assert code_source_root(shapes.Sample) == FIXTURES
    assert code_source_root(int) is None
