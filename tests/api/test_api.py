# topmark:header:start
#
#   project      : Implementor
#   file         : test_api.py
#   file_relpath : tests/api/test_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the public API surface."""

from __future__ import annotations

import zipfile
from typing import TYPE_CHECKING

import pytest
from impl_samples import private, shapes

from implementor import api
from implementor.constants import IMPLEMENTOR_VERSION
from tests.conftest import make_config, mark_integration

if TYPE_CHECKING:
    from pathlib import Path


def test_public_names() -> None:
    assert sorted(api.__all__) == [
        "ErrorKind",
        "GenerationError",
        "GenerationResult",
        "ImplementorError",
        "TypeLookupError",
        "implement",
        "implement_archive",
        "preview",
        "resolve_type",
        "version",
    ]


def test_version() -> None:
    assert api.version() == IMPLEMENTOR_VERSION


def test_implement_with_class(tmp_path: Path) -> None:
    result = api.implement(shapes.Sample, tmp_path)

    assert result.ok
    assert result.target == "impl_samples.shapes.Sample"
    assert result.source_path == tmp_path / "impl_samples" / "SampleImpl.py"
    assert result.archive_path is None
    assert result.raise_for_error() is result


def test_implement_with_reference_and_mapping(tmp_path: Path) -> None:
    result = api.implement("impl_samples.shapes:Sample", str(tmp_path), config={"suffix": "Fake"})

    assert result.ok
    assert result.source_path == tmp_path / "impl_samples" / "SampleFake.py"


def test_implement_with_frozen_config(tmp_path: Path) -> None:
    result = api.implement(shapes.Sample, tmp_path, config=make_config(suffix="Stub"))

    assert result.source_path == tmp_path / "impl_samples" / "SampleStub.py"


def test_failure_is_returned_not_raised(tmp_path: Path) -> None:
    result = api.implement(private.Accepts, tmp_path)

    assert not result.ok
    assert result.error is not None
    assert result.error.kind is api.ErrorKind.PRIVATE_REFERENCED_TYPE
    assert result.error.method == "alpha"
    assert result.source_path is None
    with pytest.raises(api.ImplementorError) as info:
        result.raise_for_error()
    assert info.value.kind is api.ErrorKind.PRIVATE_REFERENCED_TYPE


def test_lookup_failure_raises() -> None:
    with pytest.raises(api.TypeLookupError):
        api.implement("impl_samples.shapes:Nope", "unused")


def test_preview() -> None:
    text = api.preview(shapes.Sample)

    assert text.startswith('"""Stub implementation of impl_samples.shapes.Sample."""')


def test_preview_raises_on_failure() -> None:
    with pytest.raises(api.ImplementorError) as info:
        api.preview(private._PrivateApi)
    assert info.value.kind is api.ErrorKind.PRIVATE_INTERFACE


def test_warnings_are_reported_as_diagnostics(tmp_path: Path) -> None:
    result = api.implement(shapes.Figure, tmp_path)

    assert result.ok
    levels = [d.level.value for d in result.diagnostics]
    assert levels == ["warning", "info"]


@mark_integration
def test_implement_archive(tmp_path: Path) -> None:
    archive = tmp_path / "out.zip"

    result = api.implement_archive("impl_samples.shapes.Sample", archive)

    assert result.ok, result.error
    assert result.archive_path == archive
    assert result.source_path is None
    with zipfile.ZipFile(archive) as zf:
        assert "impl_samples/SampleImpl.pyc" in zf.namelist()
