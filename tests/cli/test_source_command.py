# topmark:header:start
#
#   project      : Implementor
#   file         : test_source_command.py
#   file_relpath : tests/cli/test_source_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `source` command."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any

import pytest

from implementor.api import runtime
from implementor.cli.commands import source
from implementor.pipeline.pipelines import Pipeline
from tests.cli.conftest import (
    assert_GENERATION_ERROR,
    assert_SUCCESS,
    assert_TYPE_NOT_FOUND,
    assert_USAGE_ERROR,
    run_cli,
    run_cli_in,
)
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_source_writes_file(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["source", "impl_samples.shapes:Sample", "out"])

    assert_SUCCESS(result)
    written = tmp_path / "out" / "impl_samples" / "SampleImpl.py"
    assert written.is_file()
    assert "class SampleImpl(impl_samples.shapes.Sample):" in written.read_text(encoding="utf-8")
    assert "Wrote out/impl_samples/SampleImpl.py" in result.output


@mark_cli
def test_source_quiet_prints_nothing(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["-q", "source", "impl_samples.shapes.Sample", "out"])

    assert_SUCCESS(result)
    assert result.output == ""


@mark_cli
def test_source_suffix(tmp_path: Path) -> None:
    result = run_cli_in(
        tmp_path, ["source", "--suffix", "Stub", "impl_samples.shapes:Sample", "out"]
    )

    assert_SUCCESS(result)
    assert (tmp_path / "out" / "impl_samples" / "SampleStub.py").is_file()


@mark_cli
def test_source_stdout() -> None:
    result = run_cli(["source", "--stdout", "impl_samples.shapes:Sample"])

    assert_SUCCESS(result)
    assert result.output.startswith('"""Stub implementation of impl_samples.shapes.Sample."""\n')
    assert "Wrote" not in result.output


@mark_cli
def test_nothing_reported_when_no_file_is_written(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    def render_only(pipeline: Pipeline, target: object, **kwargs: Any) -> Any:
        return runtime.run_pipeline(Pipeline.RENDER, target, **kwargs)

    monkeypatch.setattr(source, "run_pipeline", render_only)
    result = run_cli_in(tmp_path, ["source", "impl_samples.shapes:Sample", "out"])

    assert_SUCCESS(result)
    assert "Wrote" not in result.output
    assert not (tmp_path / "out").exists()


@mark_cli
def test_unresolved_exception_warning_is_shown() -> None:
    result = run_cli(["source", "--stdout", "impl_samples.shapes:Figure"])

    assert_SUCCESS(result)
    assert "[warning] Figure.load: cannot resolve exception 'NoSuchError'" in result.output


@mark_cli
@parametrize(
    "argv, message",
    [
        (["source", "impl_samples.shapes:Sample"], "Missing argument 'ROOT'"),
        (
            ["source", "--stdout", "impl_samples.shapes:Sample", "out"],
            "ROOT cannot be combined with --stdout.",
        ),
        (["source", "--suffix=Bad-Suffix", "impl_samples.shapes:Sample", "out"], "Invalid class"),
        (["-v", "-q", "source", "impl_samples.shapes:Sample", "out"], "mutually exclusive"),
    ],
)
def test_usage_errors(tmp_path: Path, argv: list[str], message: str) -> None:
    result = run_cli_in(tmp_path, argv)

    assert_USAGE_ERROR(result)
    assert message in result.output
    assert not (tmp_path / "out").exists()


@mark_cli
@parametrize(
    "reference",
    [
        "impl_samples.concrete:Concrete",
        "impl_samples.private:_PrivateApi",
        "impl_samples.private:Leaky",
    ],
)
def test_generation_errors(tmp_path: Path, reference: str) -> None:
    result = run_cli_in(tmp_path, ["source", reference, "out"])

    assert_GENERATION_ERROR(result)
    assert not (tmp_path / "out").exists()


@mark_cli
def test_private_referenced_type_message(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["source", "impl_samples.private:Accepts", "out"])

    assert_GENERATION_ERROR(result)
    assert "Argument impl_samples.private._Hidden is private in method alpha" in result.output


@mark_cli
def test_type_not_found(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["source", "impl_samples.shapes:Nope", "out"])

    assert_TYPE_NOT_FOUND(result)
    assert "Type not found" in result.output


@mark_cli
def test_missing_type_argument_is_a_click_usage_error() -> None:
    result = run_cli(["source"])

    assert result.exit_code == 2


@mark_cli
def test_search_path_option(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "path", list(sys.path))
    lib = tmp_path / "lib"
    lib.mkdir()
    (lib / "cli_extra_api.py").write_text(
        "from typing import Protocol\n\n\nclass Extra(Protocol):\n    def go(self) -> None: ...\n",
        encoding="utf-8",
    )

    result = run_cli_in(tmp_path, ["--path", "lib", "source", "cli_extra_api:Extra", "out"])

    assert_SUCCESS(result)
    assert (tmp_path / "out" / "ExtraImpl.py").is_file()
