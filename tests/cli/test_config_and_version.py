# topmark:header:start
#
#   project      : Implementor
#   file         : test_config_and_version.py
#   file_relpath : tests/cli/test_config_and_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `config` and `version` commands, and the bare group."""

from __future__ import annotations

from typing import TYPE_CHECKING

import tomlkit

from implementor.cli.exit_codes import ExitCode
from implementor.constants import IMPLEMENTOR_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_version_outputs_version() -> None:
    result = run_cli(["version"])

    assert_SUCCESS(result)
    assert result.output.strip() == IMPLEMENTOR_VERSION


@mark_cli
def test_version_verbose_has_header() -> None:
    result = run_cli(["-v", "version"])

    assert_SUCCESS(result)
    lines = result.output.splitlines()
    assert lines[0] == "Implementor version:"
    assert lines[1].strip() == IMPLEMENTOR_VERSION


@mark_cli
def test_bare_group_prints_hint_and_help() -> None:
    result = run_cli([])

    assert_SUCCESS(result)
    assert result.output.startswith("Hint: use 'implementor source TYPE ROOT'")
    assert "Commands:" in result.output


@mark_cli
def test_config_defaults(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["config"])

    assert_SUCCESS(result)
    parsed = tomlkit.parse(result.output).unwrap()
    assert parsed["implementor"]["suffix"] == "Impl"
    assert parsed["implementor"]["verify"] is True


@mark_cli
def test_config_discovers_file_and_applies_paths(tmp_path: Path) -> None:
    (tmp_path / "implementor.toml").write_text('[implementor]\nsuffix = "Stub"\n')

    result = run_cli_in(tmp_path, ["--path", "lib", "config"], discover=True)

    assert_SUCCESS(result)
    first, _, rest = result.output.partition("\n")
    assert first.startswith("# loaded from ")
    assert first.endswith("implementor.toml")
    parsed = tomlkit.parse(rest).unwrap()
    assert parsed["implementor"]["suffix"] == "Stub"
    assert parsed["implementor"]["search_paths"] == [str((tmp_path / "lib").resolve())]


@mark_cli
def test_broken_config_file(tmp_path: Path) -> None:
    broken = tmp_path / "broken.toml"
    broken.write_text("suffix = \n")

    result = run_cli_in(tmp_path, ["--config", str(broken), "config"])

    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
    assert "Invalid TOML" in result.output
