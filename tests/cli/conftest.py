# topmark:header:start
#
#   project      : Implementor
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running Implementor in a controlled working directory.

`run_cli_in()` changes the process working directory to the given ``tmp_path``
before invoking the Click CLI, so that a relative ``ROOT``/``ARCHIVE`` argument
and config-file discovery are resolved against the temporary test directory.

Both helpers pass ``--no-config`` unless ``discover=True``, so a developer's own
``implementor.toml`` never leaks into test runs.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from implementor.cli.exit_codes import ExitCode
from implementor.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def _argv(argv: Sequence[str], *, discover: bool) -> list[str]:
    return ["--no-color", *([] if discover else ["--no-config"]), *argv]


def run_cli_in(tmp_path: Path, argv: Sequence[str], *, discover: bool = False) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the command invocation.
        argv (Sequence[str]): CLI argument vector, e.g. ``["source", "pkg:Api", "out"]``.
        discover (bool): Allow config-file discovery in ``tmp_path``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, _argv(argv, discover=discover))
    finally:
        os.chdir(cwd)


def run_cli(argv: Sequence[str], *, discover: bool = False) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does not depend on relative paths (e.g.
    ``version`` or ``source --stdout``).

    Args:
        argv (Sequence[str]): CLI argument vector.
        discover (bool): Allow config-file discovery in the current directory.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    return CliRunner().invoke(cli, _argv(argv, discover=discover))


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_GENERATION_ERROR(result: Result) -> None:
    """Assert that the command exited with GENERATION_ERROR (code 65)."""
    assert result.exit_code == ExitCode.GENERATION_ERROR, result.output


def assert_TYPE_NOT_FOUND(result: Result) -> None:
    """Assert that the command exited with TYPE_NOT_FOUND (code 66)."""
    assert result.exit_code == ExitCode.TYPE_NOT_FOUND, result.output
