# topmark:header:start
#
#   project      : Implementor
#   file         : archive.py
#   file_relpath : src/implementor/cli/commands/archive.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Implementor `archive` command.

Generates the stub implementation of an interface, compiles it with a Python
interpreter, and packages the compiled unit into ARCHIVE (a zip file with a
``META-INF/MANIFEST.MF`` manifest and a single ``.pyc`` entry).
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from implementor.api.runtime import run_pipeline
from implementor.api.types import GenerationResult
from implementor.cli.cmd_common import (
    build_config,
    get_console,
    get_effective_verbosity,
    lookup_type,
    report_result,
)
from implementor.cli.options import suffix_option
from implementor.config.logging import get_logger
from implementor.pipeline.pipelines import Pipeline

logger = get_logger(__name__)


@click.command(
    name="archive",
    help="Generate, compile and package the stub implementation of TYPE into ARCHIVE.",
)
@click.argument("type_reference", metavar="TYPE")
@click.argument("archive", type=click.Path(dir_okay=False, path_type=Path))
@suffix_option
@click.option(
    "--python",
    "python",
    default=None,
    help="Interpreter used to compile the generated source (default: the running one).",
)
@click.option(
    "--verify/--no-verify",
    "verify",
    default=None,
    help="Import-check the compiled class against TYPE (default: verify).",
)
@click.pass_context
def archive_command(
    ctx: click.Context,
    type_reference: str,
    archive: Path,
    suffix: str | None,
    python: str | None,
    verify: bool | None,
) -> None:
    """Generate, compile and package the stub implementation of TYPE."""
    config = build_config(ctx, suffix=suffix, python=python, verify=verify)
    subject = lookup_type(type_reference, config)
    result = GenerationResult.from_context(
        run_pipeline(Pipeline.ARCHIVE, subject, config=config, archive=archive)
    )
    report_result(ctx, result)

    if result.archive_path is not None and get_effective_verbosity(ctx) < logging.ERROR:
        console = get_console(ctx)
        console.print(console.styled(f"Wrote {result.archive_path}", fg="green"))
