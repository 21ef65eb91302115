# topmark:header:start
#
#   project      : Implementor
#   file         : source.py
#   file_relpath : src/implementor/cli/commands/source.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Implementor `source` command.

Generates the stub implementation source of an interface under an output root
(``ROOT/<package path>/<Name><Suffix>.py``), or prints it with ``--stdout``.
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
from implementor.cli.errors import ImplementorUsageError
from implementor.cli.options import suffix_option
from implementor.config.logging import get_logger
from implementor.pipeline.pipelines import Pipeline

logger = get_logger(__name__)


@click.command(
    name="source",
    help=(
        "Generate the stub implementation source of TYPE under ROOT. "
        "TYPE is 'pkg.module:Name' or 'pkg.module.Name'."
    ),
)
@click.argument("type_reference", metavar="TYPE")
@click.argument(
    "root",
    required=False,
    type=click.Path(file_okay=False, path_type=Path),
)
@suffix_option
@click.option(
    "--stdout",
    "to_stdout",
    is_flag=True,
    help="Print the generated source instead of writing it (ROOT must be omitted).",
)
@click.pass_context
def source_command(
    ctx: click.Context,
    type_reference: str,
    root: Path | None,
    suffix: str | None,
    to_stdout: bool,
) -> None:
    """Generate the stub implementation source of TYPE."""
    if to_stdout and root is not None:
        raise ImplementorUsageError("ROOT cannot be combined with --stdout.")
    if not to_stdout and root is None:
        raise ImplementorUsageError("Missing argument 'ROOT' (or pass --stdout).")

    config = build_config(ctx, suffix=suffix)
    subject = lookup_type(type_reference, config)
    pipeline = Pipeline.PREVIEW if to_stdout else Pipeline.SOURCE
    result = GenerationResult.from_context(
        run_pipeline(pipeline, subject, config=config, root=root)
    )
    report_result(ctx, result, show_info=not to_stdout)

    if result.source_path is not None and get_effective_verbosity(ctx) < logging.ERROR:
        console = get_console(ctx)
        console.print(console.styled(f"Wrote {result.source_path}", fg="green"))
