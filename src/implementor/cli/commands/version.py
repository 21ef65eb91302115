# topmark:header:start
#
#   project      : Implementor
#   file         : version.py
#   file_relpath : src/implementor/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Implementor `version` command.

Prints the current Implementor version as installed in the active Python environment.
"""

from __future__ import annotations

import logging

import click

from implementor.cli.cmd_common import get_console, get_effective_verbosity
from implementor.constants import IMPLEMENTOR_VERSION


@click.command(
    name="version",
    help="Show the current version of Implementor.",
)
@click.pass_context
def version_command(ctx: click.Context) -> None:
    """Show the current version of Implementor."""
    console = get_console(ctx)
    if get_effective_verbosity(ctx) <= logging.INFO:
        console.print(console.styled("Implementor version:", bold=True, underline=True))
        console.print(f"    {console.styled(IMPLEMENTOR_VERSION, bold=True)}")
    else:
        console.print(console.styled(IMPLEMENTOR_VERSION, bold=True))
