# topmark:header:start
#
#   project      : Implementor
#   file         : config.py
#   file_relpath : src/implementor/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Implementor `config` command.

Prints the effective configuration (defaults, discovered config file,
``--config`` files and ``--path`` entries) as a TOML document.
"""

from __future__ import annotations

import click

from implementor.cli.cmd_common import build_config, get_console
from implementor.config.io import to_toml


@click.command(
    name="config",
    help="Show the effective configuration as TOML.",
)
@click.pass_context
def config_command(ctx: click.Context) -> None:
    """Show the effective configuration as TOML."""
    console = get_console(ctx)
    config = build_config(ctx)
    for path in config.config_files:
        console.print(f"# loaded from {path}")
    console.print(to_toml(config.to_toml_dict()), nl=False)
