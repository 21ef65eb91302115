# topmark:header:start
#
#   project      : Implementor
#   file         : main.py
#   file_relpath : src/implementor/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``implementor`` command group.

The group resolves verbosity, color and the configuration draft once and stores
them in ``ctx.obj``; subcommands read them back through
`implementor.cli.cmd_common`.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from implementor.cli.commands.archive import archive_command
from implementor.cli.commands.config import config_command
from implementor.cli.commands.source import source_command
from implementor.cli.commands.version import version_command
from implementor.cli.console import ClickConsole
from implementor.cli.errors import ImplementorConfigError
from implementor.cli.options import (
    ColorMode,
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from implementor.config import ConfigLoadError, MutableConfig
from implementor.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from implementor.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Store verbosity, color and the console in ``ctx.obj``.

    Internal logging is set up here too, from ``IMPLEMENTOR_LOG_LEVEL`` only;
    ``-v``/``-q`` govern program output, not the logger.

    Args:
        ctx (click.Context): The group context.
        verbose (int): Number of ``-v`` flags.
        quiet (int): Number of ``-q`` flags.
        color_mode (ColorMode | None): Value of ``--color``.
        no_color (bool): ``--no-color`` was given.
    """
    ctx.obj = ctx.obj or {}
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    setup_logging(level=resolve_env_log_level())

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


def init_config_state(
    ctx: click.Context,
    *,
    config_files: tuple[str, ...],
    no_config: bool,
    search_paths: tuple[str, ...],
) -> None:
    """Load the configuration draft into ``ctx.obj["config"]``.

    Raises:
        ImplementorConfigError: If a config file cannot be loaded.
    """
    try:
        draft = MutableConfig.load_merged(
            start=Path.cwd(),
            extra_config_files=[Path(p) for p in config_files],
            no_config=no_config,
        )
    except ConfigLoadError as exc:
        raise ImplementorConfigError(str(exc)) from exc
    for raw in search_paths:
        path = Path(raw).resolve()
        if path not in draft.search_paths:
            draft.search_paths.append(path)
    ctx.obj["config"] = draft


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Generate stub implementations of Python interfaces (Protocols and ABCs).",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_files: tuple[str, ...],
    no_config: bool,
    search_paths: tuple[str, ...],
) -> None:
    """Entry point for the Implementor CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    init_config_state(
        ctx,
        config_files=config_files,
        no_config=no_config,
        search_paths=search_paths,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'implementor source TYPE ROOT' to generate an implementation.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(config_command)

cli.add_command(source_command)

cli.add_command(archive_command)

if __name__ == "__main__":
    cli()
