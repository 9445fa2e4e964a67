"""Root CLI command group and global option handling.

Handles ``--traceback``, ``--profile`` and ``--set`` before any subcommand
runs, loading configuration and logging exactly once per invocation.

Contents:
    * :func:`cli` - Root command group with global options.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click

from lzcount import __init__conf__

from .constants import CLICK_CONTEXT_SETTINGS
from .context import CLIContext, apply_traceback_preferences, load_profile_config

if TYPE_CHECKING:
    from lzcount.composition import AppServices


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'production', 'test')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable), e.g. lzcount.default_width=u64",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Load configuration and logging, then hand off to the subcommand.

    ``ctx.obj`` arrives as the services factory and leaves as a
    :class:`~lzcount.adapters.cli.context.CLIContext`.

    Example:
        >>> from click.testing import CliRunner
        >>> from lzcount.composition import build_production
        >>> result = CliRunner().invoke(cli, ["widths"], obj=build_production)  # doctest: +SKIP
        >>> result.exit_code  # doctest: +SKIP
        0
    """
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = load_profile_config(services, profile, set_overrides)
    services.init_logging(config)
    ctx.obj = CLIContext(
        config=config,
        services=services,
        traceback=traceback,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Commands import from package ancestors, so registration is deferred until ``cli`` exists.
def _register_commands() -> None:
    from .commands import cli_config, cli_count, cli_info, cli_widths

    for cmd in (cli_info, cli_count, cli_widths, cli_config):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]
