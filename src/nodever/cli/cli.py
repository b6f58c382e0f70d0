import logging
import os

import click

from nodever.cli.alias import register_with_aliases
from nodever.cli.commands.config import config_group
from nodever.cli.commands.current import current_cmd
from nodever.cli.commands.install import install_cmd, latest_cmd, stable_cmd
from nodever.cli.commands.ls import ls_cmd
from nodever.cli.commands.prev import prev_cmd
from nodever.cli.commands.remove import prune_cmd, rm_cmd
from nodever.cli.commands.select import run_selector, select_cmd
from nodever.cli.commands.use import bin_cmd, use_cmd
from nodever.cli.ensure import Ensure
from nodever.cli.help_formatter import NodeverGroup
from nodever.cli.output import machine_output
from nodever.core.context import create_context
from nodever.version import __version__

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_FORMAT = "[DEBUG %(name)s:%(lineno)d] %(message)s"


def configure_debug_logging() -> None:
    logging.basicConfig(level=logging.DEBUG, format=DEBUG_FORMAT)


@click.group(
    cls=NodeverGroup,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(__version__, "-V", "--version", prog_name="nodever")
@click.option("--latest", "print_latest", is_flag=True, help="Print the latest version and exit.")
@click.option(
    "--stable", "print_stable", is_flag=True, help="Print the latest stable version and exit."
)
@click.option("--debug", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def cli(ctx: click.Context, print_latest: bool, print_stable: bool, debug: bool) -> None:
    """Install and switch between Node.js versions.

    Run without a command to pick an installed version interactively.
    """
    if debug or os.getenv("NODEVER_DEBUG"):
        configure_debug_logging()

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = Ensure.succeeds(
            create_context, "Invalid configuration", exception_type=ValueError
        )

    if print_latest or print_stable:
        catalog = ctx.obj.catalog
        query = catalog.latest if print_latest else catalog.latest_stable
        machine_output(str(Ensure.integration_call(query, "Failed to fetch remote versions")))
        return

    if ctx.invoked_subcommand is None:
        run_selector(ctx.obj)


# Register all commands
# Commands with @alias decorators use register_with_aliases() to auto-register aliases
cli.add_command(install_cmd)
cli.add_command(latest_cmd)
cli.add_command(stable_cmd)
register_with_aliases(cli, use_cmd)  # Has @alias("as")
register_with_aliases(cli, bin_cmd)  # Has @alias("which")
register_with_aliases(cli, rm_cmd)  # Has @alias("-")
register_with_aliases(cli, ls_cmd)  # Has @alias("list")
cli.add_command(prev_cmd)
cli.add_command(current_cmd)
cli.add_command(prune_cmd)
cli.add_command(config_group)
cli.add_command(select_cmd)


def main() -> None:
    """CLI entry point used by the `nodever` console script."""
    cli()
