"""Current command implementation - prints the active version."""

import click

from nodever.cli.ensure import Ensure
from nodever.cli.output import machine_output
from nodever.core.context import NodeverContext


@click.command("current")
@click.pass_obj
def current_cmd(ctx: NodeverContext) -> None:
    """Print the active version."""
    version = Ensure.not_none(
        ctx.activation.current_version(),
        f"No active version found at {ctx.registry.deployed_binary}",
    )
    machine_output(str(version))
