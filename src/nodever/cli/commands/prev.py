"""Revert to the previously active version."""

import click

from nodever.core.context import NodeverContext


@click.command("prev")
@click.pass_obj
def prev_cmd(ctx: NodeverContext) -> None:
    """Activate the version that was active before the last switch."""
    version = ctx.activation.revert_to_previous()
    ctx.feedback.success(f"✓ Activated {version}")
