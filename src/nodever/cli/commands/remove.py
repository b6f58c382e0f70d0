"""Remove installed versions."""

import click

from nodever.cli.alias import alias
from nodever.cli.core import require_versions
from nodever.core.context import NodeverContext


@alias("-")
@click.command("rm")
@click.argument("versions", nargs=-1)
@click.pass_obj
def rm_cmd(ctx: NodeverContext, versions: tuple[str, ...]) -> None:
    """Remove one or more installed versions.

    Versions that are not installed are skipped.
    """
    removed = ctx.store.remove(require_versions(versions, "rm"))
    for version in removed:
        ctx.feedback.success(f"✓ Removed {version}")


@click.command("prune")
@click.pass_obj
def prune_cmd(ctx: NodeverContext) -> None:
    """Remove every installed version except the active one.

    Does nothing when no version is active.
    """
    active = ctx.activation.current_version()
    if active is None:
        ctx.feedback.warning(
            "No active version, nothing pruned - use 'nodever rm <version...>' instead"
        )
        return
    removed = ctx.store.prune(keep=active)
    if not removed:
        ctx.feedback.info("Nothing to prune")
        return
    for version in removed:
        ctx.feedback.success(f"✓ Removed {version}")
