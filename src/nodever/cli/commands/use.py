"""Run or locate an installed version without activating it."""

import click

from nodever.cli.alias import alias
from nodever.cli.core import require_version
from nodever.cli.ensure import Ensure
from nodever.cli.output import machine_output
from nodever.core.context import NodeverContext


@alias("as")
@click.command("use", context_settings={"ignore_unknown_options": True})
@click.argument("version", required=False)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def use_cmd(ctx: NodeverContext, version: str | None, args: tuple[str, ...]) -> None:
    """Run VERSION's binary with ARGS; the active version is unchanged.

    Exits with the binary's exit code.

    Examples:
        nodever use 16.20.0 --version
        nodever as 18.1.0 server.js
    """
    binary = ctx.store.binary_path(require_version(version, "use"))
    exit_code = Ensure.integration_call(
        lambda: ctx.runtime.execute(binary, args),
        f"Failed to run {binary}",
    )
    if exit_code != 0:
        raise SystemExit(exit_code)


@alias("which")
@click.command("bin")
@click.argument("version", required=False)
@click.pass_obj
def bin_cmd(ctx: NodeverContext, version: str | None) -> None:
    """Print the path of VERSION's binary."""
    machine_output(str(ctx.store.binary_path(require_version(version, "bin"))))
