"""Install-or-activate commands: explicit version, latest, stable."""

import click

from nodever.cli.core import require_version
from nodever.cli.ensure import Ensure
from nodever.core.context import NodeverContext
from nodever.core.semver import VersionId
from nodever.core.store import InstallResult


def install_and_activate(ctx: NodeverContext, version: VersionId, config_hint: str | None) -> None:
    """Install version unless present, activate it, and report what happened."""
    if not ctx.registry.is_installed(version):
        ctx.feedback.info(f"Installing {version}...")

    result = Ensure.integration_call(
        lambda: ctx.store.install(version, config_hint),
        f"Failed to install {version}",
    )

    if result is InstallResult.INSTALLED:
        ctx.feedback.success(f"✓ Installed and activated {version}")
    else:
        ctx.feedback.success(f"✓ Activated {version}")


@click.command("install", context_settings={"ignore_unknown_options": True})
@click.argument("version", required=False)
@click.argument("config_hint", metavar="[CFG]", required=False)
@click.pass_obj
def install_cmd(ctx: NodeverContext, version: str | None, config_hint: str | None) -> None:
    """Install VERSION if needed and make it active.

    A bare version works the same way:

        nodever 18.1.0
    """
    install_and_activate(ctx, require_version(version, "install"), config_hint)


@click.command("latest", context_settings={"ignore_unknown_options": True})
@click.argument("config_hint", metavar="[CFG]", required=False)
@click.pass_obj
def latest_cmd(ctx: NodeverContext, config_hint: str | None) -> None:
    """Install and activate the latest release."""
    version = Ensure.integration_call(ctx.catalog.latest, "Failed to fetch remote versions")
    install_and_activate(ctx, version, config_hint)


@click.command("stable", context_settings={"ignore_unknown_options": True})
@click.argument("config_hint", metavar="[CFG]", required=False)
@click.pass_obj
def stable_cmd(ctx: NodeverContext, config_hint: str | None) -> None:
    """Install and activate the latest stable (even minor) release."""
    version = Ensure.integration_call(ctx.catalog.latest_stable, "Failed to fetch remote versions")
    install_and_activate(ctx, version, config_hint)
