"""List remote versions annotated with local status."""

import click
from rich.console import Console
from rich.table import Table

from nodever.cli.alias import alias
from nodever.cli.ensure import Ensure
from nodever.cli.json_output import ListRemoteResponse, RemoteVersionEntry, emit_json
from nodever.core.catalog import Status
from nodever.core.context import NodeverContext
from nodever.core.semver import VersionId

_STATUS_STYLES = {
    Status.ACTIVE: "bold green",
    Status.INSTALLED: "cyan",
    Status.AVAILABLE: "dim",
}


def _local_versions(ctx: NodeverContext, config_hint: str | None) -> list[VersionId]:
    """Installed versions, narrowed to those installed with config_hint if given."""
    installed = ctx.store.list_installed()
    if config_hint is None:
        return installed
    return [v for v in installed if ctx.store.config_hint(v) == config_hint]


@alias("list")
@click.command("ls", context_settings={"ignore_unknown_options": True})
@click.argument("config_hint", metavar="[CFG]", required=False)
@click.option("--json", "output_json", is_flag=True, help="Output JSON format")
@click.pass_obj
def ls_cmd(ctx: NodeverContext, config_hint: str | None, output_json: bool) -> None:
    """List published versions, marking active and installed ones.

    With CFG, a version only counts as installed if it was installed with
    that configuration hint.

    Examples:
        nodever ls
        nodever ls --json
    """
    active = ctx.activation.current_version()
    entries = Ensure.integration_call(
        lambda: ctx.catalog.list_with_status(_local_versions(ctx, config_hint), active),
        "Failed to fetch remote versions",
    )

    if output_json:
        response = ListRemoteResponse(
            mirror=ctx.config.mirror,
            active=str(active) if active is not None else None,
            versions=[
                RemoteVersionEntry(version=str(version), status=status.value)
                for version, status in entries
            ],
        )
        emit_json(response.model_dump(mode="json"))
        return

    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("version", no_wrap=True)
    table.add_column("status", no_wrap=True)
    for version, status in entries:
        style = _STATUS_STYLES[status]
        label = "" if status is Status.AVAILABLE else status.value
        table.add_row(f"[{style}]{version}[/{style}]", f"[{style}]{label}[/{style}]")

    # Table goes to stderr, consistent with the user_output convention
    console = Console(stderr=True)
    console.print(table)
