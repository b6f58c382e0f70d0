"""Inspect and persist configuration."""

import click

from nodever.cli.ensure import Ensure
from nodever.cli.output import machine_output, user_output
from nodever.core.config_store import CONFIG_KEYS, parse_config_value
from nodever.core.context import NodeverContext


@click.group("config")
def config_group() -> None:
    """Show or change nodever settings."""


@config_group.command("show")
@click.pass_obj
def config_show(ctx: NodeverContext) -> None:
    """Print the effective configuration (file and environment combined)."""
    config = ctx.config
    values = {
        "prefix": str(config.prefix),
        "mirror": config.mirror,
        "downloader": config.downloader,
        "http_timeout": "" if config.http_timeout is None else str(config.http_timeout),
    }
    for key in CONFIG_KEYS:
        machine_output(f"{key} = {values[key]}")
    source = ctx.config_store.path() if ctx.config_store.exists() else "defaults"
    user_output(click.style(f"# source: {source}", dim=True))


@config_group.command("set")
@click.argument("key", type=click.Choice(CONFIG_KEYS))
@click.argument("value")
@click.pass_obj
def config_set(ctx: NodeverContext, key: str, value: str) -> None:
    """Persist KEY = VALUE in the config file."""
    parsed = Ensure.succeeds(
        lambda: parse_config_value(key, value),
        f"Invalid value for {key}",
        exception_type=ValueError,
    )
    ctx.config_store.set_value(key, parsed)
    ctx.feedback.success(f"✓ Set {key} = {parsed} in {ctx.config_store.path()}")
