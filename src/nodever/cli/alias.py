"""Command aliases.

Commands declare their short names with @alias; register_with_aliases adds
the command to a group once under its own name and once per alias. The help
formatter folds aliases back into the primary entry.
"""

from collections.abc import Callable

import click

_ALIASES_ATTR = "_nodever_aliases"


def alias(*names: str) -> Callable[[click.Command], click.Command]:
    """Attach alternative names to a click command.

    Example:
        >>> @alias("-")
        ... @click.command("rm")
        ... def rm_cmd(...): ...
    """

    def decorator(cmd: click.Command) -> click.Command:
        setattr(cmd, _ALIASES_ATTR, tuple(names))
        return cmd

    return decorator


def get_aliases(cmd: click.Command) -> tuple[str, ...]:
    return getattr(cmd, _ALIASES_ATTR, ())


def register_with_aliases(group: click.Group, cmd: click.Command, name: str | None = None) -> None:
    """Add cmd to group under its name and every alias."""
    group.add_command(cmd, name=name)
    for alias_name in get_aliases(cmd):
        group.add_command(cmd, name=alias_name)
