"""Top-level Click group: grouped help, bare-version routing, error reporting."""

import logging

import click

from nodever.cli.alias import get_aliases
from nodever.cli.output import user_output
from nodever.core.errors import NodeverError
from nodever.core.semver import VersionId

logger = logging.getLogger(__name__)

INSTALL_COMMAND = "install"


class NodeverGroup(click.Group):
    """Click Group for the nodever entry point.

    - `nodever 18.1.0 [cfg]` is routed to the install command, so a bare
      version works like a subcommand.
    - NodeverError raised anywhere below is reported once, as a red
      "Error:" line, with exit status 1.
    - Help output groups commands into sections and lists aliases next to
      the command they belong to.
    """

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        cmd_name = args[0] if args else None
        if (
            cmd_name is not None
            and self.get_command(ctx, cmd_name) is None
            and VersionId.try_parse(cmd_name) is not None
        ):
            install = self.get_command(ctx, INSTALL_COMMAND)
            if install is not None:
                logger.debug("Routing bare version %s to %s", cmd_name, INSTALL_COMMAND)
                return INSTALL_COMMAND, install, args
        return super().resolve_command(ctx, args)

    def invoke(self, ctx: click.Context) -> object:
        try:
            return super().invoke(ctx)
        except NodeverError as e:
            logger.debug("Command failed", exc_info=True)
            user_output(click.style("Error: ", fg="red") + e.format())
            raise SystemExit(1) from None

    def format_commands(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """Format commands into organized sections."""
        commands: list[tuple[str, click.Command]] = []
        for subcommand in self.list_commands(ctx):
            cmd = self.get_command(ctx, subcommand)
            if cmd is None or cmd.hidden:
                continue
            # Aliases are shown next to their primary command, not on their own
            if subcommand in get_aliases(cmd):
                continue
            commands.append((subcommand, cmd))

        if not commands:
            return

        install_cmds = ["install", "latest", "stable"]
        switch_cmds = ["prev", "use"]
        inspect_cmds = ["ls", "current", "bin"]

        sections: dict[str, list[tuple[str, click.Command]]] = {
            "Install": [],
            "Switch": [],
            "Inspect": [],
            "Maintenance": [],
        }
        for name, cmd in commands:
            if name in install_cmds:
                sections["Install"].append((name, cmd))
            elif name in switch_cmds:
                sections["Switch"].append((name, cmd))
            elif name in inspect_cmds:
                sections["Inspect"].append((name, cmd))
            else:
                sections["Maintenance"].append((name, cmd))

        for title, section_cmds in sections.items():
            if section_cmds:
                with formatter.section(title):
                    self._format_command_list(formatter, section_cmds)

    def _format_command_list(
        self,
        formatter: click.HelpFormatter,
        commands: list[tuple[str, click.Command]],
    ) -> None:
        rows = []
        for name, cmd in commands:
            aliases = get_aliases(cmd)
            label = f"{name} ({', '.join(aliases)})" if aliases else name
            rows.append((label, cmd.get_short_help_str(limit=formatter.width)))
        formatter.write_dl(rows)
