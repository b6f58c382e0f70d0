"""Interactive selection among installed versions.

Runs when nodever is invoked without a command. Up/Down (or k/j) move the
highlight; any other key activates the highlighted version.
"""

import click

from nodever.cli.ensure import Ensure
from nodever.core.context import NodeverContext
from nodever.core.selector import SelectorState, initial_state, render_lines, step


def run_selector(ctx: NodeverContext) -> SelectorState:
    """Drive the selector until a key commits, then activate the selection."""
    installed = ctx.store.list_installed()
    Ensure.not_empty(
        installed,
        "No versions installed - Install one with 'nodever <version>' or 'nodever latest'",
    )
    Ensure.invariant(
        ctx.terminal.is_interactive(),
        "Interactive selection needs a terminal - Use 'nodever <version>' instead",
    )

    active = ctx.activation.current_version()
    state = initial_state(installed, active)

    with ctx.terminal.raw_mode():
        ctx.terminal.draw(render_lines(state, active))
        while not state.committed:
            state = step(state, ctx.terminal.read_key())
            ctx.terminal.draw(render_lines(state, active))

    ctx.activation.activate(state.selected)
    ctx.feedback.success(f"✓ Activated {state.selected}")
    return state


@click.command("select", hidden=True)
@click.pass_obj
def select_cmd(ctx: NodeverContext) -> None:
    """Pick an installed version interactively."""
    run_selector(ctx)
