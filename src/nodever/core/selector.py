"""Interactive version selector as a pure state machine.

The selector has two states: displaying a highlighted version, and committed
(terminal). Arrow keys move the highlight within the installed list, clamping
at both ends; any other key commits the highlighted version. Reading keys and
drawing frames are left to the caller so the machine can be tested without a
terminal.
"""

from dataclasses import dataclass, replace
from enum import Enum

import click

from nodever.core.semver import VersionId


class Key(Enum):
    """Keypress classes the selector understands."""

    UP = "up"
    DOWN = "down"
    OTHER = "other"


@dataclass(frozen=True)
class SelectorState:
    """Displaying(versions[index]) while committed is False, Committed afterwards."""

    versions: tuple[VersionId, ...]
    index: int
    committed: bool = False

    @property
    def selected(self) -> VersionId:
        return self.versions[self.index]


def initial_state(installed: list[VersionId], active: VersionId | None) -> SelectorState:
    """Start on the active version when it is installed, else on the first entry.

    Raises:
        ValueError: If installed is empty
    """
    if not installed:
        raise ValueError("Selector needs at least one installed version")
    versions = tuple(installed)
    index = versions.index(active) if active in versions else 0
    return SelectorState(versions=versions, index=index)


def step(state: SelectorState, key: Key) -> SelectorState:
    """Apply one keypress. Committed states are terminal and never change."""
    if state.committed:
        return state
    if key is Key.UP:
        return replace(state, index=max(state.index - 1, 0))
    if key is Key.DOWN:
        return replace(state, index=min(state.index + 1, len(state.versions) - 1))
    return replace(state, committed=True)


def render_lines(state: SelectorState, active: VersionId | None) -> list[str]:
    """Full frame for the current state: every installed version, one per line."""
    lines: list[str] = []
    for i, version in enumerate(state.versions):
        marker = "❯" if i == state.index else " "
        text = f"  {marker} {version}"
        if i == state.index:
            text = click.style(text, fg="cyan", bold=True)
        if version == active:
            text += click.style("  (active)", dim=True)
        lines.append(text)
    return lines
