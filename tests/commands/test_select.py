"""Tests for the interactive selector run without a command."""

from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from nodever.cli.cli import cli
from nodever.cli.commands.select import run_selector
from nodever.core.context import NodeverContext
from nodever.core.selector import Key
from nodever.core.semver import VersionId
from nodever.core.terminal.fake import FakeTerminal
from tests.test_utils.registry import make_installed


def _ctx(tmp_path: Path, terminal: FakeTerminal) -> NodeverContext:
    ctx = NodeverContext.for_test(tmp_path / "prefix", terminal=terminal)
    for version in ["4.0.0", "5.0.0", "6.0.0"]:
        make_installed(ctx.registry, version)
    ctx.activation.activate(VersionId(5, 0, 0))
    return ctx


def test_selection_starts_on_active_and_commits_on_other_key(tmp_path: Path) -> None:
    terminal = FakeTerminal(keys=[Key.UP, Key.UP, Key.DOWN, Key.OTHER])
    ctx = _ctx(tmp_path, terminal)

    result = CliRunner().invoke(cli, [], obj=ctx)

    assert result.exit_code == 0, result.output
    assert ctx.activation.current_version() == VersionId(5, 0, 0)
    assert ctx.activation.previous_version() == VersionId(5, 0, 0)
    assert terminal.raw_mode_balanced
    assert terminal.raw_entries == 1


def test_each_keypress_redraws_the_full_list(tmp_path: Path) -> None:
    terminal = FakeTerminal(keys=[Key.DOWN, Key.OTHER])
    ctx = _ctx(tmp_path, terminal)

    CliRunner().invoke(cli, [], obj=ctx)

    frames = [[click.unstyle(line) for line in frame] for frame in terminal.frames]
    assert len(frames) == 3
    assert frames[0] == ["    4.0.0", "  ❯ 5.0.0  (active)", "    6.0.0"]
    assert frames[1] == ["    4.0.0", "    5.0.0  (active)", "  ❯ 6.0.0"]
    assert ctx.activation.current_version() == VersionId(6, 0, 0)


def test_hidden_select_command_behaves_the_same(tmp_path: Path) -> None:
    terminal = FakeTerminal(keys=[Key.UP, Key.OTHER])
    ctx = _ctx(tmp_path, terminal)

    result = CliRunner().invoke(cli, ["select"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert ctx.activation.current_version() == VersionId(4, 0, 0)


def test_empty_registry_fails_before_touching_terminal(tmp_path: Path) -> None:
    terminal = FakeTerminal()
    ctx = NodeverContext.for_test(tmp_path / "prefix", terminal=terminal)

    result = CliRunner().invoke(cli, [], obj=ctx)

    assert result.exit_code == 1
    assert "No versions installed" in result.output
    assert terminal.raw_entries == 0


def test_non_interactive_terminal_is_rejected(tmp_path: Path) -> None:
    terminal = FakeTerminal(interactive=False)
    ctx = _ctx(tmp_path, terminal)

    result = CliRunner().invoke(cli, [], obj=ctx)

    assert result.exit_code == 1
    assert "needs a terminal" in result.output
    assert terminal.frames == []


def test_interrupt_restores_terminal_without_activating(tmp_path: Path) -> None:
    terminal = FakeTerminal(keys=[Key.DOWN], interrupt=KeyboardInterrupt())
    ctx = _ctx(tmp_path, terminal)
    record_before = ctx.registry.previous_record.read_text(encoding="utf-8")

    with pytest.raises(KeyboardInterrupt):
        run_selector(ctx)

    assert terminal.raw_entries == 1
    assert terminal.raw_mode_balanced
    assert ctx.activation.current_version() == VersionId(5, 0, 0)
    assert ctx.registry.previous_record.read_text(encoding="utf-8") == record_before


def test_ctrl_c_from_cli_aborts_with_terminal_restored(tmp_path: Path) -> None:
    terminal = FakeTerminal(interrupt=KeyboardInterrupt())
    ctx = _ctx(tmp_path, terminal)

    result = CliRunner().invoke(cli, [], obj=ctx)

    assert result.exit_code == 1
    assert "Aborted!" in result.output
    assert terminal.raw_mode_balanced
    assert ctx.activation.current_version() == VersionId(5, 0, 0)
