"""Tests for prev and current."""

from pathlib import Path

from click.testing import CliRunner

from nodever.cli.cli import cli
from nodever.core.context import NodeverContext
from nodever.core.semver import VersionId
from tests.test_utils.registry import make_installed


def _two_activations(tmp_path: Path) -> NodeverContext:
    ctx = NodeverContext.for_test(tmp_path / "prefix")
    make_installed(ctx.registry, "16.20.0")
    make_installed(ctx.registry, "18.1.0")
    ctx.activation.activate(VersionId(16, 20, 0))
    ctx.activation.activate(VersionId(18, 1, 0))
    return ctx


def test_prev_reverts_to_prior_version(tmp_path: Path) -> None:
    ctx = _two_activations(tmp_path)

    result = CliRunner().invoke(cli, ["prev"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert ctx.activation.current_version() == VersionId(16, 20, 0)


def test_prev_twice_toggles(tmp_path: Path) -> None:
    ctx = _two_activations(tmp_path)
    runner = CliRunner()

    runner.invoke(cli, ["prev"], obj=ctx)
    result = runner.invoke(cli, ["prev"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert ctx.activation.current_version() == VersionId(18, 1, 0)


def test_prev_without_history_fails(tmp_path: Path) -> None:
    ctx = NodeverContext.for_test(tmp_path / "prefix")

    result = CliRunner().invoke(cli, ["prev"], obj=ctx)

    assert result.exit_code == 1
    assert "Error: No previous version recorded" in result.output


def test_current_prints_active_version(tmp_path: Path) -> None:
    ctx = _two_activations(tmp_path)

    result = CliRunner().invoke(cli, ["current"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert result.stdout == "18.1.0\n"


def test_current_without_active_version_fails(tmp_path: Path) -> None:
    ctx = NodeverContext.for_test(tmp_path / "prefix")

    result = CliRunner().invoke(cli, ["current"], obj=ctx)

    assert result.exit_code == 1
    assert "No active version found" in result.output
