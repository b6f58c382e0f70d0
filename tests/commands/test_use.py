"""Tests for use/as and bin/which."""

from pathlib import Path

from click.testing import CliRunner

from nodever.cli.cli import cli
from nodever.core.context import NodeverContext
from nodever.core.runtime.fake import FakeRuntime
from nodever.core.runtime.real import RealRuntime
from tests.test_utils.registry import make_installed


def test_use_runs_binary_with_arguments(tmp_path: Path) -> None:
    runtime = FakeRuntime()
    ctx = NodeverContext.for_test(tmp_path / "prefix", runtime=runtime)
    version_dir = make_installed(ctx.registry, "16.20.0")

    result = CliRunner().invoke(cli, ["use", "16.20.0", "server.js", "--port", "80"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert runtime.execute_calls == [
        (version_dir / "bin" / "node", ["server.js", "--port", "80"]),
    ]


def test_use_does_not_change_active_version(tmp_path: Path) -> None:
    ctx = NodeverContext.for_test(tmp_path / "prefix")
    make_installed(ctx.registry, "16.20.0")

    result = CliRunner().invoke(cli, ["as", "16.20.0", "--version"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert ctx.activation.current_version() is None


def test_use_propagates_exit_code(tmp_path: Path) -> None:
    ctx = NodeverContext.for_test(tmp_path / "prefix", runtime=FakeRuntime(exit_code=3))
    make_installed(ctx.registry, "16.20.0")

    result = CliRunner().invoke(cli, ["use", "16.20.0", "-e", "process.exit(3)"], obj=ctx)

    assert result.exit_code == 3


def test_use_missing_version_fails(tmp_path: Path) -> None:
    ctx = NodeverContext.for_test(tmp_path / "prefix")

    result = CliRunner().invoke(cli, ["use", "16.20.0"], obj=ctx)

    assert result.exit_code == 1
    assert "Error: Version 16.20.0 is not installed" in result.output


def test_use_without_version_is_missing_argument(tmp_path: Path) -> None:
    ctx = NodeverContext.for_test(tmp_path / "prefix")

    result = CliRunner().invoke(cli, ["use"], obj=ctx)

    assert result.exit_code == 1
    assert "'use' requires a version" in result.output


def test_bin_prints_path_on_stdout(tmp_path: Path) -> None:
    ctx = NodeverContext.for_test(tmp_path / "prefix")
    version_dir = make_installed(ctx.registry, "18.1.0")

    result = CliRunner().invoke(cli, ["which", "18.1.0"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert result.stdout == f"{version_dir / 'bin' / 'node'}\n"


def test_bin_for_missing_version_fails(tmp_path: Path) -> None:
    ctx = NodeverContext.for_test(tmp_path / "prefix")

    result = CliRunner().invoke(cli, ["bin", "18.1.0"], obj=ctx)

    assert result.exit_code == 1
    assert result.stdout == ""


def test_use_with_unrunnable_binary_reports_error(tmp_path: Path) -> None:
    ctx = NodeverContext.for_test(tmp_path / "prefix", runtime=RealRuntime())
    make_installed(ctx.registry, "16.20.0")

    result = CliRunner().invoke(cli, ["use", "16.20.0", "--version"], obj=ctx)

    assert result.exit_code == 1
    assert "Error: Failed to run" in result.output
