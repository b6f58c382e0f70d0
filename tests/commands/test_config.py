"""Tests for config show and config set."""

from pathlib import Path

from click.testing import CliRunner

from nodever.cli.cli import cli
from nodever.core.config_store import FilesystemConfigStore, InMemoryConfigStore
from nodever.core.context import NodeverContext


def test_show_prints_effective_values(tmp_path: Path) -> None:
    ctx = NodeverContext.for_test(tmp_path / "prefix")

    result = CliRunner().invoke(cli, ["config", "show"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == [
        f"prefix = {tmp_path / 'prefix'}",
        "mirror = https://nodejs.org/dist",
        "downloader = auto",
        "http_timeout = ",
    ]
    assert "# source: /fake/nodever/config.toml" in result.output


def test_show_names_defaults_when_no_file(tmp_path: Path) -> None:
    ctx = NodeverContext.for_test(tmp_path / "prefix", config_store=InMemoryConfigStore())

    result = CliRunner().invoke(cli, ["config", "show"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "# source: defaults" in result.output


def test_set_writes_config_file(tmp_path: Path) -> None:
    store = FilesystemConfigStore(tmp_path / "config.toml")
    ctx = NodeverContext.for_test(tmp_path / "prefix", config_store=store)

    result = CliRunner().invoke(
        cli, ["config", "set", "mirror", "https://mirror.example/dist/"], obj=ctx
    )

    assert result.exit_code == 0, result.output
    assert store.load().mirror == "https://mirror.example/dist"


def test_set_rejects_invalid_value(tmp_path: Path) -> None:
    store = FilesystemConfigStore(tmp_path / "config.toml")
    ctx = NodeverContext.for_test(tmp_path / "prefix", config_store=store)

    result = CliRunner().invoke(cli, ["config", "set", "http_timeout", "0"], obj=ctx)

    assert result.exit_code == 1
    assert not store.exists()


def test_set_rejects_unknown_key(tmp_path: Path) -> None:
    ctx = NodeverContext.for_test(tmp_path / "prefix")

    result = CliRunner().invoke(cli, ["config", "set", "colour", "blue"], obj=ctx)

    assert result.exit_code == 2
    assert "colour" in result.output
