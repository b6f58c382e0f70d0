"""Tests for ls/list."""

import json
from pathlib import Path

from click.testing import CliRunner

from nodever.cli.cli import cli
from nodever.core.context import NodeverContext
from nodever.core.semver import VersionId
from nodever.core.transport.fake import FakeTransport
from tests.test_utils.registry import INDEX_URL, index_page, make_installed


def _ctx(tmp_path: Path) -> NodeverContext:
    transport = FakeTransport(
        pages={INDEX_URL: index_page("0.6.21", "9.10.0", "9.9.9", "10.0.0", "16.0.0")}
    )
    ctx = NodeverContext.for_test(tmp_path / "prefix", transport=transport)
    make_installed(ctx.registry, "9.9.9", config_hint="--debug")
    make_installed(ctx.registry, "10.0.0")
    ctx.activation.activate(VersionId(10, 0, 0))
    return ctx


def test_ls_json_marks_active_and_installed(tmp_path: Path) -> None:
    ctx = _ctx(tmp_path)

    result = CliRunner().invoke(cli, ["ls", "--json"], obj=ctx)

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["active"] == "10.0.0"
    assert data["versions"] == [
        {"version": "9.9.9", "status": "installed"},
        {"version": "9.10.0", "status": "available"},
        {"version": "10.0.0", "status": "active"},
        {"version": "16.0.0", "status": "available"},
    ]


def test_ls_with_config_hint_filters_installed(tmp_path: Path) -> None:
    ctx = _ctx(tmp_path)
    make_installed(ctx.registry, "16.0.0")

    result = CliRunner().invoke(cli, ["list", "--debug", "--json"], obj=ctx)

    assert result.exit_code == 0, result.output
    versions = json.loads(result.stdout)["versions"]
    statuses = {entry["version"]: entry["status"] for entry in versions}
    assert statuses["9.9.9"] == "installed"
    assert statuses["16.0.0"] == "available"
    # active wins even when installed without the hint
    assert statuses["10.0.0"] == "active"


def test_ls_table_lists_every_non_legacy_version(tmp_path: Path) -> None:
    ctx = _ctx(tmp_path)

    result = CliRunner().invoke(cli, ["ls"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "9.10.0" in result.output
    assert "active" in result.output
    assert "0.6.21" not in result.output
    assert result.stdout == ""


def test_ls_with_unreachable_mirror_fails(tmp_path: Path) -> None:
    ctx = NodeverContext.for_test(tmp_path / "prefix", transport=FakeTransport())

    result = CliRunner().invoke(cli, ["ls"], obj=ctx)

    assert result.exit_code == 1
    assert "Failed to fetch remote versions" in result.output
