"""Helpers for building registries and remote indexes in tests.

Installed versions are real directories under tmp_path. Their bin/node is a
text file holding the `--version` output, which FakeRuntime reads back, so
activating a version with the real merge-copy makes it "active".
"""

from pathlib import Path

from nodever.core.config_store import DEFAULT_MIRROR
from nodever.core.registry import RegistryContext
from nodever.core.transport.fake import FakeTransport

INDEX_URL = f"{DEFAULT_MIRROR}/"


def make_installed(
    registry: RegistryContext,
    version: str,
    *,
    config_hint: str | None = None,
) -> Path:
    """Create <root>/<version> with a fake binary and a small lib tree."""
    version_dir = registry.root / version
    (version_dir / "bin").mkdir(parents=True)
    (version_dir / "bin" / "node").write_text(f"v{version}\n", encoding="utf-8")
    (version_dir / "lib" / "node_modules").mkdir(parents=True)
    (version_dir / "lib" / "node_modules" / "VERSION").write_text(version, encoding="utf-8")
    if config_hint is not None:
        (version_dir / ".config").write_text(f"{config_hint}\n", encoding="utf-8")
    return version_dir


def index_page(*versions: str) -> str:
    """Directory listing in the shape the mirror serves."""
    rows = [f'<a href="v{v}/">v{v}/</a>                  01-Jan-2024 00:00    -' for v in versions]
    return "<html><body><pre>\n" + "\n".join(rows) + "\n</pre></body></html>\n"


def tarball_url(version: str, os_token: str = "linux", arch: str = "x64") -> str:
    return f"{DEFAULT_MIRROR}/v{version}/node-v{version}-{os_token}-{arch}.tar.gz"


def install_transport(*versions: str, index: tuple[str, ...] = ()) -> FakeTransport:
    """Transport serving tarballs for versions and an index listing."""
    return FakeTransport(
        pages={INDEX_URL: index_page(*(index or versions))},
        files={tarball_url(v): f"tarball {v}".encode() for v in versions},
    )


def node_tree(version: str) -> dict[str, str]:
    """Extracted distribution whose binary reports version."""
    return {"bin/node": f"v{version}\n", "share/man/man1/node.1": f".TH NODE {version}\n"}
