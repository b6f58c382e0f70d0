"""The on-disk registry of installed versions.

Installs are staged: the tarball is downloaded and extracted into a hidden
directory inside the registry root and renamed into place only once the tree
is complete. A failed download or extraction therefore never leaves a
<root>/<version> directory that later looks installed.
"""

import logging
import shutil
import tempfile
from collections.abc import Iterable
from enum import Enum
from pathlib import Path

from nodever.core.activation import ActivationManager
from nodever.core.errors import NotInstalled, UnsupportedPlatform, VersionNotFound
from nodever.core.extractor.abc import Extractor
from nodever.core.platform import PlatformResolver
from nodever.core.registry import CONFIG_HINT_FILE, STAGING_PREFIX, RegistryContext
from nodever.core.semver import VersionId
from nodever.core.transport.abc import Transport

logger = logging.getLogger(__name__)


class InstallResult(Enum):
    INSTALLED = "installed"
    ALREADY_INSTALLED = "already_installed"


class VersionStore:
    """Install, enumerate, resolve and remove registry entries."""

    def __init__(
        self,
        registry: RegistryContext,
        *,
        transport: Transport,
        platform: PlatformResolver,
        extractor: Extractor,
        activation: ActivationManager,
    ) -> None:
        self._registry = registry
        self._transport = transport
        self._platform = platform
        self._extractor = extractor
        self._activation = activation

    def list_installed(self) -> list[VersionId]:
        """Installed versions in ascending semantic order.

        Only directories whose name is exactly a version identifier count;
        the previous-version record and staging directories are skipped.
        """
        root = self._registry.root
        if not root.is_dir():
            return []
        versions = []
        for entry in root.iterdir():
            if not entry.is_dir():
                continue
            version = VersionId.try_parse(entry.name)
            if version is not None and str(version) == entry.name:
                versions.append(version)
        return sorted(versions)

    def install(self, version: VersionId, config_hint: str | None = None) -> InstallResult:
        """Install version if needed, then activate it.

        Raises:
            UnsupportedPlatform: If the host OS has no distribution
            VersionNotFound: If the mirror has no tarball for version
            RuntimeError: If download or extraction fails
        """
        if self._registry.is_installed(version):
            logger.debug("%s already in registry, activating without download", version)
            self._activation.activate(version)
            return InstallResult.ALREADY_INSTALLED

        url = self._platform.tarball_url(version)
        if url is None:
            raise UnsupportedPlatform(
                f"No {version} distribution for this platform",
                hint="supported: linux, darwin, sunos",
            )
        if not self._platform.probe_exists(url):
            raise VersionNotFound(f"Version {version} not found", hint=f"nothing at {url}")

        self._registry.root.mkdir(parents=True, exist_ok=True)
        with tempfile.TemporaryDirectory(
            prefix=f"{STAGING_PREFIX}{version}-", dir=self._registry.root
        ) as staging_dir:
            staging = Path(staging_dir)
            archive = staging / url.rsplit("/", 1)[-1]
            tree = staging / "tree"

            self._transport.download(url, archive)
            self._extractor.extract(archive, tree, strip_components=1)
            if config_hint:
                (tree / CONFIG_HINT_FILE).write_text(f"{config_hint}\n", encoding="utf-8")
            tree.rename(self._registry.version_dir(version))
            logger.debug("Installed %s into %s", version, self._registry.version_dir(version))

        self._activation.activate(version)
        return InstallResult.INSTALLED

    def remove(self, versions: Iterable[VersionId]) -> list[VersionId]:
        """Delete the named versions; missing ones are skipped silently.

        Returns:
            The versions that were actually removed
        """
        removed = []
        for version in versions:
            version_dir = self._registry.version_dir(version)
            if not version_dir.is_dir():
                logger.debug("%s not installed, skipping", version)
                continue
            shutil.rmtree(version_dir)
            removed.append(version)
        return removed

    def prune(self, keep: VersionId) -> list[VersionId]:
        """Remove every installed version except keep."""
        return self.remove(v for v in self.list_installed() if v != keep)

    def binary_path(self, version: VersionId) -> Path:
        """Path of version's runtime binary.

        Raises:
            NotInstalled: If the binary is absent
        """
        binary = self._registry.version_binary(version)
        if not binary.exists():
            raise NotInstalled(
                f"Version {version} is not installed",
                hint=f"run 'nodever {version}' to install it",
            )
        return binary

    def config_hint(self, version: VersionId) -> str | None:
        """Configuration hint recorded at install time, if any."""
        hint_file = self._registry.config_hint_file(version)
        if not hint_file.is_file():
            return None
        return hint_file.read_text(encoding="utf-8").strip() or None
