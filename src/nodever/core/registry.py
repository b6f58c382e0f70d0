"""On-disk layout of the installation prefix and the version registry.

    <prefix>/bin/node                      deployed (active) binary
    <prefix>/nodever/versions/             registry root
    <prefix>/nodever/versions/<version>/   one extracted distribution
    <prefix>/nodever/versions/<version>/.config
    <prefix>/nodever/versions/.prev        previous-version record

The active and previous versions are never stored here: they are resolved
through these paths each time they are needed.
"""

from dataclasses import dataclass
from pathlib import Path

from nodever.core.semver import VersionId

RUNTIME_BINARY = "node"
CONFIG_HINT_FILE = ".config"
PREVIOUS_RECORD_FILE = ".prev"
STAGING_PREFIX = ".staging-"


@dataclass(frozen=True)
class RegistryContext:
    """Paths shared by VersionStore and ActivationManager."""

    prefix: Path
    root: Path

    @staticmethod
    def for_prefix(prefix: Path) -> "RegistryContext":
        return RegistryContext(prefix=prefix, root=prefix / "nodever" / "versions")

    @property
    def previous_record(self) -> Path:
        return self.root / PREVIOUS_RECORD_FILE

    @property
    def deployed_binary(self) -> Path:
        return self.prefix / "bin" / RUNTIME_BINARY

    def version_dir(self, version: VersionId) -> Path:
        return self.root / str(version)

    def version_binary(self, version: VersionId) -> Path:
        return self.version_dir(version) / "bin" / RUNTIME_BINARY

    def config_hint_file(self, version: VersionId) -> Path:
        return self.version_dir(version) / CONFIG_HINT_FILE

    def is_installed(self, version: VersionId) -> bool:
        return self.version_dir(version).is_dir()
