"""Activation: deploying a stored version into the installation prefix.

Each activation first records the version that was active before it in the
previous-version record, then merges the stored tree into the prefix. The
record holds exactly one version, so revert is a single step back and not an
undo stack: reverting twice in a row returns to where the first revert
started.
"""

import logging

from nodever.core.errors import NoPreviousVersion, NotInstalled
from nodever.core.filesystem.abc import Filesystem
from nodever.core.registry import RegistryContext
from nodever.core.runtime.abc import Runtime
from nodever.core.semver import VersionId

logger = logging.getLogger(__name__)

# Subtrees of a distribution that are merged into the prefix
DEPLOYED_SUBDIRS = ("bin", "include", "lib", "share")


class ActivationManager:
    """Owns the previous-version record and deployment into the prefix."""

    def __init__(self, registry: RegistryContext, filesystem: Filesystem, runtime: Runtime) -> None:
        self._registry = registry
        self._filesystem = filesystem
        self._runtime = runtime

    def current_version(self) -> VersionId | None:
        """Version reported by the binary deployed in the prefix, if any."""
        return self._runtime.reported_version(self._registry.deployed_binary)

    def previous_version(self) -> VersionId | None:
        """Version named by the previous-version record, if any."""
        record = self._registry.previous_record
        if not record.is_file():
            return None
        return VersionId.try_parse(record.read_text(encoding="utf-8"))

    def activate(self, version: VersionId) -> None:
        """Make version the active one.

        Raises:
            NotInstalled: If version is not in the registry
        """
        if not self._registry.is_installed(version):
            raise NotInstalled(
                f"Version {version} is not installed",
                hint=f"run 'nodever {version}' to install it",
            )

        current = self.current_version()
        self._write_previous(current)

        source = self._registry.version_dir(version)
        for subdir in DEPLOYED_SUBDIRS:
            if (source / subdir).is_dir():
                self._filesystem.merge_copy(source / subdir, self._registry.prefix / subdir)
        logger.debug("Activated %s (previous: %s)", version, current)

    def revert_to_previous(self) -> VersionId:
        """Activate the version recorded as previous and return it.

        Raises:
            NoPreviousVersion: If nothing has been recorded yet
            NotInstalled: If the recorded version has since been removed
        """
        previous = self.previous_version()
        if previous is None:
            raise NoPreviousVersion("No previous version recorded")
        self.activate(previous)
        return previous

    def _write_previous(self, version: VersionId | None) -> None:
        record = self._registry.previous_record
        record.parent.mkdir(parents=True, exist_ok=True)
        # An empty record reads back as "no previous version"
        record.write_text(f"{version}\n" if version is not None else "", encoding="utf-8")
        logger.debug("Previous-version record set to %s", version)
