"""Remote catalog of published versions.

The mirror's index page is scanned for anything that looks like a version
identifier; no HTML parsing is attempted. All queries work on versions in
ascending semantic order.
"""

import logging
from collections.abc import Collection
from enum import Enum

from nodever.core.errors import VersionNotFound
from nodever.core.semver import VersionId, extract_versions, max_version
from nodever.core.transport.abc import Transport

logger = logging.getLogger(__name__)


class Status(Enum):
    """Status of a remote version relative to the local registry."""

    ACTIVE = "active"
    INSTALLED = "installed"
    AVAILABLE = "available"


def is_legacy(version: VersionId) -> bool:
    """Releases before 0.8.6 are left out of the general listing.

    They remain installable by exact name.
    """
    return version < VersionId(0, 8, 6)


class RemoteCatalog:
    """Queries over the versions published on a mirror."""

    def __init__(self, transport: Transport, mirror: str) -> None:
        self._transport = transport
        self._mirror = mirror.rstrip("/")

    @property
    def index_url(self) -> str:
        return f"{self._mirror}/"

    def fetch(self) -> list[VersionId]:
        """Every version on the index, deduplicated, ascending."""
        text = self._transport.get_text(self.index_url)
        versions = extract_versions(text)
        logger.debug("Fetched %d versions from %s", len(versions), self.index_url)
        return versions

    def listing(self) -> list[VersionId]:
        """fetch() without legacy releases."""
        return [v for v in self.fetch() if not is_legacy(v)]

    def latest(self) -> VersionId:
        """Highest non-legacy version.

        Raises:
            VersionNotFound: If the index lists no versions
        """
        return _require(max_version(self.listing()), self.index_url)

    def latest_stable(self) -> VersionId:
        """Highest non-legacy version on the stable (even minor) line.

        Raises:
            VersionNotFound: If the index lists no stable versions
        """
        return _require(max_version(v for v in self.listing() if v.is_stable_line), self.index_url)

    def list_with_status(
        self,
        local_versions: Collection[VersionId],
        active_version: VersionId | None,
    ) -> list[tuple[VersionId, Status]]:
        return [
            (version, status_of(version, local_versions, active_version))
            for version in self.listing()
        ]


def status_of(
    version: VersionId,
    local_versions: Collection[VersionId],
    active_version: VersionId | None,
) -> Status:
    if version == active_version:
        return Status.ACTIVE
    if version in local_versions:
        return Status.INSTALLED
    return Status.AVAILABLE


def _require(version: VersionId | None, index_url: str) -> VersionId:
    if version is None:
        raise VersionNotFound(f"No versions found at {index_url}")
    return version
