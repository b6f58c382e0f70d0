"""Host platform detection and distribution URL construction."""

import logging
import platform
import sys
from dataclasses import dataclass
from enum import Enum

from nodever.core.semver import VersionId
from nodever.core.transport.abc import Transport

logger = logging.getLogger(__name__)


class OsToken(Enum):
    """Operating system tokens used in distribution file names."""

    LINUX = "linux"
    DARWIN = "darwin"
    SUNOS = "sunos"
    UNKNOWN = ""

    @staticmethod
    def from_system(system: str) -> "OsToken":
        """Map platform.system() output to a token; unrecognized -> UNKNOWN."""
        name = system.lower()
        if name == "linux":
            return OsToken.LINUX
        if name == "darwin":
            return OsToken.DARWIN
        if name in ("sunos", "solaris"):
            return OsToken.SUNOS
        return OsToken.UNKNOWN


class ArchToken(Enum):
    """Architecture tokens: x64 on a 64-bit interpreter, x86 otherwise."""

    X64 = "x64"
    X86 = "x86"

    @staticmethod
    def from_is_64bit(is_64bit: bool) -> "ArchToken":
        return ArchToken.X64 if is_64bit else ArchToken.X86


@dataclass(frozen=True)
class HostPlatform:
    os: OsToken
    arch: ArchToken

    @staticmethod
    def detect() -> "HostPlatform":
        return HostPlatform(
            os=OsToken.from_system(platform.system()),
            arch=ArchToken.from_is_64bit(sys.maxsize > 2**32),
        )


def build_tarball_url(mirror: str, version: VersionId, os: OsToken, arch: ArchToken) -> str | None:
    """Canonical tarball URL, or None when the OS has no distribution."""
    if os is OsToken.UNKNOWN:
        return None
    return f"{mirror.rstrip('/')}/v{version}/node-v{version}-{os.value}-{arch.value}.tar.gz"


class PlatformResolver:
    """Resolves download URLs for the host and probes their existence."""

    def __init__(self, transport: Transport, mirror: str, host: HostPlatform) -> None:
        self._transport = transport
        self._mirror = mirror
        self._host = host

    @property
    def host(self) -> HostPlatform:
        return self._host

    def tarball_url(self, version: VersionId) -> str | None:
        url = build_tarball_url(self._mirror, version, self._host.os, self._host.arch)
        logger.debug("Tarball URL for %s: %s", version, url)
        return url

    def probe_exists(self, url: str) -> bool:
        """Existence check; only an explicit HTTP 200 counts as success."""
        exists = self._transport.exists(url)
        logger.debug("Probe %s via %s: %s", url, self._transport.name, exists)
        return exists
