"""Semantic version identifiers with numeric ordering.

Versions compare component-by-component as integers, so 9.10.0 sorts after
9.9.9 and 10.0.0 after both. String comparison is never used.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass

from nodever.core.errors import InvalidVersion

VERSION_PATTERN = re.compile(r"\d+\.\d+\.\d+")

_FULL_VERSION = re.compile(r"v?(\d+)\.(\d+)\.(\d+)")


@dataclass(frozen=True, order=True)
class VersionId:
    """A major.minor.patch version identifier.

    Field order defines the sort order, so dataclass ordering gives
    numeric comparison on major, then minor, then patch.
    """

    major: int
    minor: int
    patch: int

    @staticmethod
    def parse(text: str) -> "VersionId":
        """Parse "18.1.0" or "v18.1.0".

        Raises:
            ValueError: If text is not a complete version identifier
        """
        match = _FULL_VERSION.fullmatch(text.strip())
        if match is None:
            raise ValueError(f"Not a version identifier: {text!r}")
        major, minor, patch = (int(part) for part in match.groups())
        return VersionId(major=major, minor=minor, patch=patch)

    @staticmethod
    def try_parse(text: str) -> "VersionId | None":
        """Parse text, returning None instead of raising."""
        try:
            return VersionId.parse(text)
        except ValueError:
            return None

    @property
    def is_stable_line(self) -> bool:
        """Even minor components mark the stable release line.

        This is a release convention of the managed distribution (even minor
        = stable, odd minor = development), not a property of semver.
        """
        return self.minor % 2 == 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def parse_user_version(text: str) -> VersionId:
    """Parse a version typed on the command line.

    Raises:
        InvalidVersion: With a user-facing message if text does not parse
    """
    version = VersionId.try_parse(text)
    if version is None:
        raise InvalidVersion(
            f"Invalid version '{text}'",
            hint="expected major.minor.patch, for example 18.1.0",
        )
    return version


def extract_versions(text: str) -> list[VersionId]:
    """Find every version identifier in text, deduplicated, ascending."""
    found = {VersionId.parse(match.group(0)) for match in VERSION_PATTERN.finditer(text)}
    return sorted(found)


def max_version(versions: Iterable[VersionId]) -> VersionId | None:
    """Highest version in versions, or None when empty."""
    return max(versions, default=None)
