"""Runtime binary abstraction: ask a binary its version, or run it."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

from nodever.core.semver import VersionId


class Runtime(ABC):
    """Abstract access to runtime binaries for dependency injection."""

    @abstractmethod
    def reported_version(self, binary: Path) -> VersionId | None:
        """Run `binary --version` and parse the result.

        Returns:
            The reported version, or None if the binary is missing, fails,
            or prints something that is not a version
        """
        ...

    @abstractmethod
    def execute(self, binary: Path, args: Sequence[str]) -> int:
        """Run binary with args attached to the current terminal.

        Returns:
            The child's exit code
        """
        ...
