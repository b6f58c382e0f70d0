"""Filesystem deployment abstraction."""

from abc import ABC, abstractmethod
from pathlib import Path


class Filesystem(ABC):
    """Abstract merge-copy primitive used to deploy a version into the prefix."""

    @abstractmethod
    def merge_copy(self, src: Path, dest: Path) -> None:
        """Recursively copy src into dest.

        Files at matching paths are overwritten, permissions and timestamps
        are preserved, symlinks are recreated as symlinks, and files that
        exist only in dest are left untouched. Not transactional: a crash
        part-way leaves a mix of old and new files.
        """
        ...
