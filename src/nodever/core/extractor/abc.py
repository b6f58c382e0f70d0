"""Archive extraction abstraction."""

from abc import ABC, abstractmethod
from pathlib import Path


class Extractor(ABC):
    """Abstract archive extraction for dependency injection."""

    @abstractmethod
    def extract(self, archive: Path, target: Path, strip_components: int = 1) -> None:
        """Extract archive into target, dropping leading path components.

        Distribution tarballs wrap everything in a single top-level folder
        (node-v18.1.0-linux-x64/); strip_components=1 removes it so the
        tree lands directly in target.

        Raises:
            RuntimeError: If the archive is unreadable or contains unsafe paths
        """
        ...
