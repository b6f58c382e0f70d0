"""Network transport abstraction.

The version manager only needs three things from the network: the text of
the remote index, an existence probe for a tarball URL, and a streamed
download to a local file. Implementations own all timeout behaviour.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Transport(ABC):
    """Abstract network transport for dependency injection."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short name shown in diagnostics (e.g. "requests", "curl")."""
        ...

    @abstractmethod
    def get_text(self, url: str) -> str:
        """Fetch url and return the response body as text.

        Raises:
            RuntimeError: If the request fails or returns an error status
        """
        ...

    @abstractmethod
    def exists(self, url: str) -> bool:
        """Issue a HEAD request; True only for an HTTP 200 response."""
        ...

    @abstractmethod
    def download(self, url: str, dest: Path) -> None:
        """Stream url into dest, creating or truncating the file.

        Raises:
            RuntimeError: If the request fails or returns an error status
        """
        ...
