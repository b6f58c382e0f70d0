"""Fake Transport implementation for testing.

FakeTransport serves canned index text and tarballs from memory and records
every request, so tests can assert on network usage without a network.
"""

from pathlib import Path

from nodever.core.transport.abc import Transport


class FakeTransport(Transport):
    """In-memory fake that serves configured responses.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(
        self,
        *,
        pages: dict[str, str] | None = None,
        files: dict[str, bytes] | None = None,
        existing_urls: set[str] | None = None,
    ) -> None:
        """Create FakeTransport.

        Args:
            pages: url -> body returned by get_text()
            files: url -> bytes written by download()
            existing_urls: urls for which exists() is True. Defaults to the
                keys of files.
        """
        self._pages = pages or {}
        self._files = files or {}
        self._existing_urls = existing_urls if existing_urls is not None else set(self._files)
        self._get_calls: list[str] = []
        self._exists_calls: list[str] = []
        self._download_calls: list[tuple[str, Path]] = []

    @property
    def name(self) -> str:
        return "fake"

    def get_text(self, url: str) -> str:
        self._get_calls.append(url)
        if url not in self._pages:
            raise RuntimeError(f"Failed to fetch {url}: HTTP 404")
        return self._pages[url]

    def exists(self, url: str) -> bool:
        self._exists_calls.append(url)
        return url in self._existing_urls

    def download(self, url: str, dest: Path) -> None:
        self._download_calls.append((url, dest))
        if url not in self._files:
            raise RuntimeError(f"Failed to download {url}: HTTP 404")
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_bytes(self._files[url])

    @property
    def get_calls(self) -> list[str]:
        """URLs passed to get_text(). For test assertions only."""
        return self._get_calls.copy()

    @property
    def exists_calls(self) -> list[str]:
        """URLs passed to exists(). For test assertions only."""
        return self._exists_calls.copy()

    @property
    def download_calls(self) -> list[tuple[str, Path]]:
        """(url, dest) pairs passed to download(). For test assertions only."""
        return self._download_calls.copy()
