"""Production transports: requests, or curl/wget on PATH."""

import logging
import re
import shutil
from pathlib import Path

import requests

from nodever.core.errors import NoDownloaderAvailable
from nodever.core.subprocess import run_with_context
from nodever.core.transport.abc import Transport

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 1024 * 1024
_STATUS_LINE = re.compile(r"HTTP/[\d.]+\s+(\d{3})")


class RequestsTransport(Transport):
    """Transport built on requests.

    timeout is passed straight to requests; None means block indefinitely.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self._timeout = timeout
        self._session = requests.Session()

    @property
    def name(self) -> str:
        return "requests"

    def get_text(self, url: str) -> str:
        logger.debug("GET %s", url)
        try:
            response = self._session.get(url, timeout=self._timeout)
        except requests.RequestException as e:
            raise RuntimeError(f"Failed to fetch {url}: {e}") from e
        if response.status_code >= 400:
            raise RuntimeError(f"Failed to fetch {url}: HTTP {response.status_code}")
        return response.text

    def exists(self, url: str) -> bool:
        logger.debug("HEAD %s", url)
        try:
            response = self._session.head(url, timeout=self._timeout, allow_redirects=True)
        except requests.RequestException as e:
            logger.debug("HEAD %s failed: %s", url, e)
            return False
        return response.status_code == 200

    def download(self, url: str, dest: Path) -> None:
        logger.debug("Downloading %s -> %s", url, dest)
        try:
            with self._session.get(url, stream=True, timeout=self._timeout) as response:
                if response.status_code >= 400:
                    raise RuntimeError(f"Failed to download {url}: HTTP {response.status_code}")
                dest.parent.mkdir(parents=True, exist_ok=True)
                with dest.open("wb") as f:
                    for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
                        if chunk:
                            f.write(chunk)
        except requests.RequestException as e:
            raise RuntimeError(f"Failed to download {url}: {e}") from e


class CommandLineTransport(Transport):
    """Transport that shells out to curl or wget."""

    def __init__(self, tool: str, executable: str, timeout: float | None = None) -> None:
        if tool not in ("curl", "wget"):
            raise ValueError(f"Unsupported download tool: {tool}")
        self._tool = tool
        self._executable = executable
        self._timeout = timeout

    @property
    def name(self) -> str:
        return self._tool

    def _timeout_args(self) -> list[str]:
        if self._timeout is None:
            return []
        if self._tool == "curl":
            return ["--max-time", str(self._timeout)]
        return [f"--timeout={self._timeout}"]

    def get_text(self, url: str) -> str:
        if self._tool == "curl":
            cmd = [self._executable, "-sSfL", *self._timeout_args(), url]
        else:
            cmd = [self._executable, "-qO-", *self._timeout_args(), url]
        return run_with_context(cmd, f"fetch {url}").stdout

    def exists(self, url: str) -> bool:
        if self._tool == "curl":
            cmd = [
                self._executable,
                "-sIL",
                "-o",
                "/dev/null",
                "-w",
                "%{http_code}",
                *self._timeout_args(),
                url,
            ]
            result = run_with_context(cmd, f"probe {url}", check=False)
            return result.stdout.strip() == "200"

        cmd = [self._executable, "--spider", "-S", *self._timeout_args(), url]
        result = run_with_context(cmd, f"probe {url}", check=False)
        statuses = _STATUS_LINE.findall(result.stderr or "")
        # wget prints one status line per redirect hop; the last one counts
        return bool(statuses) and statuses[-1] == "200"

    def download(self, url: str, dest: Path) -> None:
        dest.parent.mkdir(parents=True, exist_ok=True)
        if self._tool == "curl":
            cmd = [self._executable, "-sSfL", *self._timeout_args(), "-o", str(dest), url]
        else:
            cmd = [self._executable, "-q", *self._timeout_args(), "-O", str(dest), url]
        run_with_context(cmd, f"download {url}")


def create_transport(downloader: str, timeout: float | None) -> Transport:
    """Select the transport named by the `downloader` setting.

    "auto" and "requests" use requests. "curl" and "wget" require the tool
    on PATH.

    Raises:
        NoDownloaderAvailable: If the requested tool cannot be found
    """
    if downloader in ("auto", "requests"):
        return RequestsTransport(timeout=timeout)

    executable = shutil.which(downloader)
    if executable is None:
        raise NoDownloaderAvailable(
            f"Downloader '{downloader}' is not installed",
            hint="install it, or run 'nodever config set downloader requests'",
        )
    return CommandLineTransport(downloader, executable, timeout=timeout)
