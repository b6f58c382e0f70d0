"""Fake Runtime implementation for testing.

Fake binaries are plain text files whose content is what `--version` would
print (e.g. "v18.1.0\\n"). This lets tests deploy versions with the real
merge-copy and still observe which version is "active".
"""

from collections.abc import Sequence
from pathlib import Path

from nodever.core.runtime.abc import Runtime
from nodever.core.semver import VersionId


class FakeRuntime(Runtime):
    """Fake that reads versions from file contents and records executions."""

    def __init__(self, *, exit_code: int = 0) -> None:
        self._exit_code = exit_code
        self._execute_calls: list[tuple[Path, list[str]]] = []

    def reported_version(self, binary: Path) -> VersionId | None:
        if not binary.is_file():
            return None
        return VersionId.try_parse(binary.read_text(encoding="utf-8"))

    def execute(self, binary: Path, args: Sequence[str]) -> int:
        self._execute_calls.append((binary, list(args)))
        return self._exit_code

    @property
    def execute_calls(self) -> list[tuple[Path, list[str]]]:
        """(binary, args) per execute() call. For test assertions only."""
        return self._execute_calls.copy()
