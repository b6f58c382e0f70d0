"""Fake Extractor implementation for testing."""

from pathlib import Path

from nodever.core.extractor.abc import Extractor


class FakeExtractor(Extractor):
    """Fake that materialises a fixed file tree instead of reading archives.

    Each extract() writes `tree` (relative path -> text content) under the
    target directory. Set `fail=True` to simulate a corrupt archive: the
    first file is written and then RuntimeError is raised, leaving a partial
    tree behind the way a real interrupted extraction would.
    """

    def __init__(self, *, tree: dict[str, str] | None = None, fail: bool = False) -> None:
        self._tree = tree if tree is not None else {"bin/node": "#!/bin/sh\n"}
        self._fail = fail
        self._extract_calls: list[tuple[Path, Path, int]] = []

    def extract(self, archive: Path, target: Path, strip_components: int = 1) -> None:
        self._extract_calls.append((archive, target, strip_components))
        target.mkdir(parents=True, exist_ok=True)
        for relative, content in self._tree.items():
            path = target / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
            if self._fail:
                raise RuntimeError(f"Failed to extract {archive.name}: unexpected end of data")

    @property
    def extract_calls(self) -> list[tuple[Path, Path, int]]:
        """(archive, target, strip_components) per call. For test assertions only."""
        return self._extract_calls.copy()
