"""Tarball extraction using the standard tarfile module."""

import logging
import tarfile
from collections.abc import Iterator
from pathlib import Path, PurePosixPath

from nodever.core.extractor.abc import Extractor

logger = logging.getLogger(__name__)


def _strip(name: str, count: int) -> str | None:
    parts = PurePosixPath(name).parts
    if len(parts) <= count:
        return None
    return "/".join(parts[count:])


def _stripped_members(tf: tarfile.TarFile, count: int) -> Iterator[tarfile.TarInfo]:
    """Yield members renamed with their first `count` components removed.

    Members that are entirely inside the stripped prefix (the wrapper folder
    itself) are skipped. Hard link targets are archive-relative, so they are
    stripped the same way; symlink targets are relative to the link and left
    alone.
    """
    for member in tf.getmembers():
        stripped = _strip(member.name, count)
        if stripped is None:
            continue
        if ".." in PurePosixPath(stripped).parts or stripped.startswith("/"):
            raise RuntimeError(f"unsafe tar member path: {member.name}")
        member.name = stripped
        if member.islnk():
            link_target = _strip(member.linkname, count)
            if link_target is None:
                continue
            member.linkname = link_target
        yield member


class TarballExtractor(Extractor):
    """Production extractor for .tar.gz / .tar.xz distributions."""

    def extract(self, archive: Path, target: Path, strip_components: int = 1) -> None:
        logger.debug("Extracting %s into %s (strip=%d)", archive, target, strip_components)
        target.mkdir(parents=True, exist_ok=True)
        try:
            with tarfile.open(archive, "r:*") as tf:
                members = list(_stripped_members(tf, strip_components))
                tf.extractall(target, members=members, filter="data")
        except tarfile.TarError as e:
            raise RuntimeError(f"Failed to extract {archive.name}: {e}") from e
