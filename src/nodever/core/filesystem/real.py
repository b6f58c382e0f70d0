"""Production merge-copy built on os.walk and shutil."""

import logging
import os
import shutil
from pathlib import Path

from nodever.core.filesystem.abc import Filesystem

logger = logging.getLogger(__name__)


def _clear(path: Path) -> None:
    """Remove whatever non-directory entry sits at path."""
    if path.is_symlink() or path.is_file():
        path.unlink()


def _copy_entry(src: Path, dest: Path) -> None:
    if dest.is_dir() and not dest.is_symlink():
        shutil.rmtree(dest)
    else:
        _clear(dest)
    if src.is_symlink():
        os.symlink(os.readlink(src), dest)
    else:
        shutil.copy2(src, dest)


class RealFilesystem(Filesystem):
    """Production implementation operating on the local filesystem."""

    def merge_copy(self, src: Path, dest: Path) -> None:
        logger.debug("Merging %s into %s", src, dest)
        dest.mkdir(parents=True, exist_ok=True)
        copied_dirs: list[tuple[Path, Path]] = []

        for dirpath, dirnames, filenames in os.walk(src):
            current = Path(dirpath)
            target_dir = dest / current.relative_to(src)

            # Symlinked directories are copied as links, not descended into
            for name in list(dirnames):
                if (current / name).is_symlink():
                    dirnames.remove(name)
                    filenames.append(name)

            for name in dirnames:
                target = target_dir / name
                if not target.is_dir() or target.is_symlink():
                    _clear(target)
                    target.mkdir()
                copied_dirs.append((current / name, target))

            for name in filenames:
                _copy_entry(current / name, target_dir / name)

        # Directory metadata last, since writing files updates mtimes
        for src_dir, dest_dir in reversed(copied_dirs):
            shutil.copystat(src_dir, dest_dir)
