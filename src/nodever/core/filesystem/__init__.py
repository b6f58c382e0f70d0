"""Filesystem deployment subpackage."""

from nodever.core.filesystem.abc import Filesystem
from nodever.core.filesystem.real import RealFilesystem

__all__ = ["Filesystem", "RealFilesystem"]
