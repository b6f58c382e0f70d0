"""Archive extraction subpackage."""

from nodever.core.extractor.abc import Extractor
from nodever.core.extractor.real import TarballExtractor

__all__ = ["Extractor", "TarballExtractor"]
