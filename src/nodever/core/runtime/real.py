"""Production runtime access via subprocess."""

import logging
from collections.abc import Sequence
from pathlib import Path

from nodever.core.runtime.abc import Runtime
from nodever.core.semver import VersionId
from nodever.core.subprocess import run_with_context

logger = logging.getLogger(__name__)


class RealRuntime(Runtime):
    """Production implementation that invokes the binary."""

    def reported_version(self, binary: Path) -> VersionId | None:
        if not binary.exists():
            return None
        try:
            result = run_with_context(
                [str(binary), "--version"], "query runtime version", check=False
            )
        except RuntimeError as e:
            logger.debug("Version probe of %s failed: %s", binary, e)
            return None
        if result.returncode != 0:
            logger.debug("Version probe of %s exited %d", binary, result.returncode)
            return None
        return VersionId.try_parse(result.stdout)

    def execute(self, binary: Path, args: Sequence[str]) -> int:
        result = run_with_context(
            [str(binary), *args],
            f"run {binary.name}",
            capture_output=False,
            check=False,
        )
        return result.returncode
