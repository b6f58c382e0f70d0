"""Runtime binary subpackage."""

from nodever.core.runtime.abc import Runtime
from nodever.core.runtime.real import RealRuntime

__all__ = ["Runtime", "RealRuntime"]
