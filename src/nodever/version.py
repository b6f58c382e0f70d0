"""Package version, read from installed distribution metadata."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("nodever")
except PackageNotFoundError:
    # Running from a source checkout without an installed distribution
    __version__ = "0.0.0.dev0"
