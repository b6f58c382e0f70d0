"""Terminal subpackage for the interactive selector."""

from nodever.core.terminal.abc import Terminal
from nodever.core.terminal.real import RealTerminal, classify_key

__all__ = ["Terminal", "RealTerminal", "classify_key"]
