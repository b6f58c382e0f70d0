"""Terminal abstraction for the interactive selector."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from nodever.core.selector import Key


class Terminal(ABC):
    """Keypress input and full-frame output for dependency injection."""

    @abstractmethod
    def is_interactive(self) -> bool:
        """True when stdin and stderr are attached to a terminal."""
        ...

    @abstractmethod
    def raw_mode(self) -> AbstractContextManager[None]:
        """Scope in which keys are read unbuffered and unechoed.

        The original terminal mode must be restored on every exit path,
        including KeyboardInterrupt.
        """
        ...

    @abstractmethod
    def read_key(self) -> Key:
        """Block for one keypress and classify it."""
        ...

    @abstractmethod
    def draw(self, lines: list[str]) -> None:
        """Replace the screen contents with lines."""
        ...
