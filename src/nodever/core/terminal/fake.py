"""Fake Terminal implementation for testing."""

from collections.abc import Iterator
from contextlib import contextmanager

from nodever.core.selector import Key
from nodever.core.terminal.abc import Terminal


class FakeTerminal(Terminal):
    """Fake that replays a scripted key sequence and captures frames.

    When the scripted keys run out, read_key() raises `interrupt` if one was
    given (e.g. KeyboardInterrupt() for Ctrl-C), otherwise returns Key.OTHER
    so a selector loop always terminates.
    """

    def __init__(
        self,
        *,
        keys: list[Key] | None = None,
        interactive: bool = True,
        interrupt: BaseException | None = None,
    ) -> None:
        self._keys = list(keys or [])
        self._interrupt = interrupt
        self._interactive = interactive
        self._frames: list[list[str]] = []
        self._raw_entries = 0
        self._raw_exits = 0

    def is_interactive(self) -> bool:
        return self._interactive

    @contextmanager
    def raw_mode(self) -> Iterator[None]:
        self._raw_entries += 1
        try:
            yield
        finally:
            self._raw_exits += 1

    def read_key(self) -> Key:
        if not self._keys:
            if self._interrupt is not None:
                raise self._interrupt
            return Key.OTHER
        return self._keys.pop(0)

    def draw(self, lines: list[str]) -> None:
        self._frames.append(list(lines))

    @property
    def frames(self) -> list[list[str]]:
        """Every frame passed to draw(). For test assertions only."""
        return [list(frame) for frame in self._frames]

    @property
    def raw_mode_balanced(self) -> bool:
        """True when every raw_mode() entry was matched by an exit."""
        return self._raw_entries == self._raw_exits

    @property
    def raw_entries(self) -> int:
        return self._raw_entries
