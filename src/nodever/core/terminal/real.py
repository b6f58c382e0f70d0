"""Production terminal using termios for the raw-mode scope and click for keys."""

import sys
import termios
import tty
from collections.abc import Iterator
from contextlib import contextmanager

import click

from nodever.core.selector import Key
from nodever.core.terminal.abc import Terminal

# Alternate screen + hidden cursor while selecting; restored on exit
_ENTER_FULLSCREEN = "\x1b[?1049h\x1b[?25l"
_LEAVE_FULLSCREEN = "\x1b[?25h\x1b[?1049l"
_CLEAR = "\x1b[H\x1b[2J"

_UP_KEYS = frozenset({"\x1b[A", "\x1bOA", "k"})
_DOWN_KEYS = frozenset({"\x1b[B", "\x1bOB", "j"})


def classify_key(raw: str) -> Key:
    """Map raw key input (arrow escape sequences, vi keys) to a Key."""
    if raw in _UP_KEYS:
        return Key.UP
    if raw in _DOWN_KEYS:
        return Key.DOWN
    return Key.OTHER


class RealTerminal(Terminal):
    """Production implementation on stdin/stderr."""

    def is_interactive(self) -> bool:
        return sys.stdin.isatty() and sys.stderr.isatty()

    @contextmanager
    def raw_mode(self) -> Iterator[None]:
        fd = sys.stdin.fileno()
        saved = termios.tcgetattr(fd)
        try:
            tty.setcbreak(fd)
            click.echo(_ENTER_FULLSCREEN, err=True, nl=False)
            yield
        finally:
            click.echo(_LEAVE_FULLSCREEN, err=True, nl=False)
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)

    def read_key(self) -> Key:
        # click.getchar turns Ctrl-C into KeyboardInterrupt, which unwinds raw_mode
        return classify_key(click.getchar(echo=False))

    def draw(self, lines: list[str]) -> None:
        click.echo(_CLEAR + "\n" + "\n".join(lines) + "\n", err=True, nl=False)
