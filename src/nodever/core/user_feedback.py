"""User-facing progress output, injectable for tests."""

from abc import ABC, abstractmethod

import click

from nodever.cli.output import user_output


class UserFeedback(ABC):
    """Progress and status lines shown to the person at the terminal.

    Commands call ctx.feedback instead of printing directly so tests can
    assert on what the user was told without capturing streams.

    Usage:
        ctx.feedback.info(f"Installing {version}...")
        ctx.store.install(version)
        ctx.feedback.success(f"✓ Activated {version}")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show warning message."""


class InteractiveFeedback(UserFeedback):
    """Feedback written to stderr with click styling."""

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        user_output(click.style(message, fg="green"))

    def warning(self, message: str) -> None:
        user_output(click.style(message, fg="yellow"))


class FakeUserFeedback(UserFeedback):
    """Fake that records messages as ("info" | "success" | "warning", text)."""

    def __init__(self) -> None:
        self._messages: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self._messages.append(("info", message))

    def success(self, message: str) -> None:
        self._messages.append(("success", message))

    def warning(self, message: str) -> None:
        self._messages.append(("warning", message))

    @property
    def messages(self) -> list[tuple[str, str]]:
        """Recorded (level, text) pairs. For test assertions only."""
        return self._messages.copy()

    def texts(self) -> list[str]:
        return [text for _, text in self._messages]
