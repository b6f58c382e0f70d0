"""User-facing error types for version lifecycle operations.

Every error raised by the core carries a message meant for the terminal and
an optional hint with remediation text. The CLI catches NodeverError in one
place, prints it with a red "Error:" prefix and exits with status 1.
"""


class NodeverError(Exception):
    """Base exception with user-facing remediation text."""

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint

    def format(self) -> str:
        if self.hint:
            return f"{self.message} - {self.hint}"
        return self.message


class NoDownloaderAvailable(NodeverError):
    pass


class VersionNotFound(NodeverError):
    pass


class NotInstalled(NodeverError):
    pass


class NoPreviousVersion(NodeverError):
    pass


class MissingArgument(NodeverError):
    pass


class InvalidVersion(NodeverError):
    pass


class UnsupportedPlatform(NodeverError):
    pass
