"""CLI error handling utilities with styled output.

This module provides the Ensure class for asserting invariants in CLI commands
with consistent, user-friendly error messages. All errors use red "Error:" prefix
for visual consistency and exit with status 1.
"""

from collections.abc import Callable

import click

from nodever.cli.output import user_output


def _fail(message: str) -> None:
    user_output(click.style("Error: ", fg="red") + message)


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            _fail(error_message)
            raise SystemExit(1)

    @staticmethod
    def not_none[T](value: T | None, error_message: str) -> T:
        """Ensure value is not None, otherwise output styled error and exit.

        Provides type narrowing: takes `T | None` and returns `T`.

        Example:
            >>> active = Ensure.not_none(ctx.activation.current_version(), "No active version")
        """
        if value is None:
            _fail(error_message)
            raise SystemExit(1)
        return value

    @staticmethod
    def not_empty(value: str | list | tuple | dict | None, error_message: str) -> None:
        """Ensure value is not empty (non-empty string, list, tuple, dict), otherwise exit.

        Example:
            >>> Ensure.not_empty(installed, "No versions installed")
        """
        if not value:
            _fail(error_message)
            raise SystemExit(1)

    @staticmethod
    def succeeds[T](
        operation: Callable[[], T],
        error_message: str,
        exception_type: type[Exception] = RuntimeError,
    ) -> T:
        """Run operation, turning exception_type into a styled error and exit.

        The underlying exception text is appended to error_message and kept
        as the SystemExit's __cause__. Other exception types propagate.

        Example:
            >>> config = Ensure.succeeds(lambda: load_config(store), "Invalid configuration",
            ...                          exception_type=ValueError)
        """
        try:
            return operation()
        except exception_type as e:
            _fail(f"{error_message}: {e}")
            raise SystemExit(1) from e

    @staticmethod
    def integration_call[T](operation: Callable[[], T], error_message: str) -> T:
        """Run a call into a gateway (network, subprocess, archive).

        Gateways report failures as RuntimeError with operation context;
        those become a styled error and exit status 1.

        Example:
            >>> versions = Ensure.integration_call(ctx.catalog.fetch, "Failed to list versions")
        """
        return Ensure.succeeds(operation, error_message, exception_type=RuntimeError)
