"""Output routing for CLI commands with clear intent.

Two streams, two purposes:
- user_output: messages for the person at the terminal (stderr)
- machine_output: data meant to be captured, e.g. $(nodever bin 18.1.0) (stdout)
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Write machine-readable data to stdout."""
    click.echo(message, nl=nl)
