"""Subprocess execution with operation context in error messages.

Gateways that shell out (curl/wget downloads, runtime version probes) go
through run_with_context so a failure reads as "Failed to <operation>"
together with the command line, exit code and captured stderr.
"""

import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Any


def run_with_context(
    cmd: Sequence[str],
    operation_context: str,
    *,
    cwd: Path | None = None,
    capture_output: bool = True,
    check: bool = True,
    **kwargs: Any,
) -> subprocess.CompletedProcess[str]:
    """Run cmd, translating failures into RuntimeError with context.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description, e.g. "download index"
        cwd: Working directory for the command
        capture_output: Capture stdout/stderr as text (default: True)
        check: Raise on non-zero exit (default: True)
        **kwargs: Passed through to subprocess.run()

    Raises:
        RuntimeError: If the command exits non-zero, cannot be found or cannot be executed
    """
    cmd_str = " ".join(str(arg) for arg in cmd)
    try:
        return subprocess.run(
            [str(arg) for arg in cmd],
            cwd=cwd,
            capture_output=capture_output,
            text=True,
            encoding="utf-8",
            check=check,
            **kwargs,
        )
    except subprocess.CalledProcessError as e:
        error_msg = f"Failed to {operation_context}"
        error_msg += f"\nCommand: {cmd_str}"
        error_msg += f"\nExit code: {e.returncode}"
        stderr_text = (e.stderr or "").strip()
        if stderr_text:
            error_msg += f"\nstderr: {stderr_text}"
        raise RuntimeError(error_msg) from e
    except FileNotFoundError as e:
        error_msg = f"Command not found while trying to {operation_context}: {cmd[0]}"
        error_msg += f"\nFull command: {cmd_str}"
        raise RuntimeError(error_msg) from e
    except OSError as e:
        # Present but not runnable: missing exec bit, wrong architecture
        error_msg = f"Cannot execute {cmd[0]} while trying to {operation_context}: {e}"
        error_msg += f"\nFull command: {cmd_str}"
        raise RuntimeError(error_msg) from e
