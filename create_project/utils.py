"""Shared utility functions for create-project-cli.

Provides blocking command execution and Rich-based console reporting.
Progress and success lines go to stdout; errors go to stderr.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from rich.console import Console
from rich.markup import escape

console = Console(highlight=False)
error_console = Console(stderr=True, highlight=False)

# ---------------------------------------------------------------------------
# Command execution
# ---------------------------------------------------------------------------


def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: int = 120,
) -> tuple[int, str, str]:
    """Run a command and wait for it to finish.

    Args:
        cmd: Argument list; no shell is involved.
        cwd: Working directory for the child process.  The parent's own
            working directory is never changed.
        timeout: Maximum wall-clock seconds before the process is killed.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  Output is decoded as UTF-8
        with undecodable bytes replaced.  A timeout is reported as return
        code ``-1`` with an explanatory stderr.

    Raises:
        OSError: The executable could not be started (e.g. not installed).
    """
    try:
        completed = subprocess.run(
            cmd,
            cwd=str(cwd) if cwd else None,
            capture_output=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        return (-1, "", f"Command timed out after {timeout}s: {' '.join(cmd)}")

    stdout_str = (completed.stdout or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (completed.stderr or b"").decode("utf-8", errors="replace").strip()
    return (completed.returncode, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_info(message: str) -> None:
    """Print a cyan informational message."""
    console.print(f"[cyan]{escape(message)}[/cyan]", soft_wrap=True)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]", soft_wrap=True)


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]", soft_wrap=True)


def print_error(message: str) -> None:
    """Print a red error message on stderr."""
    error_console.print(f"[bold red]{escape(message)}[/bold red]", soft_wrap=True)


def print_plain(text: str) -> None:
    """Print *text* verbatim, without markup or highlighting."""
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)
