"""Shared utility functions for lessgo-cli.

Provides async command execution, logging setup, and Rich-based console
output helpers used by the scaffolder and the CLI.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

console = Console(soft_wrap=True)

# Errors go to stderr so scripted callers can separate them from progress output.
error_console = Console(stderr=True, soft_wrap=True)


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the ``lessgo_cli`` logger with a Rich handler.

    Diagnostics are hidden unless *verbose* is set, in which case every
    engine step is logged at DEBUG level.  Calling this more than once
    replaces the previously installed handler.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("lessgo_cli")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = RichHandler(
        console=error_console,
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: float | None = None,
) -> tuple[int, str, str]:
    """Run a command asynchronously and wait for it to exit.

    Args:
        cmd: Program followed by its arguments.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.
            ``None`` waits until the process exits on its own.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple with both streams decoded
        and stripped.

    Raises:
        FileNotFoundError: If the program does not exist.
        PermissionError: If the program cannot be executed.
    """
    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        cwd=str(cwd) if cwd else None,
    )

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return (-1, "", f"Command timed out after {timeout}s: {' '.join(cmd)}")

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_banner(art: str, message: str) -> None:
    """Print the ASCII-art logo followed by a bold headline."""
    console.print(art, markup=False, highlight=False, style="bright_cyan")
    console.print(message, style="bold", markup=False, highlight=False)
    console.print()


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    error_console.print(message, style="bold red", markup=False, highlight=False)
