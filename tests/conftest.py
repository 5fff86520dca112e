"""Shared pytest fixtures for the lessgo-cli test suite.

Provides reusable fixtures for:
- Temporary output directories and project contexts
- Mock subprocess helpers
- A recording stand-in for ``run_command``
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from lessgo_cli.scaffolder.models import ProjectContext


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo ``setup_logging`` so every test sees the default logger state."""
    yield
    logger = logging.getLogger("lessgo_cli")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_output_dir(tmp_path: Path) -> Path:
    """Temporary parent directory for generated projects (auto-cleanup)."""
    output_dir = tmp_path / "output"
    output_dir.mkdir()
    yield output_dir


@pytest.fixture
def demo_context(tmp_output_dir: Path) -> ProjectContext:
    """Context for a project called ``demo`` under the temporary output dir."""
    return ProjectContext.for_name("demo", tmp_output_dir)


# ---------------------------------------------------------------------------
# Subprocess mocks
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances with configurable
    stdout, stderr, and return codes.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(stdout="output", returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """
    def factory(
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(
            return_value=(stdout.encode("utf-8"), stderr.encode("utf-8"))
        )
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory


@pytest.fixture
def fake_run_command():
    """Factory for an ``AsyncMock`` replacing ``run_command``.

    Each positional result is a ``(returncode, stdout, stderr)`` tuple (or an
    exception instance) returned for successive calls.  Calls beyond the
    supplied results succeed with empty output.

    Usage:
        def test_bootstrap(fake_run_command):
            runner = fake_run_command((1, "", "go: boom"))
            with patch("lessgo_cli.scaffolder.bootstrap.run_command", runner):
                ...
    """
    def factory(*results: Any) -> AsyncMock:
        queue = list(results)

        async def _run(cmd, cwd=None, timeout=None):
            if queue:
                outcome = queue.pop(0)
                if isinstance(outcome, BaseException):
                    raise outcome
                return outcome
            return (0, "", "")

        return AsyncMock(side_effect=_run)

    return factory
