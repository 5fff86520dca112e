"""Go module bootstrap for a freshly written project.

Runs ``go mod init <name>`` and then ``go mod tidy`` inside the project root.
The second command only runs if the first exits successfully.  Only exit
status matters; stderr is kept for the error message.
"""

from __future__ import annotations

import logging

from lessgo_cli.utils import run_command

from .errors import CommandFailed, CommandInitFailed, CommandResolveFailed
from .models import CommandSpec, ProjectContext

logger = logging.getLogger(__name__)

# stderr lines kept in a failure message
_STDERR_TAIL = 5


class ToolchainBootstrapper:
    """Initializes and resolves the new project's ``go.mod``."""

    def __init__(self, go_binary: str = "go") -> None:
        self.go_binary = go_binary

    def commands(self, context: ProjectContext) -> list[tuple[CommandSpec, type[CommandFailed]]]:
        """The bootstrap commands in execution order, each with the error it raises."""
        return [
            (
                CommandSpec(
                    label="init",
                    program=self.go_binary,
                    args=("mod", "init", context.name),
                    working_directory=context.root_path,
                ),
                CommandInitFailed,
            ),
            (
                CommandSpec(
                    label="tidy",
                    program=self.go_binary,
                    args=("mod", "tidy"),
                    working_directory=context.root_path,
                ),
                CommandResolveFailed,
            ),
        ]

    async def run(self, context: ProjectContext) -> list[CommandSpec]:
        """Run every bootstrap command in order, stopping at the first failure.

        Returns:
            The commands that completed successfully.

        Raises:
            CommandInitFailed: ``go mod init`` failed or could not start.
            CommandResolveFailed: ``go mod tidy`` failed or could not start.
        """
        completed: list[CommandSpec] = []
        for spec, error_cls in self.commands(context):
            await self._run_one(spec, error_cls)
            completed.append(spec)
        return completed

    async def _run_one(self, spec: CommandSpec, error_cls: type[CommandFailed]) -> None:
        logger.debug("Running %s in %s", spec.display(), spec.working_directory)
        try:
            returncode, _stdout, stderr = await run_command(
                spec.argv, cwd=spec.working_directory, timeout=None
            )
        except OSError as exc:
            raise error_cls(spec.display(), None, str(exc)) from exc

        if returncode != 0:
            raise error_cls(spec.display(), returncode, _tail(stderr))
        logger.debug("%s finished", spec.display())


def _tail(text: str) -> str:
    lines = [line for line in text.splitlines() if line.strip()]
    return " | ".join(lines[-_STDERR_TAIL:])
